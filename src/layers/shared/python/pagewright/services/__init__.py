"""Pipeline services: classification, extraction, assembly."""

from pagewright.services.content_ranker import (
    enhance_pillars,
    extract_authority_signals,
    extract_content,
    optimize_faqs,
    rank_testimonials,
    select_headline,
    select_statistics,
)
from pagewright.services.page_compiler import PageCompiler
from pagewright.services.page_quality import validate_page_quality
from pagewright.services.section_assembler import assemble, compile_sections
from pagewright.services.style_tokens import (
    get_industry_style,
    get_section_header,
    get_tone,
    normalize_vertical,
)
from pagewright.services.vertical_classifier import (
    classify,
    confirm_vertical,
    option_to_vertical,
    vertical_display_name,
)

__all__ = [
    "PageCompiler",
    "assemble",
    "classify",
    "compile_sections",
    "confirm_vertical",
    "enhance_pillars",
    "extract_authority_signals",
    "extract_content",
    "get_industry_style",
    "get_section_header",
    "get_tone",
    "normalize_vertical",
    "optimize_faqs",
    "option_to_vertical",
    "rank_testimonials",
    "select_headline",
    "select_statistics",
    "validate_page_quality",
    "vertical_display_name",
]
