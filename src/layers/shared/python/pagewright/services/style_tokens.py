"""Industry style token table.

Static lookup from vertical to section header copy and tone. A plumber's
"What Our Customers Say" beats SaaS's "Customer Stories"; a clinic's
"Your Journey With Us" beats a factory's "Our Process". Headers carry
framing copy only, never claims about the business.
"""

from types import MappingProxyType
from typing import Mapping

from pagewright.models.classification import Vertical
from pagewright.models.section import SectionType
from pagewright.models.style import IndustryStyle, SectionHeader, ToneTokens


def _h(title: str, subtitle: str = "", eyebrow: str | None = None, cta_text: str | None = None) -> SectionHeader:
    return SectionHeader(title=title, subtitle=subtitle, eyebrow=eyebrow, cta_text=cta_text)


S = SectionType

DEFAULT_STYLE = IndustryStyle(
    tone=ToneTokens(voice="clear", words=("clear", "helpful", "direct")),
    section_headers={
        S.STATS_BAR.value: _h("Proven Results", "Our track record"),
        S.PROBLEM_SOLUTION.value: _h("The Challenge", "And how we solve it"),
        S.FEATURES.value: _h("What We Offer", "Our key services"),
        S.HOW_IT_WORKS.value: _h("How It Works", "Simple steps to get started"),
        S.SOCIAL_PROOF.value: _h("What Clients Say", "Real feedback"),
        S.FAQ.value: _h("Frequently Asked Questions", "Common questions"),
        S.FINAL_CTA.value: _h("Ready to Get Started?", "Take the next step"),
        S.BETA_HERO_TEASER.value: _h("", "", eyebrow="Coming soon"),
        S.BETA_PERKS.value: _h("Early Adopter Perks", "What you get by joining early"),
        S.WAITLIST_PROOF.value: _h("Join the Waitlist", "Be part of the first group"),
        S.BETA_FINAL_CTA.value: _h("Be the First to Know", "Reserve your spot"),
    },
)

STYLE_TOKENS: Mapping[Vertical, IndustryStyle] = MappingProxyType({
    Vertical.LOCAL_SERVICES: IndustryStyle(
        tone=ToneTokens(voice="trustworthy", words=("reliable", "local", "responsive", "honest")),
        section_headers={
            S.STATS_BAR.value: _h("Trusted Locally", "Serving our community"),
            S.FEATURES.value: _h("Our Services", "Professional solutions for your home"),
            S.HOW_IT_WORKS.value: _h("How It Works", "Simple, hassle-free process"),
            S.SOCIAL_PROOF.value: _h("What Our Customers Say", "Reviews from our neighbors"),
            S.FAQ.value: _h("Common Questions", "Answers you need"),
            S.FINAL_CTA.value: _h("Request a Quote", "Call or book online", cta_text="Call Now"),
        },
    ),
    Vertical.CREATIVE: IndustryStyle(
        tone=ToneTokens(voice="expressive", words=("bold", "crafted", "distinctive")),
        section_headers={
            S.STATS_BAR.value: _h("By the Numbers"),
            S.PROBLEM_SOLUTION.value: _h("The Brief", eyebrow="Why it matters"),
            S.FEATURES.value: _h("What We Do"),
            S.HOW_IT_WORKS.value: _h("Our Process"),
            S.SOCIAL_PROOF.value: _h("Client Words"),
            S.FAQ.value: _h("Questions"),
            S.FINAL_CTA.value: _h("Let's Create", "Start a project"),
        },
    ),
    Vertical.CONSULTING: IndustryStyle(
        tone=ToneTokens(voice="credible", words=("strategic", "collaborative", "measurable")),
        section_headers={
            S.STATS_BAR.value: _h("Results That Speak", "Measurable outcomes"),
            S.FEATURES.value: _h("Areas of Practice", "Strategic expertise for complex challenges"),
            S.HOW_IT_WORKS.value: _h("Our Engagement Model", "Collaborative partnership"),
            S.SOCIAL_PROOF.value: _h("Client Impact", "Success stories"),
            S.FAQ.value: _h("Engagement FAQ", "Common questions"),
            S.FINAL_CTA.value: _h("Let's Start a Conversation", "Schedule your consultation"),
        },
    ),
    Vertical.LEGAL: IndustryStyle(
        tone=ToneTokens(voice="authoritative", words=("precise", "discreet", "experienced")),
        section_headers={
            S.STATS_BAR.value: _h("Case Results", "Our track record"),
            S.FEATURES.value: _h("Practice Areas", "Comprehensive legal expertise"),
            S.HOW_IT_WORKS.value: _h("How We Work", "Clear, predictable process"),
            S.SOCIAL_PROOF.value: _h("Client Testimonials", "Trust earned"),
            S.FAQ.value: _h("Legal FAQ", "Common questions"),
            S.FINAL_CTA.value: _h("Schedule a Consultation", "Confidential review"),
        },
    ),
    Vertical.FINANCE: IndustryStyle(
        tone=ToneTokens(voice="assured", words=("disciplined", "transparent", "steady")),
        section_headers={
            S.STATS_BAR.value: _h("Track Record", "Performance that speaks"),
            S.FEATURES.value: _h("Our Approach", "Strategic solutions for growth"),
            S.HOW_IT_WORKS.value: _h("Our Process", "Disciplined methodology"),
            S.SOCIAL_PROOF.value: _h("Client Testimonials", "Partnership stories"),
            S.FAQ.value: _h("Common Questions", "What clients ask us"),
            S.FINAL_CTA.value: _h("Schedule a Consultation", "Confidential discussion"),
        },
    ),
    Vertical.HEALTHCARE: IndustryStyle(
        tone=ToneTokens(voice="caring", words=("compassionate", "calm", "reassuring")),
        section_headers={
            S.STATS_BAR.value: _h("Why Families Trust Us"),
            S.FEATURES.value: _h("How We Support You", "Compassionate care"),
            S.HOW_IT_WORKS.value: _h("Your Journey With Us", "Every step of the way"),
            S.SOCIAL_PROOF.value: _h("Patient Stories", "Real experiences"),
            S.FAQ.value: _h("Your Questions Answered", "Understanding your care"),
            S.FINAL_CTA.value: _h("Schedule a Consultation", "We're here to help"),
        },
    ),
    Vertical.MANUFACTURING: IndustryStyle(
        tone=ToneTokens(voice="solid", words=("precise", "dependable", "capable")),
        section_headers={
            S.STATS_BAR.value: _h("Proven Track Record"),
            S.FEATURES.value: _h("Capabilities", "Precision at scale"),
            S.HOW_IT_WORKS.value: _h("Our Process", "Quality at every stage"),
            S.SOCIAL_PROOF.value: _h("Client Results", "Measurable impact"),
            S.FAQ.value: _h("Technical FAQ", "Specifications and standards"),
            S.FINAL_CTA.value: _h("Request a Quote", "Get your custom assessment"),
        },
    ),
    Vertical.ECOMMERCE: IndustryStyle(
        tone=ToneTokens(voice="upbeat", words=("easy", "fresh", "delightful")),
        section_headers={
            S.STATS_BAR.value: _h("Customer Love"),
            S.FEATURES.value: _h("Shop Our Collection", "Curated for you"),
            S.HOW_IT_WORKS.value: _h("How to Order", "Easy as 1-2-3"),
            S.SOCIAL_PROOF.value: _h("Happy Customers", "Real reviews"),
            S.FAQ.value: _h("Shopping FAQ", "Shipping, returns and more"),
            S.FINAL_CTA.value: _h("Shop Now", cta_text="Browse the Collection"),
        },
    ),
    Vertical.SAAS: IndustryStyle(
        tone=ToneTokens(voice="modern", words=("fast", "efficient", "effortless")),
        section_headers={
            S.STATS_BAR.value: _h("Trusted By", "Companies that rely on us"),
            S.FEATURES.value: _h("Platform Features", "Everything you need to succeed"),
            S.HOW_IT_WORKS.value: _h("How It Works", "Get started in minutes"),
            S.SOCIAL_PROOF.value: _h("Customer Stories", "Success in their own words"),
            S.FAQ.value: _h("Frequently Asked Questions", "Get answers fast"),
            S.FINAL_CTA.value: _h("Ready to Get Started?", "Start today", cta_text="Book a Demo"),
            S.BETA_PERKS.value: _h("Early Access Perks", "What beta users get"),
        },
    ),
    Vertical.DEFAULT: DEFAULT_STYLE,
})

# Loose labels that upstream services use for verticals
_VERTICAL_ALIASES: Mapping[str, Vertical] = MappingProxyType({
    "local": Vertical.LOCAL_SERVICES,
    "localservices": Vertical.LOCAL_SERVICES,
    "local services": Vertical.LOCAL_SERVICES,
    "plumber": Vertical.LOCAL_SERVICES,
    "plumbing": Vertical.LOCAL_SERVICES,
    "hvac": Vertical.LOCAL_SERVICES,
    "electrician": Vertical.LOCAL_SERVICES,
    "contractor": Vertical.LOCAL_SERVICES,
    "tech": Vertical.SAAS,
    "software": Vertical.SAAS,
    "industrial": Vertical.MANUFACTURING,
    "medical": Vertical.HEALTHCARE,
    "health": Vertical.HEALTHCARE,
    "financial": Vertical.FINANCE,
    "fintech": Vertical.FINANCE,
    "agency": Vertical.CREATIVE,
    "design": Vertical.CREATIVE,
    "branding": Vertical.CREATIVE,
    "professional": Vertical.CONSULTING,
    "law": Vertical.LEGAL,
    "e-commerce": Vertical.ECOMMERCE,
    "retail": Vertical.ECOMMERCE,
    "shop": Vertical.ECOMMERCE,
})


def normalize_vertical(value: Vertical | str | None) -> Vertical:
    """Resolve a vertical or a loose industry label, defaulting when unknown."""
    if isinstance(value, Vertical):
        return value
    if not value:
        return Vertical.DEFAULT

    normalized = value.strip().lower()
    try:
        return Vertical(normalized)
    except ValueError:
        return _VERTICAL_ALIASES.get(normalized, Vertical.DEFAULT)


def get_industry_style(vertical: Vertical | str | None) -> IndustryStyle:
    """Get the style entry for a vertical."""
    return STYLE_TOKENS.get(normalize_vertical(vertical), DEFAULT_STYLE)


def get_section_header(vertical: Vertical | str | None, section_type: str) -> SectionHeader | None:
    """Get header copy for a section, falling back to the Default entry.

    Returns:
        The header, or None when neither the vertical nor Default defines one.
    """
    style = get_industry_style(vertical)
    header = style.section_headers.get(section_type)
    if header is None:
        header = DEFAULT_STYLE.section_headers.get(section_type)
    return header


def get_tone(vertical: Vertical | str | None) -> ToneTokens:
    """Get tone tokens for a vertical."""
    return get_industry_style(vertical).tone
