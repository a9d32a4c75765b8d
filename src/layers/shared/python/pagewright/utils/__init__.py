"""Utility helpers."""

from pagewright.utils.exceptions import ContractError, PagewrightError

__all__ = ["ContractError", "PagewrightError"]
