"""
i18n.py — Two-Locale Description Switch
========================================
Every Step description is authored twice (English + Spanish) right where
the simulator emits it.  This module only decides WHICH of the two
strings a run uses.

Unknown or missing locales fall back to DEFAULT_LOCALE silently, so
`generate_steps("fr")` yields exactly the English trace.
"""

from typing import Optional, Tuple

SUPPORTED_LOCALES: Tuple[str, ...] = ("en", "es")
DEFAULT_LOCALE: str = "en"


def resolve_locale(locale: Optional[str]) -> str:
    """Return `locale` if supported, else the default locale."""
    if locale in SUPPORTED_LOCALES:
        return locale
    return DEFAULT_LOCALE


def pick(locale: Optional[str], en: str, es: str) -> str:
    """Choose the string for `locale` (resolved with fallback)."""
    return es if resolve_locale(locale) == "es" else en


__all__ = ["SUPPORTED_LOCALES", "DEFAULT_LOCALE", "resolve_locale", "pick"]
