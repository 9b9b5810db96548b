"""Locale utilities backed by Babel's CLDR data.

Centralizes locale normalization and the lookup of which plural
categories a locale actually selects.

Python 3.13+. Depends on Babel for CLDR data.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError

from flatplural.constants import FALLBACK_CATEGORY

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "CLDR_CATEGORY_ORDER",
    "get_babel_locale",
    "normalize_locale",
    "plural_categories_for_locale",
    "sort_categories",
]

logger = logging.getLogger(__name__)

# Canonical CLDR ordering, used to report categories deterministically.
CLDR_CATEGORY_ORDER: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

_FALLBACK_LOCALE = "en"


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def plural_categories_for_locale(locale_code: str) -> frozenset[str]:
    """Return the plural categories selected by a locale's CLDR rules.

    'other' is always included. Unknown or malformed locales fall back
    to English rules with a logged warning.

    Example:
        >>> sorted(plural_categories_for_locale("ru"))
        ['few', 'many', 'one', 'other']
    """
    try:
        locale_obj = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s", locale_code, e, _FALLBACK_LOCALE
        )
        locale_obj = get_babel_locale(_FALLBACK_LOCALE)

    return frozenset(locale_obj.plural_form.tags) | {FALLBACK_CATEGORY}


def sort_categories(categories: frozenset[str] | set[str]) -> list[str]:
    """Sort category names in CLDR order."""
    return sorted(categories, key=CLDR_CATEGORY_ORDER.index)
