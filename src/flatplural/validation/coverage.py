"""Plural coverage check against CLDR plural rules.

A folded plural message is only complete for a locale if it provides every
category that locale's rules can select. Extra categories are harmless but
usually indicate a copy-paste from another language.

Architecture:
    - check_plural_coverage(): Main entry point
    - _check_message(): Compare one expanded message against the locale

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from flatplural.constants import PATH_SEPARATOR
from flatplural.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    PluralExpansionError,
    ValidationResult,
)
from flatplural.locale_utils import plural_categories_for_locale, sort_categories
from flatplural.plurals import expand_plural

__all__ = ["check_plural_coverage"]

logger = logging.getLogger(__name__)


def _check_message(
    key: str,
    expanded: Mapping[str, str],
    expected: frozenset[str],
    locale_code: str,
) -> list[Diagnostic]:
    prefix = f"{key}{PATH_SEPARATOR}"
    present = {expanded_key.removeprefix(prefix) for expanded_key in expanded}

    warnings = [
        ErrorTemplate.plural_category_missing(key, category, locale_code)
        for category in sort_categories(expected - present)
    ]
    warnings.extend(
        ErrorTemplate.plural_category_unused(key, category, locale_code)
        for category in sort_categories(present - expected)
    )
    return warnings


def check_plural_coverage(
    messages: Mapping[str, str],
    locale_code: str,
) -> ValidationResult:
    """Check that every plural message provides the locale's categories.

    Only values containing plural markers are checked. Values that fail to
    expand are reported as warnings instead of raising.

    Args:
        messages: Flat mapping of dot-joined keys to messages
        locale_code: Locale whose plural rules apply (e.g., "ru", "pt-BR")

    Returns:
        ValidationResult with one warning per missing or unused category

    Example:
        >>> result = check_plural_coverage({"n": "{{PLURAL|one=1|few=2|5}}"}, "ru")
        >>> [w.message for w in result.warnings]
        ["Plural category 'many' missing for key n in locale ru"]
    """
    expected = plural_categories_for_locale(locale_code)
    warnings: list[Diagnostic] = []
    checked = 0

    for key, value in messages.items():
        if not isinstance(value, str):
            continue
        try:
            expanded = expand_plural(key, value)
        except PluralExpansionError as e:
            warnings.append(ErrorTemplate.plural_expansion_skipped(key, str(e)))
            continue
        if expanded is None:
            continue

        checked += 1
        warnings.extend(_check_message(key, expanded, expected, locale_code))

    logger.debug(
        "Checked %d plural messages for locale %s: %d warnings",
        checked,
        locale_code,
        len(warnings),
    )
    return ValidationResult(warnings=tuple(warnings))
