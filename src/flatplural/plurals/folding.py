"""Fold plural-shaped mappings into a single plural-marker string.

A mapping is plural-shaped when every key is a reserved plural category:

    {"one": "1 item", "other": "{count} items"}

folds into:

    "{{PLURAL|one=1 item|{count} items}}"

The 'other' alternative is always emitted last and unlabeled. Expansion
relies on this: an unlabeled form resolves to 'other'.

Limitations:
    Values are embedded without escaping. A value containing '|' or '}}',
    a value starting with whitespace, or an 'other' value that itself looks
    like a labeled form (e.g. "one=...") does not survive expansion
    unchanged: {"one": "x|y", "other": " z"} expands back to
    {"one": "x", "other": "y"}. This is not detected.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from flatplural.constants import (
    FALLBACK_CATEGORY,
    FORM_SEPARATOR,
    LABEL_SEPARATOR,
    PLURAL_BLOCK_CLOSE,
    PLURAL_CATEGORIES,
    PLURAL_DIRECTIVE,
)
from flatplural.diagnostics import ErrorTemplate, PluralStructureError

if TYPE_CHECKING:
    from flatplural.types import HierarchicalValue

__all__ = ["fold_plural"]


def fold_plural(mapping: Mapping[str, HierarchicalValue]) -> str | None:
    """Fold a category-keyed mapping into one plural-marker string.

    Args:
        mapping: Candidate mapping (one level of a nested document)

    Returns:
        The folded marker string, or None if the mapping is not plural-shaped
        (contains nested mappings, or has no category keys at all).

    Raises:
        PluralStructureError: If category keys are mixed with ordinary keys.

    Example:
        >>> fold_plural({"other": "N items", "one": "1 item"})
        '{{PLURAL|one=1 item|N items}}'
        >>> fold_plural({"title": "Cart"}) is None
        True
    """
    has_category = False
    has_other_key = False
    for key, value in mapping.items():
        # Plurals only occur at the lowest level of the structure
        if isinstance(value, Mapping):
            return None
        if key in PLURAL_CATEGORIES:
            has_category = True
        else:
            has_other_key = True

    if not has_category:
        return None

    if has_other_key:
        raise PluralStructureError(ErrorTemplate.plural_keys_mixed(mapping.keys()))

    parts = [PLURAL_DIRECTIVE]
    parts.extend(
        f"{FORM_SEPARATOR}{key}{LABEL_SEPARATOR}{value}"
        for key, value in mapping.items()
        if key != FALLBACK_CATEGORY
    )
    if FALLBACK_CATEGORY in mapping:
        parts.append(f"{FORM_SEPARATOR}{mapping[FALLBACK_CATEGORY]}")
    parts.append(PLURAL_BLOCK_CLOSE)
    return "".join(parts)
