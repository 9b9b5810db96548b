"""Expand plural-marker strings into per-category messages.

Inverse of folding. A message such as:

    "You have {{PLURAL|one=1 apple|{count} apples}}"

under key "basket" expands into:

    {"basket.one": "You have 1 apple", "basket.other": "You have {count} apples"}

Text around a plural block is preserved identically in every alternative.

Algorithm:
    1. Swap every {name} placeholder out for a slot token, so the '|' and
       '=' handling below cannot touch variable references.
    2. Swap every {{PLURAL|...}} block out for a slot token, remembering
       the block body.
    3. For each block, split the body on '|' into forms. A form labeled
       with a known category targets "<key>.<category>"; anything else
       targets "<key>.other". Each target is seeded once from the
       tokenized message, then the form value replaces the block's slot.
    4. Swap placeholders back into every alternative.

Multiple blocks in one message are aligned by target key, not by block
position. Blocks with different category sets leave unresolved slots in
alternatives that only some blocks produce. This is not validated.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re

from flatplural.constants import (
    FALLBACK_CATEGORY,
    FORM_SEPARATOR,
    PATH_SEPARATOR,
    PLURAL_BLOCK_CLOSE,
    PLURAL_BLOCK_OPEN,
    PLURAL_CATEGORIES,
    PLURAL_DIRECTIVE,
)
from flatplural.diagnostics import ErrorTemplate, PluralExpansionError

from .slots import next_slot_token

__all__ = ["expand_plural", "has_plural_marker"]

logger = logging.getLogger(__name__)

# Deliberately narrow: '|' and '=' never appear inside a placeholder name,
# and the match never spans unrelated braces.
_PLACEHOLDER_PATTERN = re.compile(r"\{[a-zA-Z_-]+\}")

# Non-greedy; block bodies may span lines.
_PLURAL_BLOCK_PATTERN = re.compile(
    re.escape(PLURAL_BLOCK_OPEN) + r"(.*?)" + re.escape(PLURAL_BLOCK_CLOSE),
    re.DOTALL,
)

_LABELED_FORM_PATTERN = re.compile(
    r"\s*(" + "|".join(sorted(PLURAL_CATEGORIES)) + r")\s*=\s*(.*)",
    re.DOTALL,
)


def has_plural_marker(message: str) -> bool:
    """Return True if the message contains the plural directive token."""
    return PLURAL_DIRECTIVE in message


def expand_plural(key: str, message: str) -> dict[str, str] | None:
    """Expand the plural markers of one message into per-category messages.

    Args:
        key: Flat message key used as prefix of the generated keys
        message: Message text, possibly containing plural markers

    Returns:
        Mapping of "<key>.<category>" to the expanded message, or None if
        the message does not contain the plural directive.

    Raises:
        PluralExpansionError: If the directive has no complete plural block,
            or the blocks found produced no 'other' alternative.

    Example:
        >>> expand_plural("msg", "{{PLURAL|one=1 item|N items}}")
        {'msg.one': '1 item', 'msg.other': 'N items'}
        >>> expand_plural("msg", "plain text") is None
        True
    """
    if not has_plural_marker(message):
        return None

    placeholders: dict[str, str] = {}

    def stash_placeholder(match: re.Match[str]) -> str:
        token = next_slot_token()
        placeholders[token] = match.group(0)
        return token

    tokenized = _PLACEHOLDER_PATTERN.sub(stash_placeholder, message)

    blocks: dict[str, str] = {}

    def stash_block(match: re.Match[str]) -> str:
        token = next_slot_token()
        blocks[token] = match.group(1)
        return token

    tokenized = _PLURAL_BLOCK_PATTERN.sub(stash_block, tokenized)

    if not blocks:
        raise PluralExpansionError(ErrorTemplate.plural_block_missing(key), key=key)

    alternatives: dict[str, str] = {}
    for token, body in blocks.items():
        for form in body.split(FORM_SEPARATOR):
            if not form:
                continue

            labeled = _LABELED_FORM_PATTERN.match(form)
            if labeled:
                category, value = labeled.group(1), labeled.group(2)
            else:
                category, value = FALLBACK_CATEGORY, form

            target = f"{key}{PATH_SEPARATOR}{category}"
            seeded = alternatives.setdefault(target, tokenized)
            alternatives[target] = seeded.replace(token, value)

    for target, text in alternatives.items():
        for token, original in placeholders.items():
            text = text.replace(token, original)
        alternatives[target] = text

    if f"{key}{PATH_SEPARATOR}{FALLBACK_CATEGORY}" not in alternatives:
        raise PluralExpansionError(ErrorTemplate.plural_other_missing(key), key=key)

    logger.debug("Expanded key %s into %d plural alternatives", key, len(alternatives))
    return alternatives
