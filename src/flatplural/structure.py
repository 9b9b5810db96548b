"""Flatten nested message documents and rebuild them from flat mappings.

Nested form (as authored by humans):

    {"cart": {"title": "Cart", "items": {"one": "1 item", "other": "{count} items"}}}

Flat form (as stored and diffed by the translation pipeline):

    {"cart.title": "Cart", "cart.items": "{{PLURAL|one=1 item|{count} items}}"}

Plural-shaped subtrees fold into a single marker string when flattening and
expand back into category subkeys when unflattening.

Limitations:
    Keys containing '.' are not detected. Flattening such a document is
    ambiguous; a resulting duplicate flat key raises PluralStructureError.

    Plural values are folded without escaping. Values containing '|' or
    '}}', values starting with whitespace, and 'other' values shaped like
    "one=..." are silently altered by a flatten/unflatten round trip.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from flatplural.constants import PATH_SEPARATOR
from flatplural.diagnostics import (
    ErrorTemplate,
    PluralExpansionError,
    PluralStructureError,
    log_diagnostic,
)
from flatplural.plurals import expand_plural, fold_plural

if TYPE_CHECKING:
    from flatplural.diagnostics import DiagnosticSink
    from flatplural.types import FlatMessages, HierarchicalValue, NestedMessages

__all__ = ["flatten", "unflatten"]

logger = logging.getLogger(__name__)


def flatten(messages: Mapping[str, HierarchicalValue]) -> FlatMessages:
    """Flatten a nested document into dot-joined keys.

    Args:
        messages: Nested document; leaves are scalar messages

    Returns:
        Flat mapping in first-occurrence traversal order

    Raises:
        PluralStructureError: If a mapping mixes plural categories with
            ordinary keys, or two paths produce the same flat key.

    Example:
        >>> flatten({"a": {"b": "x", "c": {"one": "1", "other": "n"}}})
        {'a.b': 'x', 'a.c': '{{PLURAL|one=1|n}}'}
    """
    if not any(isinstance(value, Mapping) for value in messages.values()):
        return dict(messages)

    flat: FlatMessages = {}
    for key, value in messages.items():
        if not isinstance(value, Mapping):
            _store(flat, key, value)
            continue

        folded = fold_plural(value)
        if folded is not None:
            logger.debug("Folded plural mapping under key %s", key)
            _store(flat, key, folded)
            continue

        relabeled = {
            f"{key}{PATH_SEPARATOR}{child_key}": child_value
            for child_key, child_value in value.items()
        }
        for flat_key, flat_value in flatten(relabeled).items():
            _store(flat, flat_key, flat_value)

    return flat


def unflatten(
    messages: Mapping[str, str],
    *,
    sink: DiagnosticSink | None = None,
) -> NestedMessages:
    """Rebuild a nested document from dot-joined keys.

    Plural-marker values expand into category subkeys. A value whose
    markers cannot be expanded is reported to the sink and left out of
    the result; the rest of the mapping is still converted.

    Args:
        messages: Flat mapping of dot-joined keys to messages
        sink: Receives diagnostics for skipped entries (default: logged)

    Returns:
        Nested document

    Raises:
        PluralStructureError: If a key would need to be both a message
            and a group of nested keys.

    Example:
        >>> unflatten({"a.b.c": "x", "a.b.d": "y"})
        {'a': {'b': {'c': 'x', 'd': 'y'}}}
    """
    report = sink if sink is not None else log_diagnostic
    nested: NestedMessages = {}

    for key, value in messages.items():
        try:
            expanded = expand_plural(key, value) if isinstance(value, str) else None
        except PluralExpansionError as e:
            report(e.diagnostic or ErrorTemplate.plural_other_missing(key))
            logger.debug("Skipped key %s: %s", key, e)
            continue

        if expanded is None:
            _place(nested, key, value)
            continue

        for expanded_key, expanded_value in expanded.items():
            _place(nested, expanded_key, expanded_value)

    return nested


def _store(flat: FlatMessages, key: str, value: str) -> None:
    if key in flat:
        raise PluralStructureError(ErrorTemplate.flat_key_collision(key))
    flat[key] = value


def _place(nested: dict[str, Any], key: str, value: str) -> None:
    *parents, leaf = key.split(PATH_SEPARATOR)

    node = nested
    for segment in parents:
        child = node.setdefault(segment, {})
        if not isinstance(child, dict):
            raise PluralStructureError(ErrorTemplate.path_conflict(key, segment))
        node = child

    if isinstance(node.get(leaf), dict):
        raise PluralStructureError(ErrorTemplate.path_conflict(key, leaf))
    node[leaf] = value
