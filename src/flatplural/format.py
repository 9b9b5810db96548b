"""Nested message file format with inline plural markers.

Bundles flatten/unflatten behind one configured object that a translation
pipeline registers for nested YAML message files: documents are decoded by
the pipeline's YAML codec, flattened for storage, and unflattened again on
export.

Thread Safety:
    NestedMessageFormat holds no mutable state; one instance may be shared
    across threads.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from flatplural.constants import FILE_EXTENSIONS
from flatplural.diagnostics import log_diagnostic
from flatplural.structure import flatten, unflatten
from flatplural.validation import check_plural_coverage

if TYPE_CHECKING:
    from flatplural.diagnostics import DiagnosticSink, ValidationResult
    from flatplural.types import FlatMessages, HierarchicalValue, NestedMessages

__all__ = ["NestedMessageFormat"]

logger = logging.getLogger(__name__)


class NestedMessageFormat:
    """Converts nested message documents to and from flat key/value form.

    Args:
        sink: Receives diagnostics for entries skipped during unflatten
            (default: logged at WARNING)

    Example:
        >>> fmt = NestedMessageFormat()
        >>> flat = fmt.flatten({"cart": {"items": {"one": "1 item", "other": "{n} items"}}})
        >>> flat
        {'cart.items': '{{PLURAL|one=1 item|{n} items}}'}
        >>> fmt.unflatten(flat)
        {'cart': {'items': {'one': '1 item', 'other': '{n} items'}}}
    """

    __slots__ = ("_sink",)

    def __init__(self, *, sink: DiagnosticSink | None = None) -> None:
        self._sink: DiagnosticSink = sink if sink is not None else log_diagnostic

    @property
    def file_extensions(self) -> tuple[str, ...]:
        """File extensions of documents using this convention."""
        return FILE_EXTENSIONS

    def flatten(self, messages: Mapping[str, HierarchicalValue]) -> FlatMessages:
        """Flatten a decoded document. See flatplural.structure.flatten."""
        flat = flatten(messages)
        logger.debug("Flattened document into %d messages", len(flat))
        return flat

    def unflatten(self, messages: Mapping[str, str]) -> NestedMessages:
        """Rebuild a nested document. See flatplural.structure.unflatten."""
        return unflatten(messages, sink=self._sink)

    def check_coverage(self, messages: Mapping[str, str], locale_code: str) -> ValidationResult:
        """Check plural messages against a locale and report each warning to the sink."""
        result = check_plural_coverage(messages, locale_code)
        for warning in result.warnings:
            self._sink(warning)
        return result

    def __repr__(self) -> str:
        return f"NestedMessageFormat(extensions={FILE_EXTENSIONS!r})"
