"""Type aliases for the message document domain.

Provides semantic type aliases used throughout the package and by user code
when annotating flatten/unflatten call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from typing import TypeAlias

__all__ = [
    "FlatMessages",
    "HierarchicalValue",
    "MessageKey",
    "NestedMessages",
    "Scalar",
]

Scalar: TypeAlias = str
"""Leaf message text (e.g., 'Hello', '{{PLURAL|one=1 item|{count} items}}')."""

HierarchicalValue: TypeAlias = "Scalar | Mapping[str, HierarchicalValue]"
"""Either a scalar message or a nested mapping of the same kind."""

NestedMessages: TypeAlias = dict[str, HierarchicalValue]
"""Human-authored nested document (e.g., decoded from YAML)."""

MessageKey: TypeAlias = str
"""Dot-joined path of a message (e.g., 'activerecord.errors.blank')."""

FlatMessages: TypeAlias = dict[MessageKey, Scalar]
"""Single-level mapping from dot-joined paths to scalar messages."""
