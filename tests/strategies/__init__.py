"""Hypothesis strategies for flatplural property-based testing.

Usage:
    from tests.strategies import nested_documents, plural_mappings
"""

from .messages import message_keys, message_texts, nested_documents, plural_mappings

__all__ = [
    "message_keys",
    "message_texts",
    "nested_documents",
    "plural_mappings",
]
