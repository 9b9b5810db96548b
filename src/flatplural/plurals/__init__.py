"""Plural marker codec.

Submodules:
    folding   - fold_plural: category-keyed mapping -> {{PLURAL|...}} string
    expansion - expand_plural: {{PLURAL|...}} string -> per-category messages
    slots     - next_slot_token: unique tokens for temporary substitution

Python 3.13+.
"""

from .expansion import expand_plural, has_plural_marker
from .folding import fold_plural
from .slots import next_slot_token

__all__ = [
    "expand_plural",
    "fold_plural",
    "has_plural_marker",
    "next_slot_token",
]
