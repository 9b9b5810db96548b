"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Structure errors (mixed plural keys, key collisions)
        2000-2999: Expansion errors (unresolvable plural markers)
        3000-3999: Validation warnings (plural coverage against CLDR rules)
    """

    # Structure errors (1000-1999)
    PLURAL_KEYS_MIXED = 1001
    FLAT_KEY_COLLISION = 1002
    PATH_CONFLICT = 1003

    # Expansion errors (2000-2999)
    PLURAL_OTHER_MISSING = 2001
    PLURAL_BLOCK_MISSING = 2002

    # Validation warnings (3000-3999)
    PLURAL_CATEGORY_MISSING = 3001
    PLURAL_CATEGORY_UNUSED = 3002
    PLURAL_EXPANSION_SKIPPED = 3003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        key: Message key (flat path) the diagnostic refers to
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    key: str | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in the default multi-line style.

        Example output:
            error[PLURAL_KEYS_MIXED]: Reserved plural keywords mixed with other keys: one, foo.
              --> key: cart.items
              = help: Move the non-plural keys out of the plural mapping

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
