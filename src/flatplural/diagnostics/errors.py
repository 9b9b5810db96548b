"""Exception hierarchy with structured diagnostics.

All exceptions may carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "FlatPluralError",
    "PluralExpansionError",
    "PluralStructureError",
]


class FlatPluralError(Exception):
    """Base exception for all flatplural errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FlatPluralError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class PluralStructureError(FlatPluralError):
    """Document shape cannot be converted.

    Raised when a mapping mixes reserved plural categories with ordinary
    keys, or when two paths collide while flattening or unflattening.
    Fatal to the current conversion; never recovered internally.
    """


class PluralExpansionError(FlatPluralError):
    """Plural marker found but no 'other' alternative resolved.

    Recoverable: unflatten reports the diagnostic and skips the entry.

    Attributes:
        key: Message key whose value failed to expand
    """

    def __init__(self, message: str | Diagnostic, *, key: str = "") -> None:
        """Initialize PluralExpansionError.

        Args:
            message: Error message string OR Diagnostic object
            key: Message key whose value failed to expand
        """
        super().__init__(message)
        self.key = key
