"""Validation result for plural coverage checks.

Python 3.13+.
"""

from dataclasses import dataclass

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ValidationResult"]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable collection of validation warnings.

    Attributes:
        warnings: Diagnostics in the order they were found

    Example:
        >>> ValidationResult(warnings=()).is_clean
        True
    """

    warnings: tuple[Diagnostic, ...] = ()

    @property
    def is_clean(self) -> bool:
        """True if no warnings were found."""
        return not self.warnings

    @property
    def warning_count(self) -> int:
        """Number of warnings."""
        return len(self.warnings)

    def for_key(self, key: str) -> tuple[Diagnostic, ...]:
        """Return warnings attached to one message key."""
        return tuple(w for w in self.warnings if w.key == key)

    def with_code(self, code: DiagnosticCode) -> tuple[Diagnostic, ...]:
        """Return warnings with the given diagnostic code."""
        return tuple(w for w in self.warnings if w.code is code)

    def format(self) -> str:
        """Format the result as human-readable text."""
        if not self.warnings:
            return "Plural coverage passed: no warnings"
        lines = [f"Warnings ({len(self.warnings)}):"]
        lines.extend(f"  [{w.code.name}]: {w.message}" for w in self.warnings)
        return "\n".join(lines)
