"""Diagnostic system for flatplural errors.

Provides structured error diagnostics with codes, hints and message keys.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import FlatPluralError, PluralExpansionError, PluralStructureError
from .formatter import DiagnosticFormatter, OutputFormat
from .sink import DiagnosticSink, log_diagnostic
from .templates import ErrorTemplate
from .validation import ValidationResult

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DiagnosticSink",
    "ErrorTemplate",
    "FlatPluralError",
    "OutputFormat",
    "PluralExpansionError",
    "PluralStructureError",
    "ValidationResult",
    "log_diagnostic",
]
