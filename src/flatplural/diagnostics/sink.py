"""Diagnostic sinks for recoverable conversion problems.

A sink receives non-fatal diagnostics (e.g., a plural message that could
not be expanded) without altering control flow.

Python 3.13+.
"""

import logging
from collections.abc import Callable
from typing import TypeAlias

from .codes import Diagnostic

__all__ = ["DiagnosticSink", "log_diagnostic"]

logger = logging.getLogger(__name__)

DiagnosticSink: TypeAlias = Callable[[Diagnostic], None]
"""Callable accepting one Diagnostic; list.append is a valid sink."""


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Default sink: log the diagnostic at its severity."""
    level = logging.WARNING if diagnostic.severity == "warning" else logging.ERROR
    logger.log(level, "%s: %s", diagnostic.code.name, diagnostic.message)
