"""flatplural - nested message documents <-> flat keys with inline plurals.

Converts human-authored nested message documents (Ruby on Rails style YAML,
with plural forms as zero/one/two/few/many/other subkeys) into flat mappings
keyed by dot-joined paths, folding plural subkeys into a single
{{PLURAL|...}} marker string, and back.

Public API:
    flatten - Nested document -> flat mapping
    unflatten - Flat mapping -> nested document
    fold_plural - Category-keyed mapping -> plural marker string
    expand_plural - Plural marker string -> per-category messages
    NestedMessageFormat - Configured flatten/unflatten with diagnostic sink
    check_plural_coverage - Compare plural messages with CLDR plural rules

Exceptions:
    FlatPluralError - Base exception class
    PluralStructureError - Document shape cannot be converted
    PluralExpansionError - Plural marker without an 'other' alternative

Submodules:
    flatplural.plurals - Plural marker codec
    flatplural.diagnostics - Error types, codes, formatter and sinks
    flatplural.validation - Plural coverage checks (requires Babel)
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .constants import PLURAL_CATEGORIES
from .diagnostics import (
    Diagnostic,
    FlatPluralError,
    PluralExpansionError,
    PluralStructureError,
)
from .format import NestedMessageFormat
from .plurals import expand_plural, fold_plural
from .structure import flatten, unflatten
from .validation import check_plural_coverage

# Version information - Auto-populated from package metadata
try:
    __version__ = _get_version("flatplural")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "PLURAL_CATEGORIES",
    "Diagnostic",
    "FlatPluralError",
    "NestedMessageFormat",
    "PluralExpansionError",
    "PluralStructureError",
    "__version__",
    "check_plural_coverage",
    "expand_plural",
    "flatten",
    "fold_plural",
    "unflatten",
]
