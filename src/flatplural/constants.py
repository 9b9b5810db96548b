"""Shared constants for flatplural.

Constants are grouped by domain:
- Plural vocabulary: the closed set of recognized category names
- Marker syntax: tokens of the generic plural-marker syntax
- Paths: separator used to join nested keys into flat keys
- Formats: document file extensions using this nesting convention

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Plural vocabulary
    "PLURAL_CATEGORIES",
    "FALLBACK_CATEGORY",
    # Marker syntax
    "PLURAL_DIRECTIVE",
    "PLURAL_BLOCK_OPEN",
    "PLURAL_BLOCK_CLOSE",
    "FORM_SEPARATOR",
    "LABEL_SEPARATOR",
    # Paths
    "PATH_SEPARATOR",
    # Formats
    "FILE_EXTENSIONS",
]

# ============================================================================
# PLURAL VOCABULARY
# ============================================================================

# CLDR plural category names accepted as subkeys of a plural-shaped mapping.
# Closed set; not user-extensible.
PLURAL_CATEGORIES: frozenset[str] = frozenset({"zero", "one", "many", "few", "other", "two"})

# Category of the unlabeled alternative. Always emitted last when folding.
FALLBACK_CATEGORY: str = "other"

# ============================================================================
# MARKER SYNTAX
# ============================================================================

# Presence of this token is the fast-path test for plural markers.
PLURAL_DIRECTIVE: str = "{{PLURAL"

PLURAL_BLOCK_OPEN: str = PLURAL_DIRECTIVE + "|"
PLURAL_BLOCK_CLOSE: str = "}}"

# Separates alternatives inside a block: one=...|few=...|...
FORM_SEPARATOR: str = "|"

# Separates a category label from its value: one=1 item
LABEL_SEPARATOR: str = "="

# ============================================================================
# PATHS
# ============================================================================

# Keys containing the separator make flattening ambiguous (not detected).
PATH_SEPARATOR: str = "."

# ============================================================================
# FORMATS
# ============================================================================

FILE_EXTENSIONS: tuple[str, ...] = (".yml", ".yaml")
