"""Quickstart example for flatplural.

This example demonstrates converting a nested Rails-style message document
to the flat form stored by a translation pipeline, and back.

Note: Documents are plain dicts here. In production they come from the
pipeline's YAML codec.
"""

from flatplural import NestedMessageFormat, PluralStructureError, expand_plural, fold_plural
from flatplural.diagnostics import Diagnostic, DiagnosticFormatter, OutputFormat

# Example 1: Flatten a nested document
print("=" * 50)
print("Example 1: Flatten")
print("=" * 50)

fmt = NestedMessageFormat()
doc = {
    "cart": {
        "title": "Your cart",
        "items": {"one": "1 item", "other": "{count} items"},
    },
    "greeting": "Hello, {name}!",
}

flat = fmt.flatten(doc)
for key, value in flat.items():
    print(f"{key} = {value}")
# Output:
# cart.title = Your cart
# cart.items = {{PLURAL|one=1 item|{count} items}}
# greeting = Hello, {name}!

# Example 2: Unflatten restores the nested document
print("\n" + "=" * 50)
print("Example 2: Unflatten")
print("=" * 50)

print(fmt.unflatten(flat) == doc)
# Output: True

# Example 3: Plural codec on its own
print("\n" + "=" * 50)
print("Example 3: Fold and expand")
print("=" * 50)

marker = fold_plural({"other": "{count} files", "one": "1 file"})
print(marker)
# Output: {{PLURAL|one=1 file|{count} files}}

print(expand_plural("files", f"Deleted {marker}."))
# Output: {'files.one': 'Deleted 1 file.', 'files.other': 'Deleted {count} files.'}

# Example 4: Error handling
print("\n" + "=" * 50)
print("Example 4: Errors and diagnostics")
print("=" * 50)

try:
    fmt.flatten({"broken": {"one": "1 item", "title": "Items"}})
except PluralStructureError as e:
    print(f"Rejected: {e}")
# Output: Rejected: Reserved plural keywords mixed with other keys: one, title.

reported: list[Diagnostic] = []
collecting = NestedMessageFormat(sink=reported.append)
print(collecting.unflatten({"ok": "fine", "bad": "{{PLURAL|one=1 item}}"}))
# Output: {'ok': 'fine'}

formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
print(formatter.format_all(reported))
# Output: PLURAL_OTHER_MISSING: Other not set for key bad

# Example 5: Check plural coverage for a locale
print("\n" + "=" * 50)
print("Example 5: Plural coverage (Russian)")
print("=" * 50)

result = fmt.check_coverage(flat, "ru")
print(result.format())
# Output:
# Warnings (2):
#   [PLURAL_CATEGORY_MISSING]: Plural category 'few' missing for key cart.items in locale ru
#   [PLURAL_CATEGORY_MISSING]: Plural category 'many' missing for key cart.items in locale ru
