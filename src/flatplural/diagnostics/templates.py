"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def plural_keys_mixed(keys: Iterable[str]) -> Diagnostic:
        """Plural categories mixed with ordinary keys in one mapping.

        Args:
            keys: All keys of the offending mapping, in natural order

        Returns:
            Diagnostic for PLURAL_KEYS_MIXED
        """
        joined = ", ".join(str(key) for key in keys)
        msg = f"Reserved plural keywords mixed with other keys: {joined}."
        return Diagnostic(
            code=DiagnosticCode.PLURAL_KEYS_MIXED,
            message=msg,
            hint="Plural mappings may only contain zero, one, two, few, many and other",
        )

    @staticmethod
    def flat_key_collision(key: str) -> Diagnostic:
        """Two nested paths flatten to the same dot-joined key.

        Args:
            key: The colliding flat key

        Returns:
            Diagnostic for FLAT_KEY_COLLISION
        """
        msg = f"Flat key '{key}' produced more than once"
        return Diagnostic(
            code=DiagnosticCode.FLAT_KEY_COLLISION,
            message=msg,
            key=key,
            hint="Keys containing '.' are ambiguous when flattened; rename them",
        )

    @staticmethod
    def path_conflict(key: str, segment: str) -> Diagnostic:
        """A flat key needs a mapping where a scalar already sits, or vice versa.

        Args:
            key: The flat key being placed
            segment: The path segment where the conflict occurred

        Returns:
            Diagnostic for PATH_CONFLICT
        """
        msg = f"Cannot place '{key}': segment '{segment}' is both a message and a group"
        return Diagnostic(
            code=DiagnosticCode.PATH_CONFLICT,
            message=msg,
            key=key,
            hint="A key cannot hold a message and nested keys at the same time",
        )

    @staticmethod
    def plural_other_missing(key: str) -> Diagnostic:
        """Plural marker without an 'other' alternative.

        Args:
            key: Message key whose value failed to expand

        Returns:
            Diagnostic for PLURAL_OTHER_MISSING
        """
        msg = f"Other not set for key {key}"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_OTHER_MISSING,
            message=msg,
            key=key,
            hint="Add an unlabeled last alternative: {{PLURAL|one=...|...}}",
            severity="warning",
        )

    @staticmethod
    def plural_block_missing(key: str) -> Diagnostic:
        """Plural directive without a complete {{PLURAL|...}} block.

        Args:
            key: Message key whose value failed to expand

        Returns:
            Diagnostic for PLURAL_BLOCK_MISSING
        """
        msg = f"No complete plural block for key {key}"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_BLOCK_MISSING,
            message=msg,
            key=key,
            hint="Close the plural block with '}}': {{PLURAL|one=...|...}}",
            severity="warning",
        )

    @staticmethod
    def plural_category_missing(key: str, category: str, locale: str) -> Diagnostic:
        """Locale selects a category the message does not provide.

        Args:
            key: Message key
            category: Missing plural category
            locale: Locale whose CLDR rules were checked

        Returns:
            Diagnostic for PLURAL_CATEGORY_MISSING
        """
        msg = f"Plural category '{category}' missing for key {key} in locale {locale}"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_CATEGORY_MISSING,
            message=msg,
            key=key,
            hint=f"Add a '{category}=' alternative; '{locale}' falls back to 'other' otherwise",
            severity="warning",
        )

    @staticmethod
    def plural_category_unused(key: str, category: str, locale: str) -> Diagnostic:
        """Message provides a category the locale never selects.

        Args:
            key: Message key
            category: Unused plural category
            locale: Locale whose CLDR rules were checked

        Returns:
            Diagnostic for PLURAL_CATEGORY_UNUSED
        """
        msg = f"Plural category '{category}' for key {key} is never used in locale {locale}"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_CATEGORY_UNUSED,
            message=msg,
            key=key,
            severity="warning",
        )

    @staticmethod
    def plural_expansion_skipped(key: str, reason: str) -> Diagnostic:
        """Coverage check could not expand a message.

        Args:
            key: Message key
            reason: Message of the underlying expansion error

        Returns:
            Diagnostic for PLURAL_EXPANSION_SKIPPED
        """
        msg = f"Skipped plural coverage check for key {key}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_EXPANSION_SKIPPED,
            message=msg,
            key=key,
            severity="warning",
        )
