"""Tests for the flatplural package __init__.py module.

Covers:
- __all__ integrity: every exported name is accessible
- Fallback version when package metadata is unavailable
"""

from __future__ import annotations

import importlib
from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

import flatplural


class TestPublicApi:
    """Exports."""

    def test_all_names_accessible(self) -> None:
        """Every name in __all__ resolves."""
        for name in flatplural.__all__:
            assert getattr(flatplural, name) is not None

    def test_plural_categories(self) -> None:
        """The category set is the closed CLDR vocabulary."""
        assert flatplural.PLURAL_CATEGORIES == {"zero", "one", "two", "few", "many", "other"}

    def test_top_level_round_trip(self) -> None:
        """The top-level functions work together."""
        doc = {"a": {"b": {"one": "1", "other": "n"}}}
        assert flatplural.unflatten(flatplural.flatten(doc)) == doc


class TestVersion:
    """__version__ resolution."""

    def test_version_is_string(self) -> None:
        """A version string is always available."""
        assert isinstance(flatplural.__version__, str)

    def test_dev_version_without_metadata(self) -> None:
        """Uninstalled source trees report a dev version."""
        with patch("importlib.metadata.version", side_effect=PackageNotFoundError):
            reloaded = importlib.reload(flatplural)
            assert reloaded.__version__ == "0.0.0+dev"
        importlib.reload(flatplural)
