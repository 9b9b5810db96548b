"""Tests for structure.py: flatten and unflatten.

Covers:
- Base case for already-flat levels
- Key qualification and first-occurrence ordering
- Plural folding while flattening, expansion while unflattening
- Collision and path-conflict errors
- Recoverable expansion failures reported to the sink
"""

from __future__ import annotations

import logging

import pytest

from flatplural.diagnostics import Diagnostic, DiagnosticCode, PluralStructureError
from flatplural.structure import flatten, unflatten


class TestFlatten:
    """Nested document -> flat mapping."""

    def test_flat_level_returned_unchanged(self) -> None:
        """A level without mappings is copied as is."""
        doc = {"a": "1", "b": "2"}
        flat = flatten(doc)
        assert flat == doc
        assert flat is not doc

    def test_top_level_category_keys_not_folded(self) -> None:
        """Only nested mappings fold; a flat top level is returned as is."""
        doc = {"one": "1 item", "other": "N items"}
        assert flatten(doc) == doc

    def test_nested_keys_qualified(self) -> None:
        """Descendant keys are prefixed with their parents' keys."""
        doc = {"a": {"b": {"c": "x", "d": "y"}}}
        assert flatten(doc) == {"a.b.c": "x", "a.b.d": "y"}

    def test_first_occurrence_order(self) -> None:
        """Output order follows traversal order."""
        doc = {"a": "1", "b": {"c": "2", "d": {"e": "3"}}, "f": "4"}
        assert list(flatten(doc)) == ["a", "b.c", "b.d.e", "f"]

    def test_plural_subtree_folded(self) -> None:
        """A plural-shaped mapping becomes one marker string."""
        doc = {"cart": {"title": "Cart", "items": {"one": "1 item", "other": "{count} items"}}}
        assert flatten(doc) == {
            "cart.title": "Cart",
            "cart.items": "{{PLURAL|one=1 item|{count} items}}",
        }

    def test_plural_directly_under_root(self) -> None:
        """A plural mapping at the first level folds under its own key."""
        assert flatten({"n": {"other": "N", "one": "1"}}) == {"n": "{{PLURAL|one=1|N}}"}

    def test_empty_subtree_dropped(self) -> None:
        """An empty mapping contributes no flat keys."""
        assert flatten({"a": {}, "b": "x"}) == {"b": "x"}

    def test_mixed_plural_keys_raise(self) -> None:
        """Mixed category/ordinary keys abort flattening."""
        with pytest.raises(PluralStructureError, match="one, foo"):
            flatten({"msg": {"one": "1", "foo": "bar"}})

    def test_dotted_key_collision_raises(self) -> None:
        """A dotted key colliding with a nested path is never overwritten."""
        with pytest.raises(PluralStructureError) as exc_info:
            flatten({"a.b": "x", "a": {"b": "y"}})

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.FLAT_KEY_COLLISION
        assert diagnostic.key == "a.b"

    def test_dotted_key_without_collision_passes(self) -> None:
        """Dotted keys are not rejected on their own."""
        assert flatten({"a.b": "x", "c": {"d": "y"}}) == {"a.b": "x", "c.d": "y"}


class TestUnflatten:
    """Flat mapping -> nested document."""

    def test_shared_prefix_merges(self) -> None:
        """Keys sharing a prefix merge into the same subtree."""
        assert unflatten({"a.b.c": "x", "a.b.d": "y"}) == {"a": {"b": {"c": "x", "d": "y"}}}

    def test_single_segment_at_top_level(self) -> None:
        """A key without separators is assigned at the top level."""
        assert unflatten({"title": "Hello"}) == {"title": "Hello"}

    def test_plain_value_assigned_directly(self) -> None:
        """Values without markers are not expanded."""
        assert unflatten({"a.b": "plain string with no markers"}) == {
            "a": {"b": "plain string with no markers"}
        }

    def test_plural_value_expanded(self) -> None:
        """Plural markers expand into category subkeys."""
        flat = {"cart.items": "{{PLURAL|one=1 item|{count} items}}", "cart.title": "Cart"}
        assert unflatten(flat) == {
            "cart": {"items": {"one": "1 item", "other": "{count} items"}, "title": "Cart"}
        }

    def test_top_level_plural_expanded(self) -> None:
        """A top-level key may carry a plural marker."""
        assert unflatten({"n": "{{PLURAL|one=1|N}}"}) == {"n": {"one": "1", "other": "N"}}

    def test_missing_other_skipped_and_reported(self) -> None:
        """An unexpandable entry is omitted; the rest is converted."""
        reported: list[Diagnostic] = []

        result = unflatten(
            {"a.ok": "fine", "a.bad": "{{PLURAL|one=1 item}}", "b": "also fine"},
            sink=reported.append,
        )

        assert result == {"a": {"ok": "fine"}, "b": "also fine"}
        assert len(reported) == 1
        assert reported[0].code is DiagnosticCode.PLURAL_OTHER_MISSING
        assert reported[0].key == "a.bad"

    def test_unterminated_block_skipped_and_reported(self) -> None:
        """A directive without a complete block drops only that entry."""
        reported: list[Diagnostic] = []

        result = unflatten({"a.b": "{{PLURAL|one=1 item", "a.c": "x"}, sink=reported.append)

        assert result == {"a": {"c": "x"}}
        assert [d.code for d in reported] == [DiagnosticCode.PLURAL_BLOCK_MISSING]
        assert reported[0].key == "a.b"

    def test_missing_other_logged_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        """Without a sink the diagnostic is logged as a warning."""
        with caplog.at_level(logging.WARNING, logger="flatplural"):
            result = unflatten({"msg": "{{PLURAL|one=1 item}}"})

        assert result == {}
        assert "Other not set for key msg" in caplog.text

    def test_scalar_then_group_conflict(self) -> None:
        """A message key cannot also be a group."""
        with pytest.raises(PluralStructureError) as exc_info:
            unflatten({"a": "x", "a.b": "y"})

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.PATH_CONFLICT

    def test_group_then_scalar_conflict(self) -> None:
        """An existing group is never overwritten by a message."""
        with pytest.raises(PluralStructureError):
            unflatten({"a.b": "y", "a": "x"})

    def test_plural_subkeys_merge_with_siblings(self) -> None:
        """Expanded keys merge into an existing subtree."""
        flat = {"m.zero": "none", "m.n": "{{PLURAL|one=1|N}}"}
        assert unflatten(flat) == {"m": {"zero": "none", "n": {"one": "1", "other": "N"}}}
