"""Tests for context resolution."""

import pytest

from kubeexec.core.errors import AmbiguousSelectionError, NoSelectionError, NotFoundError
from kubeexec.core.models import Settings
from kubeexec.core.services.contexts import resolve_context
from tests.fakes import FakeLister, FakePicker

CONTEXTS = ("dev", "dev-east", "staging", "prod-eu")


class TestResolveContext:
    def test_exact_match_skips_picker(self, settings):
        picker = FakePicker()

        assert resolve_context("dev", FakeLister(contexts=CONTEXTS), picker, settings) == "dev"
        assert picker.calls == []

    def test_single_substring_match(self, settings):
        picker = FakePicker()

        assert resolve_context("stag", FakeLister(contexts=CONTEXTS), picker, settings) == "staging"
        assert picker.calls == []

    def test_several_matches_go_to_picker(self, settings):
        picker = FakePicker("dev-east")

        result = resolve_context("de", FakeLister(contexts=CONTEXTS), picker, settings)

        assert result == "dev-east"
        assert picker.calls == [(["dev", "dev-east"], "context query: de")]

    def test_empty_query_lists_everything(self, settings):
        picker = FakePicker("staging")

        result = resolve_context("", FakeLister(contexts=CONTEXTS), picker, settings)

        assert result == "staging"
        assert picker.calls[0][0] == list(CONTEXTS)

    def test_ambiguous_without_picker(self, no_picker_settings):
        with pytest.raises(AmbiguousSelectionError):
            resolve_context("de", FakeLister(contexts=CONTEXTS), FakePicker(), no_picker_settings)

    def test_non_interactive_disables_picker(self):
        picker = FakePicker("dev")

        with pytest.raises(AmbiguousSelectionError):
            resolve_context("", FakeLister(contexts=CONTEXTS), picker, Settings(non_interactive=True))
        assert picker.calls == []

    def test_no_contexts(self, settings):
        with pytest.raises(NotFoundError, match="no kubernetes contexts"):
            resolve_context("dev", FakeLister(contexts=()), FakePicker(), settings)

    def test_no_match(self, settings):
        with pytest.raises(NotFoundError, match="no contexts match 'qa'"):
            resolve_context("qa", FakeLister(contexts=CONTEXTS), FakePicker(), settings)

    def test_cancelled_picker(self, settings):
        with pytest.raises(NoSelectionError):
            resolve_context("de", FakeLister(contexts=CONTEXTS), FakePicker(None), settings)

    def test_pick_outside_listing_is_rejected(self, settings):
        with pytest.raises(NoSelectionError):
            resolve_context("de", FakeLister(contexts=CONTEXTS), FakePicker("prod-eu"), settings)
