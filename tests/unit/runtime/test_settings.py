"""Tests for layered settings resolution."""

from unittest.mock import patch

import pytest

from kubeexec.core.errors import ConfigError
from kubeexec.core.models import DEFAULT_CONFIRM_KEYWORDS, Settings
from kubeexec.runtime.config.config_loader import load_config
from kubeexec.runtime.config.settings import (
    CONFIRM_CONTEXT_ENV_VAR,
    NON_INTERACTIVE_ENV_VAR,
    ConfigSource,
    normalize_keywords,
    parse_bool,
    resolve_bool_setting,
    resolve_settings,
)


@pytest.mark.parametrize("value", ["true", "True", "1", "on", "ON", " true "])
def test_parse_bool_true_values(value):
    assert parse_bool(value) is True


@pytest.mark.parametrize("value", ["false", "False", "0", "off", "OFF"])
def test_parse_bool_false_values(value):
    assert parse_bool(value) is False


@pytest.mark.parametrize("value", ["yes", "TRUE", "", "2", "On"])
def test_parse_bool_rejects_other_values(value):
    assert parse_bool(value) is None


class TestPrecedence:
    def test_default_is_false(self):
        assert resolve_bool_setting(False, True, CONFIRM_CONTEXT_ENV_VAR, "confirm-context") is False

    def test_config_used_when_nothing_else_set(self, isolated_environment):
        isolated_environment.write_text("confirm-context: true\n")

        assert resolve_bool_setting(False, False, CONFIRM_CONTEXT_ENV_VAR, "confirm-context") is True

    def test_env_overrides_config(self, isolated_environment, monkeypatch):
        isolated_environment.write_text("confirm-context: true\n")
        monkeypatch.setenv(CONFIRM_CONTEXT_ENV_VAR, "false")

        assert resolve_bool_setting(False, False, CONFIRM_CONTEXT_ENV_VAR, "confirm-context") is False

    def test_flag_overrides_env_and_config(self, isolated_environment, monkeypatch):
        isolated_environment.write_text("non-interactive: true\n")
        monkeypatch.setenv(NON_INTERACTIVE_ENV_VAR, "on")

        assert resolve_bool_setting(True, False, NON_INTERACTIVE_ENV_VAR, "non-interactive") is False

    def test_flag_skips_invalid_env_and_config(self, isolated_environment, monkeypatch):
        isolated_environment.write_text("bogus: true\n")
        monkeypatch.setenv(CONFIRM_CONTEXT_ENV_VAR, "maybe")

        assert resolve_bool_setting(True, True, CONFIRM_CONTEXT_ENV_VAR, "confirm-context") is True

    def test_invalid_env_value_names_variable_and_value(self, monkeypatch):
        monkeypatch.setenv(CONFIRM_CONTEXT_ENV_VAR, "yes")

        with pytest.raises(ConfigError) as excinfo:
            resolve_bool_setting(False, False, CONFIRM_CONTEXT_ENV_VAR, "confirm-context")

        assert CONFIRM_CONTEXT_ENV_VAR in excinfo.value.message
        assert "'yes'" in excinfo.value.message

    def test_env_skips_invalid_config(self, isolated_environment, monkeypatch):
        isolated_environment.write_text("")
        monkeypatch.setenv(CONFIRM_CONTEXT_ENV_VAR, "1")

        assert resolve_bool_setting(False, False, CONFIRM_CONTEXT_ENV_VAR, "confirm-context") is True

    def test_invalid_config_is_fatal(self, isolated_environment):
        isolated_environment.write_text("confirm-context: \"true\"\n")

        with pytest.raises(ConfigError):
            resolve_bool_setting(False, False, CONFIRM_CONTEXT_ENV_VAR, "confirm-context")


def test_config_file_read_once_per_run(isolated_environment):
    isolated_environment.write_text("confirm-context: true\n")

    with patch(
        "kubeexec.runtime.config.settings.load_config", wraps=load_config
    ) as mock_load:
        resolve_settings()

    mock_load.assert_called_once()


def test_config_source_caches(isolated_environment):
    isolated_environment.write_text("ignore-fzf: true\n")
    source = ConfigSource()

    with patch(
        "kubeexec.runtime.config.settings.load_config", wraps=load_config
    ) as mock_load:
        assert source.settings.ignore_fzf is True
        assert source.settings.ignore_fzf is True

    mock_load.assert_called_once()


def test_normalize_keywords():
    assert normalize_keywords([" Prod ", "", "  ", "LIVE"]) == ("prod", "live")


class TestResolveSettings:
    def test_defaults(self):
        assert resolve_settings() == Settings()

    def test_flags(self):
        settings = resolve_settings(confirm_context=True, non_interactive=True, ignore_fzf=False)

        assert settings.confirm_context is True
        assert settings.non_interactive is True
        assert settings.ignore_fzf is False

    def test_keywords_replace_defaults(self, isolated_environment):
        isolated_environment.write_text("confirm-context: true\nconfirm-context-keywords: [' PCI ', Staging]\n")

        assert resolve_settings().confirm_keywords == ("pci", "staging")

    def test_blank_keywords_keep_defaults(self, isolated_environment):
        isolated_environment.write_text("confirm-context: true\nconfirm-context-keywords: ['  ', '']\n")

        assert resolve_settings().confirm_keywords == DEFAULT_CONFIRM_KEYWORDS

    def test_empty_keyword_list_keeps_defaults(self, isolated_environment):
        isolated_environment.write_text("confirm-context: true\nconfirm-context-keywords: []\n")

        assert resolve_settings().confirm_keywords == DEFAULT_CONFIRM_KEYWORDS

    def test_all_flags_given_with_gate_off_skip_config(self, isolated_environment):
        isolated_environment.write_text("confirm-context-keywords: [pci\n")

        settings = resolve_settings(confirm_context=False, non_interactive=False, ignore_fzf=True)

        assert settings.ignore_fzf is True
        assert settings.confirm_keywords == DEFAULT_CONFIRM_KEYWORDS

    def test_enabled_gate_reads_keywords(self, isolated_environment):
        isolated_environment.write_text("confirm-context-keywords: [pci\n")

        with pytest.raises(ConfigError):
            resolve_settings(confirm_context=True, non_interactive=False, ignore_fzf=True)

    def test_settings_are_immutable(self):
        settings = resolve_settings()

        with pytest.raises(AttributeError):
            settings.confirm_context = True  # type: ignore[misc]


@pytest.mark.parametrize(
    ("ignore_fzf", "non_interactive", "enabled"),
    [(False, False, True), (True, False, False), (False, True, False)],
)
def test_picker_enabled(ignore_fzf, non_interactive, enabled):
    settings = Settings(ignore_fzf=ignore_fzf, non_interactive=non_interactive)

    assert settings.picker_enabled is enabled
