"""Shared fixtures: an isolated environment and default settings."""

import pytest

from kubeexec.core.models import Settings

SETTINGS_ENV_VARS = (
    "KUBEEXEC_CONFIRM_CONTEXT",
    "KUBEEXEC_NON_INTERACTIVE",
    "KUBEEXEC_IGNORE_FZF",
    "KUBEEXEC_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep the developer's env vars and config file out of every test."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config_path = tmp_path / "kubeexec.yaml"
    monkeypatch.setenv("KUBEEXEC_CONFIG", str(config_path))
    return config_path


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def no_picker_settings() -> Settings:
    return Settings(ignore_fzf=True)
