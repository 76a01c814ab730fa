"""Layered settings resolution.

Each boolean setting is resolved with strict precedence:
flag > environment variable > config file > False.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from kubeexec.core.errors import ConfigError
from kubeexec.core.models import DEFAULT_CONFIRM_KEYWORDS, Settings

from .config_loader import (
    CONFIRM_CONTEXT_KEY,
    IGNORE_FZF_KEY,
    NON_INTERACTIVE_KEY,
    ConfigFileSettings,
    load_config,
)

CONFIRM_CONTEXT_ENV_VAR = "KUBEEXEC_CONFIRM_CONTEXT"
NON_INTERACTIVE_ENV_VAR = "KUBEEXEC_NON_INTERACTIVE"
IGNORE_FZF_ENV_VAR = "KUBEEXEC_IGNORE_FZF"

BOOL_VALUE_HINT = "true/True/1/on/ON/false/False/0/off/OFF"

_TRUE_VALUES = frozenset({"true", "True", "1", "on", "ON"})
_FALSE_VALUES = frozenset({"false", "False", "0", "off", "OFF"})


def parse_bool(value: str) -> bool | None:
    """Parse a boolean using the CLI/env vocabulary.

    Returns:
        True or False, or None if the value is not in the vocabulary
    """
    stripped = value.strip()
    if stripped in _TRUE_VALUES:
        return True
    if stripped in _FALSE_VALUES:
        return False
    return None


def normalize_keywords(keywords: Iterable[str]) -> tuple[str, ...]:
    """Trim and lower-case keywords, dropping blanks."""
    return tuple(k.strip().lower() for k in keywords if k.strip())


class ConfigSource:
    """Reads the config file at most once per run."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._settings: ConfigFileSettings | None = None

    @property
    def settings(self) -> ConfigFileSettings:
        if self._settings is None:
            self._settings = load_config(self._path)
        return self._settings


def resolve_bool_setting(
    flag_provided: bool,
    flag_value: bool,
    env_var: str,
    config_key: str,
    *,
    source: ConfigSource | None = None,
) -> bool:
    """Resolve one boolean setting.

    Args:
        flag_provided: Whether the flag appeared on the command line
        flag_value: Value of the flag (used only when provided)
        env_var: Environment variable consulted second
        config_key: Config file key consulted third
        source: Shared config source so the file is loaded once per run

    Raises:
        ConfigError: If the env value is not a recognised boolean or the
                     config file is invalid
    """
    if flag_provided:
        return flag_value

    raw = os.environ.get(env_var)
    if raw is not None:
        parsed = parse_bool(raw)
        if parsed is None:
            raise ConfigError(
                f"invalid {env_var} value {raw!r} (use {BOOL_VALUE_HINT})"
            )
        logger.debug(f"{config_key}={parsed} from {env_var}")
        return parsed

    config_value = (source or ConfigSource()).settings.get_bool(config_key)
    if config_value is not None:
        logger.debug(f"{config_key}={config_value} from config file")
        return config_value
    return False


def resolve_keywords(source: ConfigSource | None = None) -> tuple[str, ...]:
    """Return configured confirm keywords, or the built-in defaults."""
    configured = (source or ConfigSource()).settings.confirm_context_keywords
    if configured:
        normalized = normalize_keywords(configured)
        if normalized:
            return normalized
    return DEFAULT_CONFIRM_KEYWORDS


def resolve_settings(
    *,
    confirm_context: bool | None = None,
    non_interactive: bool | None = None,
    ignore_fzf: bool | None = None,
    config_path: Path | None = None,
) -> Settings:
    """Build the immutable Settings for a run.

    Each keyword argument is the flag value, or None when the flag was not
    given on the command line.
    """
    source = ConfigSource(config_path)
    confirm = resolve_bool_setting(
        confirm_context is not None,
        bool(confirm_context),
        CONFIRM_CONTEXT_ENV_VAR,
        CONFIRM_CONTEXT_KEY,
        source=source,
    )
    settings = Settings(
        confirm_context=confirm,
        non_interactive=resolve_bool_setting(
            non_interactive is not None,
            bool(non_interactive),
            NON_INTERACTIVE_ENV_VAR,
            NON_INTERACTIVE_KEY,
            source=source,
        ),
        ignore_fzf=resolve_bool_setting(
            ignore_fzf is not None,
            bool(ignore_fzf),
            IGNORE_FZF_ENV_VAR,
            IGNORE_FZF_KEY,
            source=source,
        ),
        # keywords only matter to an enabled gate
        confirm_keywords=(
            resolve_keywords(source) if confirm else DEFAULT_CONFIRM_KEYWORDS
        ),
    )
    logger.debug(f"Resolved settings: {settings}")
    return settings
