"""Persisted configuration file loading.

The config file is a flat YAML mapping, for example::

    confirm-context: true
    non-interactive: false
    ignore-fzf: false
    confirm-context-keywords: [prod, live, pci]

Decoding is strict: unknown keys, wrong value types and an empty file are all
ConfigError. A missing file simply contributes no settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from kubeexec.core.errors import ConfigError

CONFIG_PATH_ENV_VAR = "KUBEEXEC_CONFIG"
CONFIG_RELATIVE_PATH = Path(".config") / "kubeexec" / "kubeexec.yaml"

CONFIRM_CONTEXT_KEY = "confirm-context"
NON_INTERACTIVE_KEY = "non-interactive"
IGNORE_FZF_KEY = "ignore-fzf"
KEYWORDS_KEY = "confirm-context-keywords"

BOOL_KEYS: tuple[str, ...] = (CONFIRM_CONTEXT_KEY, NON_INTERACTIVE_KEY, IGNORE_FZF_KEY)
KNOWN_KEYS: frozenset[str] = frozenset((*BOOL_KEYS, KEYWORDS_KEY))

_VALUE_HINT = "true/false (YAML boolean)"


@dataclass(frozen=True)
class ConfigFileSettings:
    """Values present in the config file; None means the key was absent."""

    confirm_context: bool | None = None
    non_interactive: bool | None = None
    ignore_fzf: bool | None = None
    confirm_context_keywords: tuple[str, ...] | None = None

    def get_bool(self, key: str) -> bool | None:
        """Look up a boolean setting by its config-file key."""
        if key == CONFIRM_CONTEXT_KEY:
            return self.confirm_context
        if key == NON_INTERACTIVE_KEY:
            return self.non_interactive
        if key == IGNORE_FZF_KEY:
            return self.ignore_fzf
        raise KeyError(key)


def get_config_path() -> Path:
    """Return the config file location, honouring KUBEEXEC_CONFIG."""
    custom = os.getenv(CONFIG_PATH_ENV_VAR)
    if custom:
        return Path(custom).expanduser()
    return Path.home() / CONFIG_RELATIVE_PATH


def load_config(file_path: Path | None = None) -> ConfigFileSettings:
    """Load and strictly decode the config file.

    Args:
        file_path: Path to read (default: get_config_path())

    Returns:
        ConfigFileSettings, empty when the file does not exist

    Raises:
        ConfigError: If the file is unreadable, empty, not a YAML mapping,
                     or contains unknown keys or mistyped values
    """
    path = file_path or get_config_path()
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug(f"No config file at {path}")
        return ConfigFileSettings()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"read config {path}: {e}") from e

    if not content.strip():
        raise ConfigError(f"config {path} is empty (expected {_VALUE_HINT})")

    try:
        loaded: Any = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"parse config {path}: {e}") from e

    if not isinstance(loaded, dict):
        raise ConfigError(
            f"parse config {path}: expected a mapping of settings, "
            f"got {type(loaded).__name__}"
        )

    settings = decode_settings(loaded, path)
    logger.debug(f"Loaded config from {path}: keys={sorted(loaded)}")
    return settings


def decode_settings(data: dict[Any, Any], path: Path) -> ConfigFileSettings:
    """Map parsed key/value pairs onto ConfigFileSettings field by field."""
    unknown = sorted(str(key) for key in data if key not in KNOWN_KEYS)
    if unknown:
        raise ConfigError(
            f"parse config {path}: unknown key(s) {', '.join(unknown)}",
            details=f"Recognized keys: {', '.join(sorted(KNOWN_KEYS))}",
        )

    values: dict[str, bool | None] = {}
    for key in BOOL_KEYS:
        value = data.get(key)
        if key in data and not isinstance(value, bool):
            raise ConfigError(
                f"parse config {path}: {key} must be {_VALUE_HINT}, got {value!r}"
            )
        values[key] = value

    keywords = data.get(KEYWORDS_KEY)
    if KEYWORDS_KEY in data:
        if not isinstance(keywords, list) or not all(
            isinstance(item, str) for item in keywords
        ):
            raise ConfigError(
                f"parse config {path}: {KEYWORDS_KEY} must be a list of strings, "
                f"got {keywords!r}"
            )
        keywords = tuple(keywords)

    return ConfigFileSettings(
        confirm_context=values[CONFIRM_CONTEXT_KEY],
        non_interactive=values[NON_INTERACTIVE_KEY],
        ignore_fzf=values[IGNORE_FZF_KEY],
        confirm_context_keywords=keywords,
    )
