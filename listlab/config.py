"""Session configuration for the linked list lab shell.

Settings come from an optional JSON or YAML file and are then overridden by
command line flags. Unknown keys are rejected so typos surface immediately
instead of silently falling back to defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
import json
import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

logger = logging.getLogger(__name__)

__all__ = ["ConfigError", "ShellConfig", "load_config", "merge_cli_overrides"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when a configuration file is malformed."""


@dataclass(frozen=True)
class ShellConfig:
    """Resolved settings for one interactive session."""

    input: Path | None = None
    output: Path | None = None
    render: bool = False
    render_format: str = "jpg"
    prompt: str = "> "
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        # runs for replace() too, so CLI overrides are checked as well
        if not self.render_format:
            raise ConfigError("'render_format' must be a non-empty string")

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "ShellConfig":
        known = {item.name for item in fields(cls)}
        unknown = sorted(set(payload) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        values: dict[str, Any] = dict(payload)
        for key in ("input", "output"):
            if values.get(key) is not None:
                values[key] = Path(str(values[key]))
        if "render" in values and not isinstance(values["render"], bool):
            raise ConfigError("'render' must be a boolean")
        for key in ("render_format", "prompt"):
            if key in values and not isinstance(values[key], str):
                raise ConfigError(f"'{key}' must be a string")
        if "log_level" in values:
            level = str(values["log_level"]).upper()
            if level not in LOG_LEVELS:
                raise ConfigError(f"Unsupported log level: {values['log_level']}")
            values["log_level"] = level
        return cls(**values)


def load_config(path: Path | None) -> ShellConfig:
    """Load a :class:`ShellConfig` from *path*, or return defaults for ``None``."""

    if path is None:
        return ShellConfig()

    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            payload = json.loads(text)
        elif suffix in {".yaml", ".yml"}:
            payload = yaml.safe_load(text)
        else:
            raise ConfigError(f"Unsupported config format: {path.suffix or '<none>'}")
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc

    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"{path} must contain a mapping at the top level")
    logger.debug("Loaded configuration from %s", path)
    return ShellConfig.from_mapping(payload)


def merge_cli_overrides(config: ShellConfig, **overrides: Any) -> ShellConfig:
    """Return *config* with every non-``None`` override applied."""

    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)
