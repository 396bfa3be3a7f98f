"""Configuration loading for labsh."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from labsh.errors import ConfigError
from labsh.models import ShellConfig

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".labsh"
CONFIG_FILE = CONFIG_DIR / "config.json"

# Environment variable -> ShellConfig field.
ENV_FIELDS = {
    "LABSH_PROMPT": "prompt",
    "LABSH_BANNER": "banner",
    "LABSH_MAX_LINE": "max_line_length",
    "LABSH_ECHO": "echo",
    "LABSH_REPORT_STATUS": "report_status",
}


def config_path() -> Path:
    """Return the config file location, honoring LABSH_CONFIG."""
    override = os.environ.get("LABSH_CONFIG", "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_FILE


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError:
        log.debug("no config file at %s", path)
        return {}
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path} is not valid JSON: {e}") from e
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e}") from e
    if not isinstance(payload, dict):
        raise ConfigError(f"{path} must contain a JSON object")
    return payload


def _read_env() -> dict[str, str]:
    values = {}
    for env_key, field in ENV_FIELDS.items():
        value = os.environ.get(env_key)
        if value is not None:
            values[field] = value
    return values


def load_config(**overrides: Any) -> ShellConfig:
    """Build the shell config from defaults, config file, env and overrides.

    Later layers win. Overrides whose value is None are ignored so CLI flags
    that were not given leave the lower layers alone.
    """
    path = config_path()
    data = _read_config_file(path)
    data.update(_read_env())
    data.update({k: v for k, v in overrides.items() if v is not None})
    log.debug("config data from %s: %r", path, data)
    try:
        return ShellConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e
