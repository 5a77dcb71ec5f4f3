"""CLI settings for create-lcs.

Resolution order (later wins):
    1. built-in defaults
    2. YAML settings file: --config <path>, else $CREATE_LCS_CONFIG,
       else ./.create-lcs.yaml when present
    3. command-line flags (applied by the command modules)

Example .create-lcs.yaml:
    templates:
      - title: acme/lambda-template
        url: https://github.com/acme/lambda-template.git
    default_project_dir: my-service
    default_service_name: my-service
    temp_dir: /tmp/create-lcs-template
    setup_command: [pnpm, setup]
"""

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import cast

import yaml

from lcs_generator.core.errors import ConfigError
from lcs_generator.core.onboarding import (
    DEFAULT_PROJECT_DIR,
    DEFAULT_SERVICE_NAME,
    DEFAULT_TEMPLATES,
)

CONFIG_FILE_NAME = ".create-lcs.yaml"
CONFIG_ENV_VAR = "CREATE_LCS_CONFIG"
DEFAULT_SETUP_COMMAND: tuple[str, ...] = ("pnpm", "setup")


def _default_temp_dir() -> Path:
    return Path(tempfile.gettempdir()) / "create-lcs-template"


@dataclass
class CliConfig:
    """Effective settings for one create-lcs run."""

    templates: tuple[tuple[str, str], ...] = DEFAULT_TEMPLATES
    default_project_dir: str = DEFAULT_PROJECT_DIR
    default_service_name: str = DEFAULT_SERVICE_NAME
    temp_dir: Path = field(default_factory=_default_temp_dir)
    setup_command: tuple[str, ...] = DEFAULT_SETUP_COMMAND


def _parse_templates(raw: object, source: Path) -> tuple[tuple[str, str], ...]:
    if not isinstance(raw, list) or not raw:
        raise ConfigError(f"{source}: 'templates' must be a non-empty list")

    templates: list[tuple[str, str]] = []
    for entry in cast(list[object], raw):
        if not isinstance(entry, dict):
            raise ConfigError(f"{source}: each template needs 'title' and 'url'")
        item = cast(dict[str, object], entry)
        url = item.get("url")
        if not isinstance(url, str) or not url:
            raise ConfigError(f"{source}: template entry is missing 'url'")
        title = item.get("title")
        templates.append((str(title) if title else url, url))
    return tuple(templates)


def _parse_setup_command(raw: object, source: Path) -> tuple[str, ...]:
    if isinstance(raw, str):
        return tuple(raw.split())
    if isinstance(raw, list) and raw:
        return tuple(str(part) for part in cast(list[object], raw))
    raise ConfigError(f"{source}: 'setup_command' must be a string or a list")


def _find_config_file(explicit: Path | None) -> Path | None:
    if explicit is not None:
        return explicit
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    candidate = Path.cwd() / CONFIG_FILE_NAME
    return candidate if candidate.exists() else None


def load_cli_config(config_path: Path | None = None) -> CliConfig:
    """Load settings, applying the YAML settings file over the defaults.

    Args:
        config_path: Explicit settings file (``--config``).

    Raises:
        ConfigError: The file is missing, unreadable or malformed.
    """
    config = CliConfig()
    path = _find_config_file(config_path)
    if path is None:
        return config

    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        raw_data: object = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e

    if raw_data is None:
        return config
    if not isinstance(raw_data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    data = cast(dict[str, object], raw_data)
    if "templates" in data:
        config.templates = _parse_templates(data["templates"], path)
    if data.get("default_project_dir"):
        config.default_project_dir = str(data["default_project_dir"])
    if data.get("default_service_name"):
        config.default_service_name = str(data["default_service_name"])
    if data.get("temp_dir"):
        config.temp_dir = Path(str(data["temp_dir"])).expanduser()
    if "setup_command" in data:
        config.setup_command = _parse_setup_command(data["setup_command"], path)

    return config
