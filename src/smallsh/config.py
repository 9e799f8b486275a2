"""Configuration loading for smallsh."""

import json
import logging
import os
from pathlib import Path

from smallsh.models import ShellConfig

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".smallsh"
CONFIG_FILE = CONFIG_DIR / "config.json"
CONFIG_PATH_ENV = "SMALLSH_CONFIG"
PROMPT_ENV = "SMALLSH_PROMPT"


def config_path(path: str | Path | None = None) -> Path:
    """Resolve the config file location: explicit path, then env, then default."""
    if path is not None:
        return Path(path)
    override = os.environ.get(CONFIG_PATH_ENV, "").strip()
    if override:
        return Path(override)
    return CONFIG_FILE


def load_config(path: str | Path | None = None) -> ShellConfig:
    """Load the shell configuration, falling back to defaults when absent.

    Raises ValueError (JSONDecodeError or pydantic's ValidationError) when
    the file exists but is not a valid configuration.
    """
    resolved = config_path(path)
    data: dict = {}
    if resolved.exists():
        with open(resolved, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{resolved}: expected a JSON object")
        log.debug("loaded config from %s", resolved)
    else:
        log.debug("no config at %s, using defaults", resolved)

    prompt = os.environ.get(PROMPT_ENV)
    if prompt is not None:
        data["prompt"] = prompt
    return ShellConfig.model_validate(data)
