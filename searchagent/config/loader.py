"""Configuration loading utilities."""

import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from searchagent.config.schema import Config
from searchagent.searcher.service import DEFAULT_BASE_URLS


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".searchagent" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file or create default.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("config root must be an object")
            data = _migrate_config(data)
            return Config.model_validate(data)
        except (json.JSONDecodeError, ValidationError, ValueError) as e:
            logger.warning("Failed to load config from {}: {}", path, e)
            logger.warning("Using default configuration.")

    return Config()


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(by_alias=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _migrate_config(data: dict) -> dict:
    """Migrate old config formats to current."""
    search_cfg = _section(data, "search")
    backends_cfg = _section(search_cfg, "backends")

    # Move legacy top-level SEARX_API -> search.backends.api.baseUrl
    legacy_searx = data.pop("SEARX_API", None)
    api_cfg = _section(backends_cfg, "api")
    if legacy_searx and not (api_cfg.get("baseUrl") or api_cfg.get("base_url")):
        api_cfg["baseUrl"] = legacy_searx

    # The HTTP server port is not part of this package's config
    data.pop("SERVER_PORT", None)

    # Fill default backend base URLs when missing/empty
    for kind, base_url in DEFAULT_BASE_URLS.items():
        backend_cfg = _section(backends_cfg, kind)
        if not (backend_cfg.get("baseUrl") or backend_cfg.get("base_url")):
            backend_cfg["baseUrl"] = base_url

    return data


def _section(parent: dict, key: str) -> dict:
    """Return ``parent[key]`` as a dict, treating a missing or null section as empty."""
    value = parent.get(key)
    if value is None:
        value = parent[key] = {}
    if not isinstance(value, dict):
        raise ValueError(f"config section {key!r} must be an object")
    return value
