"""Configuration module for searchagent."""

from searchagent.config.loader import get_config_path, load_config, save_config
from searchagent.config.schema import Config, SearchConfig

__all__ = ["Config", "SearchConfig", "load_config", "save_config", "get_config_path"]
