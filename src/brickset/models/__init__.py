"""Data models for brickset."""

from .config import Config, load_config, save_config, create_default_config

__all__ = ["Config", "load_config", "save_config", "create_default_config"]
