"""Configuration model for brickset."""

from pathlib import Path
from typing import Any, Dict, Optional
import json
from dataclasses import dataclass, asdict, fields

from ..exceptions import ConfigurationError
from ..infrastructure.repositories import DEFAULT_DATA_FILE


@dataclass
class Config:
    """Main configuration model."""
    data_file: Path = DEFAULT_DATA_FILE
    demo_theme: str = "Bionicle"
    demo_limit: int = 5
    null_placeholder: str = "null"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.data_file = Path(self.data_file)
        if not isinstance(self.demo_limit, int) or self.demo_limit < 0:
            raise ConfigurationError(f"demo_limit must be a non-negative integer, got {self.demo_limit!r}")

    @classmethod
    def default(cls) -> "Config":
        """Create a default configuration reading the bundled data file."""
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["data_file"] = str(self.data_file)
        return result


def load_config(config_path: Path, data_file: Optional[Path] = None) -> Config:
    """Load configuration from JSON file.

    A relative ``data_file`` in the file is resolved against the directory
    holding the configuration. ``data_file`` overrides it as given.
    """
    try:
        with open(config_path, 'r') as f:
            config_data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not load configuration {config_path}: {e}") from e

    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Configuration {config_path} must be a JSON object")

    known = {f.name for f in fields(Config)}
    unknown = set(config_data) - known
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    configured = config_data.get("data_file")
    if isinstance(configured, str) and not Path(configured).is_absolute():
        config_data["data_file"] = Path(config_path).parent / configured

    if data_file is not None:
        config_data["data_file"] = data_file

    return Config(**config_data)


def save_config(config: Config, config_path: Path) -> None:
    """Save configuration to JSON file."""
    with open(config_path, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)


def create_default_config(config_path: Path) -> None:
    """Create a default configuration file."""
    save_config(Config.default(), config_path)
