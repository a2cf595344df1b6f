"""Configuration management for taskcat.

Reads configuration from ~/.config/taskcat.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
from datetime import date
import tomllib
import tomli_w

DEFAULT_COLOR = "#6366F1"
DEFAULT_TABLE = "task_category_c"


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    log_level: str
    log_dir: Path
    store_backend: str
    store_table: str
    remote_project_id: str
    remote_public_key: str
    default_color: str = DEFAULT_COLOR
    log_prefix: str = "taskcat"

    def log_file_for(self, day: date) -> Path:
        """Get the log file path for a given day ({log_prefix}-YYYY-MM-DD.log)."""
        return self.log_dir / f"{self.log_prefix}-{day.isoformat()}.log"

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        base_dir = Path.home() / "data" / "taskcat"
        return cls(
            base_dir=base_dir,
            log_level="INFO",
            log_dir=base_dir / "logs",
            store_backend="memory",
            store_table=DEFAULT_TABLE,
            remote_project_id="",
            remote_public_key="",
            default_color=DEFAULT_COLOR,
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "taskcat.toml"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return _parse_config(data)


def _parse_config(data: dict) -> Config:
    """Build a Config from parsed TOML data, filling in defaults.

    Args:
        data: Dictionary as returned by tomllib.

    Returns:
        Config object.
    """
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "taskcat"))

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))
    log_prefix = log_config.get("prefix", "taskcat")

    store_config = data.get("store", {})
    store_backend = store_config.get("backend", "memory")
    store_table = store_config.get("table", DEFAULT_TABLE)

    remote_config = data.get("remote", {})
    remote_project_id = remote_config.get("project_id", "")
    remote_public_key = remote_config.get("public_key", "")

    category_config = data.get("categories", {})
    default_color = category_config.get("default_color", DEFAULT_COLOR)

    return Config(
        base_dir=base_dir,
        log_level=log_level,
        log_dir=log_dir,
        store_backend=store_backend,
        store_table=store_table,
        remote_project_id=remote_project_id,
        remote_public_key=remote_public_key,
        default_color=default_color,
        log_prefix=log_prefix,
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
            "prefix": config.log_prefix,
        },
        "store": {
            "backend": config.store_backend,
            "table": config.store_table,
        },
        "remote": {
            "project_id": config.remote_project_id,
            "public_key": config.remote_public_key,
        },
        "categories": {
            "default_color": config.default_color,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
