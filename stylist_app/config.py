"""Configuration helpers for the outfit stylist app."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_MAX_OUTFITS = 10
DEFAULT_HISTORY_LIMIT = 50


@dataclass
class StylistConfig:
    """Configuration values for the outfit stylist app.

    Values come from environment variables, optionally merged over an
    environment YAML file so that deployments can pin defaults per stage.
    """

    default_max_outfits: int = DEFAULT_MAX_OUTFITS
    history_limit: int = DEFAULT_HISTORY_LIMIT
    log_level: str = "INFO"
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "StylistConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default; ``APP_CONFIG_PATH`` points at an explicit file instead.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("STYLIST_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        return cls(
            default_max_outfits=cls._as_int(get_value("default_max_outfits"), DEFAULT_MAX_OUTFITS),
            history_limit=max(1, cls._as_int(get_value("history_limit"), DEFAULT_HISTORY_LIMIT)),
            log_level=str(get_value("log_level", "INFO") or "INFO").upper(),
            environment=env_name,
        )

    @staticmethod
    def _as_int(raw: Optional[str], default: int) -> int:
        if raw is None or str(raw).strip() == "":
            return default
        try:
            return int(str(raw).strip())
        except ValueError:
            return default

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal ``key: value`` YAML subset without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
