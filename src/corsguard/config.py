"""Configuration management for corsguard."""

import json
import os
from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from .my_logging import debug_log
from .policy import CorsPolicy


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_bool(value: str) -> bool:
    return value.lower() == "true"


@dataclass
class CorsConfig:
    """Configuration for the CORS policy."""

    allowed_origins: list[str] = field(default_factory=list)
    allowed_methods: list[str] = field(default_factory=lambda: ["GET", "POST", "PUT", "DELETE", "OPTIONS"])
    allowed_headers: list[str] = field(default_factory=list)
    allow_credentials: bool = False
    allow_max_age: int = 0  # <= 0 means no Access-Control-Max-Age header
    exposed_headers: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CorsConfig":
        """Create CorsConfig from dictionary."""
        return cls(**{k: v for k, v in data.items() if k in cls.__annotations__})

    def to_policy(self) -> CorsPolicy:
        """Freeze the current settings into a CorsPolicy."""
        return CorsPolicy.from_dict(asdict(self))


@dataclass
class CorsguardConfig:
    """Main configuration for corsguard."""

    # Server settings
    server_host: str = "localhost"
    server_port: int = 8080

    # CORS settings
    cors: CorsConfig = field(default_factory=CorsConfig)

    @classmethod
    def load(cls) -> "CorsguardConfig":
        """Load configuration from various sources."""
        config = cls()

        # 1. Load from the first config file that exists
        config_paths = [Path.home() / ".corsguard" / "config.json", Path.cwd() / ".corsguard.json", Path.cwd() / "corsguard.config.json"]

        for config_path in config_paths:
            if config_path.exists():
                try:
                    with open(config_path) as f:
                        data = json.load(f)
                except (OSError, json.JSONDecodeError) as e:
                    debug_log("Skipping unreadable config file", path=config_path, error=e)
                    continue
                config = cls._merge_config(config, data)
                break

        # 2. Override with environment variables
        env_mappings: dict[str, str | tuple[str, Callable[[str], Any]]] = {
            "CORSGUARD_SERVER_HOST": "server_host",
            "CORSGUARD_SERVER_PORT": ("server_port", int),
            "CORSGUARD_ALLOWED_ORIGINS": ("cors.allowed_origins", _split_list),
            "CORSGUARD_ALLOWED_METHODS": ("cors.allowed_methods", _split_list),
            "CORSGUARD_ALLOWED_HEADERS": ("cors.allowed_headers", _split_list),
            "CORSGUARD_ALLOW_CREDENTIALS": ("cors.allow_credentials", _parse_bool),
            "CORSGUARD_ALLOW_MAX_AGE": ("cors.allow_max_age", int),
            "CORSGUARD_EXPOSED_HEADERS": ("cors.exposed_headers", _split_list),
        }

        for env_var, config_mapping in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                if isinstance(config_mapping, tuple):
                    path, converter = config_mapping
                    config = cls._set_nested(config, path, converter(value))
                else:
                    setattr(config, config_mapping, value)

        # 3. Reject mistyped CORS values now rather than on the first request
        config.policy()

        return config

    @classmethod
    def _merge_config(cls, config: "CorsguardConfig", data: dict[str, Any]) -> "CorsguardConfig":
        """Merge configuration data into config object."""
        if "cors" in data and isinstance(data["cors"], dict):
            config.cors = CorsConfig.from_dict(data["cors"])
            data = {k: v for k, v in data.items() if k != "cors"}

        for key, value in data.items():
            if hasattr(config, key):
                setattr(config, key, value)

        return config

    @classmethod
    def _set_nested(cls, config: "CorsguardConfig", path: str, value: Any) -> "CorsguardConfig":
        """Set a nested attribute using dot notation."""
        parts = path.split(".")
        obj = config
        for part in parts[:-1]:
            obj = getattr(obj, part)
        setattr(obj, parts[-1], value)
        return config

    def policy(self) -> CorsPolicy:
        """Return the CORS policy described by this configuration."""
        return self.cors.to_policy()

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            config_dir = Path.home() / ".corsguard"
            config_dir.mkdir(exist_ok=True)
            path = config_dir / "config.json"

        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)


# Global config instance
_config: CorsguardConfig | None = None


def get_config() -> CorsguardConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = CorsguardConfig.load()
    return _config


def reload_config() -> CorsguardConfig:
    """Reload configuration from sources."""
    global _config
    _config = CorsguardConfig.load()
    return _config
