"""Connection configuration for the VLC web interface."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, ClassVar, Final

from vlcremote.config.paths import default_config_path
from vlcremote.platform.logging import logger

DEFAULT_BASE_URL: Final[str] = "http://127.0.0.1:8080"

# Environment variable -> Config field
ENV_OVERRIDES: Final[dict[str, str]] = {
    "VLCREMOTE_URL": "base_url",
    "VLCREMOTE_USERNAME": "username",
    "VLCREMOTE_PASSWORD": "password",
}


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Root URL of the VLC web interface, without a trailing slash
    base_url: str = DEFAULT_BASE_URL

    # VLC only checks the password; the user name is usually left empty
    username: str = ""
    password: str | None = None

    # Seconds; None leaves requests without a timeout
    timeout: float | None = None

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Normalise the base URL and convert string paths to ``Path``."""
        self.base_url = self.base_url.strip().rstrip("/")

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def with_overrides(self, **overrides: Any) -> "Config":
        """Return a copy with every non-``None`` override applied."""

        applied = {key: value for key, value in overrides.items() if value is not None}
        if not applied:
            return self
        return replace(self, **applied)

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            path: Destination file. Defaults to ``default_config_path()``.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(self._render_toml(config_dict), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# vlcremote configuration file")
        lines.append("")

        lines.append("# Root URL of the VLC web interface (Preferences > Interface > Main interfaces > Web)")
        lines.append(f"base_url = {self._format_toml_value(config['base_url'])}")
        lines.append("")

        lines.append("# Credentials for HTTP Basic authentication")
        lines.append("# VLC ignores the user name; only the Lua HTTP password is checked")
        lines.append(f"username = {self._format_toml_value(config['username'])}")
        if config["password"] is not None:
            lines.append(f"password = {self._format_toml_value(config['password'])}")
        lines.append("")

        lines.append("# Request timeout in seconds (optional)")
        if config["timeout"] is not None:
            lines.append(f"timeout = {self._format_toml_value(config['timeout'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/vlcremote.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(
        cls,
        path: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> "Config":
        """Load configuration from file and environment.

        A missing file yields the defaults. Environment variables listed in
        ``ENV_OVERRIDES`` take precedence over the file.

        Args:
            path: Explicit config file. Bypasses the singleton cache.
            env: Environment mapping, defaults to ``os.environ``.

        Returns:
            Config: Loaded configuration object.
        """
        use_cache = path is None and env is None
        if use_cache and cls._instance is not None:
            return cls._instance

        config_file = path or default_config_path(env)
        config_dict: dict[str, Any] = {}

        if config_file.exists():
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise
            logger.debug("Configuration loaded from %s", config_file)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
        values = {key: value for key, value in config_dict.items() if key in known}

        mapping = env if env is not None else os.environ
        for env_var, field_name in ENV_OVERRIDES.items():
            env_value = mapping.get(env_var)
            if env_value:
                values[field_name] = env_value

        instance = cls(**values)
        if use_cache:
            cls._instance = instance
            cls._loaded_from = config_file
        return instance


__all__ = ["Config", "DEFAULT_BASE_URL", "ENV_OVERRIDES"]
