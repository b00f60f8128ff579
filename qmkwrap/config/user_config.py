"""
User configuration management for qmkwrap.

Configuration is read from multiple sources with the following precedence:
1. Environment variables (highest precedence)
2. Command-line provided config file
3. Config file in current directory
4. User's XDG config directory
5. Default values (lowest precedence)

The configuration is never written back by qmkwrap; edit the YAML file or set
environment variables to change it.
"""

import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from qmkwrap.adapters.config_file_adapter import (
    ConfigFileAdapterProtocol,
    create_config_file_adapter,
)
from qmkwrap.config.models import PipelineConfig, UserConfigData
from qmkwrap.core.errors import ConfigError
from qmkwrap.core.logging import level_from_name
from qmkwrap.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)

# Environment variable prefix
ENV_PREFIX = "QMKWRAP_"


class UserConfig:
    """Loads and exposes the user configuration."""

    def __init__(
        self,
        cli_config_path: str | Path | None = None,
        config_adapter: ConfigFileAdapterProtocol | None = None,
    ):
        """
        Initialize the user configuration handler.

        Args:
            cli_config_path: Optional config file path provided via CLI
            config_adapter: Optional adapter for file operations
        """
        self._adapter = config_adapter or create_config_file_adapter()
        self._config_sources: dict[str, str] = {}
        self._loaded_from: Path | None = None
        self._config_paths = self._generate_config_paths(cli_config_path)
        self._load_config()

    def _generate_config_paths(self, cli_config_path: str | Path | None) -> list[Path]:
        """Generate a list of config paths to search in order of precedence."""
        config_paths = []

        if cli_config_path:
            config_paths.append(Path(cli_config_path).expanduser().resolve())

        config_paths.extend([Path.cwd() / "qmkwrap.yaml", Path.cwd() / ".qmkwrap.yml"])

        xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
        config_root = (
            Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
        )
        config_paths.extend(
            [
                config_root / "qmkwrap" / "config.yaml",
                config_root / "qmkwrap" / "config.yml",
            ]
        )
        return config_paths

    def _load_config(self) -> None:
        config_data, found_path = self._adapter.search_config_files(self._config_paths)

        try:
            self._config = UserConfigData(**config_data)
        except ValidationError as e:
            source = found_path or "environment"
            raise ConfigError(f"Invalid configuration in {source}: {e}") from e

        if found_path:
            self._loaded_from = found_path
            self._track_file_sources(config_data, found_path.name)
            logger.debug("user_config_loaded", path=str(found_path))
        else:
            logger.debug("user_config_defaults")

        self._track_env_var_sources()

    def _track_file_sources(
        self, data: dict[str, Any], filename: str, prefix: str = ""
    ) -> None:
        for key, value in data.items():
            current_key = f"{prefix}.{key}" if prefix else key
            if isinstance(value, dict):
                self._track_file_sources(value, filename, current_key)
            else:
                self._config_sources[current_key] = f"file:{filename}"

    def _track_env_var_sources(self) -> None:
        for env_name in os.environ:
            if not env_name.upper().startswith(ENV_PREFIX):
                continue
            config_key = env_name[len(ENV_PREFIX) :].lower().replace("__", ".")
            top_level = config_key.split(".", 1)[0]
            if top_level in UserConfigData.model_fields:
                self._config_sources[config_key] = "environment"

    @property
    def data(self) -> UserConfigData:
        """The validated configuration."""
        return self._config

    @property
    def pipeline(self) -> PipelineConfig:
        """Settings consumed by the compile pipeline."""
        return self._config.pipeline

    @property
    def loaded_from(self) -> Path | None:
        """Path of the configuration file in use, if any."""
        return self._loaded_from

    @property
    def config_paths(self) -> list[Path]:
        """Paths searched for a configuration file, in order."""
        return list(self._config_paths)

    def get_source(self, key: str) -> str:
        """
        Get the source of a configuration value.

        Args:
            key: Dotted configuration key, e.g. "pipeline.qmk_dir"

        Returns:
            "environment", "file:<name>" or "default"
        """
        return self._config_sources.get(key, "default")

    def get_log_level_int(self) -> int:
        """Get the configured log level as a ``logging`` constant."""
        return level_from_name(self._config.log_level)


def create_user_config(
    cli_config_path: str | Path | None = None,
    config_adapter: ConfigFileAdapterProtocol | None = None,
) -> UserConfig:
    """Create a UserConfig instance with optional dependency injection."""
    return UserConfig(cli_config_path=cli_config_path, config_adapter=config_adapter)


__all__ = ["ENV_PREFIX", "UserConfig", "create_user_config"]
