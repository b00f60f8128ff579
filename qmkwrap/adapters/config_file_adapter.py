"""Adapter for locating and reading YAML configuration files."""

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import yaml

from qmkwrap.core.errors import ConfigError
from qmkwrap.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)


@runtime_checkable
class ConfigFileAdapterProtocol(Protocol):
    """Protocol for reading configuration files."""

    def load_config(self, path: Path) -> dict[str, Any]:
        """Load a configuration file.

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        ...

    def search_config_files(
        self, paths: list[Path]
    ) -> tuple[dict[str, Any], Path | None]:
        """Load the first existing file of ``paths``.

        Returns:
            Tuple of (configuration data, path it was loaded from). When no
            file exists, returns an empty dict and None.
        """
        ...


class ConfigFileAdapter:
    """YAML implementation of ConfigFileAdapterProtocol."""

    def load_config(self, path: Path) -> dict[str, Any]:
        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("config_parse_failed", path=str(path), error=str(e))
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        except OSError as e:
            logger.error("config_read_failed", path=str(path), error=str(e))
            raise ConfigError(f"Cannot read configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Configuration file {path} must contain a mapping, "
                f"got {type(data).__name__}"
            )
        return data

    def search_config_files(
        self, paths: list[Path]
    ) -> tuple[dict[str, Any], Path | None]:
        for path in paths:
            if path.is_file():
                logger.debug("config_file_found", path=str(path))
                return self.load_config(path), path
        logger.debug("config_file_not_found", searched=[str(p) for p in paths])
        return {}, None


def create_config_file_adapter() -> ConfigFileAdapterProtocol:
    """Factory function to create a ConfigFileAdapter instance."""
    return ConfigFileAdapter()


__all__ = [
    "ConfigFileAdapter",
    "ConfigFileAdapterProtocol",
    "create_config_file_adapter",
]
