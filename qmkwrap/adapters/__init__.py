"""Adapters isolating file system and process side effects."""

from .config_file_adapter import ConfigFileAdapter, create_config_file_adapter
from .file_adapter import FileSystemAdapter, create_file_adapter
from .process_adapter import ProcessAdapter, create_process_adapter


__all__ = [
    "ConfigFileAdapter",
    "FileSystemAdapter",
    "ProcessAdapter",
    "create_config_file_adapter",
    "create_file_adapter",
    "create_process_adapter",
]
