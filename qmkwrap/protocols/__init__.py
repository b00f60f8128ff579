"""Protocol definitions for qmkwrap adapters."""

from .file_adapter_protocol import FileAdapterProtocol
from .process_adapter_protocol import CommandResult, ProcessAdapterProtocol


__all__ = ["CommandResult", "FileAdapterProtocol", "ProcessAdapterProtocol"]
