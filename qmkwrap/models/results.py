"""Base result model for pipeline operations."""

from datetime import datetime

from pydantic import Field, model_validator

from qmkwrap.core.structlog_logger import get_struct_logger
from qmkwrap.models.base import QmkWrapBaseModel


logger = get_struct_logger(__name__)


class BaseResult(QmkWrapBaseModel):
    """Base class for all operation results."""

    success: bool
    timestamp: datetime = Field(default_factory=datetime.now)
    messages: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_success_consistency(self) -> "BaseResult":
        """Ensure success flag is consistent with errors."""
        if self.errors and self.success:
            logger.warning("result_success_mismatch", error_count=len(self.errors))
            # Assigning through __dict__ avoids re-running validate_assignment
            self.__dict__["success"] = False
        return self

    def add_message(self, message: str) -> None:
        """Add an informational message."""
        self.messages.append(message)
        logger.info("result_message_added", message=message)

    def add_error(self, error: str) -> None:
        """Add an error message and mark the result as failed."""
        self.errors.append(error)
        self.success = False


__all__ = ["BaseResult"]
