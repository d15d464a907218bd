"""Custom exceptions for RPP parsing."""
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class FailureKind(Enum):
    """Reasons a decode can fail."""
    OPEN_FAILURE = "open_failure"
    INVALID_FORMAT = "invalid_format"


class RPPParseError(Exception):
    """Base exception for RPP parsing errors."""
    kind: FailureKind = None

    def __init__(self, message: str, file_path: str = None):
        self.message = message
        self.file_path = file_path
        super().__init__(self.message)
        if file_path:
            logger.error(f"RPP parse error in {file_path}: {message}")


class OpenFailureError(RPPParseError):
    """Exception for project files that cannot be opened or read."""
    kind = FailureKind.OPEN_FAILURE


class InvalidFormatError(RPPParseError):
    """Exception for files whose header is not a REAPER project header."""
    kind = FailureKind.INVALID_FORMAT
