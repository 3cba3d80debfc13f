import time
import logging
from enum import Enum
from dataclasses import dataclass
from typing import Dict, List, Optional, Any
from collections import defaultdict


class ConfigurationError(ValueError):
    """Invalid filter configuration, rejected at construction time"""


class ErrorType(Enum):
    """Classification of corpus and query source failures"""
    FILE_NOT_FOUND = "file_not_found"
    PERMISSION_DENIED = "permission_denied"
    IS_A_DIRECTORY = "is_a_directory"
    DECODE_ERROR = "decode_error"
    IO_ERROR = "io_error"
    UNKNOWN_ERROR = "unknown_error"


@dataclass
class ErrorInfo:
    """Information about an error occurrence"""
    source: str
    operation: str
    error_type: ErrorType
    message: str
    timestamp: float


class ErrorHandler:
    """Classifies, logs and records failures of the corpus and query sources"""

    def __init__(self):
        self.error_history: List[ErrorInfo] = []
        self.failed_sources: Dict[str, List[ErrorInfo]] = defaultdict(list)

    def classify_error(self, error: Exception) -> ErrorType:
        """Classify an error into appropriate error type"""
        if isinstance(error, FileNotFoundError):
            return ErrorType.FILE_NOT_FOUND
        elif isinstance(error, PermissionError):
            return ErrorType.PERMISSION_DENIED
        elif isinstance(error, IsADirectoryError):
            return ErrorType.IS_A_DIRECTORY
        elif isinstance(error, UnicodeDecodeError):
            return ErrorType.DECODE_ERROR
        elif isinstance(error, OSError):
            return ErrorType.IO_ERROR

        return ErrorType.UNKNOWN_ERROR

    def record(self, error: Exception, source: str, operation: str) -> ErrorInfo:
        """
        Record and log a failure

        Args:
            error: The exception raised while reading the source
            source: File path or other source identifier
            operation: What was being attempted (e.g. "load_corpus")

        Returns:
            The recorded ErrorInfo
        """
        error_info = ErrorInfo(
            source=source,
            operation=operation,
            error_type=self.classify_error(error),
            message=str(error),
            timestamp=time.time()
        )

        self.error_history.append(error_info)
        self.failed_sources[source].append(error_info)

        logging.error(f"{operation} failed for {source}: {error_info.error_type.value} - {error}")
        return error_info

    def last_error(self) -> Optional[ErrorInfo]:
        return self.error_history[-1] if self.error_history else None

    def get_error_summary(self) -> Dict[str, Any]:
        """Get summary of all errors encountered"""
        if not self.error_history:
            return {"total_errors": 0}

        error_counts = defaultdict(int)
        operation_errors = defaultdict(int)

        for error in self.error_history:
            error_counts[error.error_type.value] += 1
            operation_errors[error.operation] += 1

        return {
            "total_errors": len(self.error_history),
            "failed_sources": len(self.failed_sources),
            "error_types": dict(error_counts),
            "operation_errors": dict(operation_errors)
        }

    def get_failed_sources(self) -> List[str]:
        """Get list of sources that could not be read"""
        return list(self.failed_sources.keys())
