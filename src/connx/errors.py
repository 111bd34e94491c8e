"""
Connx Error Model

This module provides the error handling framework for the connx encoding
package. Every decode failure is reported as a typed exception carrying a
numeric code and diagnostic details.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for codec failures."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    INVALID_BYTE = 101
    ODD_LENGTH = 102
    INVALID_LENGTH = 103


class ConnxError(Exception):
    """
    Base class for all connx errors.

    Provides structured error information: a message, an error code,
    free-form details and an optional underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a connx error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ConnxError':
        """Create error from dictionary representation."""
        try:
            code = ErrorCode(data.get("code", ErrorCode.UNKNOWN))
        except ValueError:
            code = ErrorCode.UNKNOWN
        message = data.get("message", "Unknown error")
        details = data.get("details")
        return cls(message, code, details)


class EncodingError(ConnxError):
    """Data encoding/decoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class InvalidByteError(EncodingError):
    """A decode input byte is not part of the active alphabet."""

    def __init__(self, byte: int, offset: int = -1, scheme: str = "encoding",
                 cause: Optional[Exception] = None):
        self.byte = byte
        self.offset = offset
        details: Dict[str, Any] = {"byte": byte}
        if offset >= 0:
            details["offset"] = offset
        super().__init__(f"{scheme}: invalid byte: {byte:#04x} ({chr(byte)!r})",
                         ErrorCode.INVALID_BYTE, details, cause)


class OddLengthError(EncodingError):
    """Hex input has an odd number of characters."""

    def __init__(self, message: str = "base16: odd length hex string",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.ODD_LENGTH, details, cause)


class InvalidLengthError(EncodingError):
    """Input length is not a valid multiple of the codec's group size."""

    def __init__(self, length: int, scheme: str = "encoding", multiple: int = 0,
                 cause: Optional[Exception] = None):
        self.length = length
        details: Dict[str, Any] = {"length": length}
        if multiple:
            details["multiple"] = multiple
        super().__init__(f"{scheme}: invalid input length {length}",
                         ErrorCode.INVALID_LENGTH, details, cause)


__all__ = [
    "ErrorCode",
    "ConnxError",
    "EncodingError",
    "InvalidByteError",
    "OddLengthError",
    "InvalidLengthError",
]
