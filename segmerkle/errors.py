"""
Errors

Purpose: Error taxonomy for segmerkle.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Construction Errors
    INVALID_SEGMENT_SIZE = "INVALID_SEGMENT_SIZE"
    UNSUPPORTED_HASH_ALGORITHM = "UNSUPPORTED_HASH_ALGORITHM"

    # Tree Access Errors
    EMPTY_TREE = "EMPTY_TREE"

    # Configuration Errors
    CONFIG_ERROR = "CONFIG_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class SegMerkleError(BaseModel):
    """
    Base error model for structured error communication.

    Lets callers pass errors around (or log them) without raising,
    and convert back into an exception when control flow needs it.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_SEGMENT_SIZE],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "SegMerkleException":
        """Convert this error model to a raisable exception."""
        return SegMerkleException(
            message=self.message,
            code=self.code,
            details=dict(self.details),
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class SegMerkleException(Exception):
    """
    Base exception for all segmerkle errors.

    Carries structured error information and can be converted
    to/from SegMerkleError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "SEGMERKLE_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> SegMerkleError:
        """Convert this exception to a SegMerkleError model."""
        return SegMerkleError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidSegmentSizeException(SegMerkleException, ValueError):
    """Raised when a segment size is not a positive integer."""

    def __init__(
        self,
        message: str,
        segment_size: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if segment_size is not None:
            full_details["segment_size"] = repr(segment_size)
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_SEGMENT_SIZE,
            details=full_details,
            retryable=False,
        )


class EmptyTreeException(SegMerkleException):
    """Raised when the root digest of a tree built from no data is requested."""

    def __init__(
        self,
        message: str = "Tree was built from an empty buffer and has no root",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.EMPTY_TREE,
            details=details,
            retryable=False,
        )


class UnsupportedHashAlgorithmException(SegMerkleException, ValueError):
    """Raised when a hash algorithm name cannot be turned into a hash factory."""

    def __init__(
        self,
        message: str,
        algorithm: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if algorithm:
            full_details["algorithm"] = algorithm
        super().__init__(
            message=message,
            code=ErrorCodes.UNSUPPORTED_HASH_ALGORITHM,
            details=full_details,
            retryable=False,
        )


class ConfigException(SegMerkleException):
    """Raised when runtime configuration values are invalid."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_ERROR,
            details=full_details,
            retryable=False,
        )


__all__ = [
    "ErrorCodes",
    "SegMerkleError",
    "SegMerkleException",
    "InvalidSegmentSizeException",
    "EmptyTreeException",
    "UnsupportedHashAlgorithmException",
    "ConfigException",
]
