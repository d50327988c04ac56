"""
Schemas
File: errors.py

Purpose: Standard error taxonomy for the ledger core.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the ledger."""

    # Serialization Errors
    CANONICALIZATION_ERROR = "CANONICALIZATION_ERROR"

    # Merkle Tree Errors
    INVALID_LEAF_COUNT = "INVALID_LEAF_COUNT"
    LEAF_NOT_FOUND = "LEAF_NOT_FOUND"
    ROOT_MISMATCH = "ROOT_MISMATCH"

    # Configuration & Key Errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    KEY_LOAD_ERROR = "KEY_LOAD_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class LedgerError(BaseModel):
    """
    Base error model for structured error communication.

    Used where errors are reported rather than raised, e.g. in CLI
    JSON output for a proof that failed to verify.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.ROOT_MISMATCH],
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


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class LedgerException(Exception):
    """
    Base exception for all ledger errors.

    This exception carries structured error information and can be
    converted to/from LedgerError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "LEDGER_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> LedgerError:
        """Convert this exception to a LedgerError model."""
        return LedgerError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class CanonicalizationException(LedgerException):
    """Exception raised when canonical serialization fails."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CANONICALIZATION_ERROR,
            details=details,
            retryable=False,
        )


class InvalidLeafCountException(LedgerException):
    """Exception raised when a tree is built from a non power-of-two leaf count."""

    def __init__(
        self,
        leaf_count: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["leaf_count"] = leaf_count
        super().__init__(
            message=f"Leaf count must be a power of two, got {leaf_count}",
            code=ErrorCodes.INVALID_LEAF_COUNT,
            details=full_details,
            retryable=False,
        )
        self.leaf_count = leaf_count


class ConfigurationException(LedgerException):
    """Exception raised when configuration or key material cannot be loaded."""

    def __init__(
        self,
        message: str,
        code: str = ErrorCodes.CONFIGURATION_ERROR,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if path:
            full_details["path"] = path
        super().__init__(
            message=message,
            code=code,
            details=full_details,
            retryable=False,
        )
