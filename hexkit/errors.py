"""
Error taxonomy for hexkit.

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

    # Hex decoding
    HEX_INVALID_CHARACTER = "HEX_INVALID_CHARACTER"
    HEX_LENGTH_ERROR = "HEX_LENGTH_ERROR"
    HEX_CONVERSION_ERROR = "HEX_CONVERSION_ERROR"

    # Serialization
    CANONICALIZATION_ERROR = "CANONICALIZATION_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class HexkitError(BaseModel):
    """
    Error model for structured error reporting.

    Lets a service built on top of hexkit surface a failure without
    re-raising it, e.g. in a JSON response body.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.HEX_LENGTH_ERROR],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "HexkitException":
        """Convert this error model to the matching exception."""
        exc_type = _EXCEPTIONS_BY_CODE.get(self.code)
        if exc_type is not None:
            return exc_type(details=dict(self.details))
        return HexkitException(
            message=self.message,
            code=self.code,
            details=dict(self.details),
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class HexkitException(Exception):
    """
    Base exception for all hexkit errors.

    Carries structured error information and can be converted
    to a HexkitError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "HEXKIT_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> HexkitError:
        """Convert this exception to a HexkitError model."""
        return HexkitError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class CanonicalizationException(HexkitException):
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
        )


class HexError(HexkitException, ValueError):
    """
    Base class for the closed set of hex conversion failures.

    Subclasses fix both the code and the message; the message text is
    relied upon by consumers and must not change.
    """

    code: str = "HEX_ERROR"
    default_message: str = "Hex conversion failed"

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=self.default_message,
            code=type(self).code,
            details=details,
        )


class InvalidCharacter(HexError):
    """A byte pair could not be parsed as base 16."""

    code = ErrorCodes.HEX_INVALID_CHARACTER
    default_message = "Only hexadecimal characters (0-9,a-f) are permitted"

    def __init__(
        self,
        cause: ValueError | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(details=details)
        self.cause = cause


class LengthError(HexError):
    """Trimmed input has an odd number of characters."""

    code = ErrorCodes.HEX_LENGTH_ERROR
    default_message = "Hex string lengths must be a multiple of 2"


class HexConversionError(HexError):
    """Input cannot be turned into the target type."""

    code = ErrorCodes.HEX_CONVERSION_ERROR
    default_message = "Invalid hex representation for the target type"


_EXCEPTIONS_BY_CODE: dict[str, type[HexError]] = {
    exc.code: exc for exc in (InvalidCharacter, LengthError, HexConversionError)
}
