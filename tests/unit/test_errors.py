"""
Unit tests for hexkit/errors.py

Tests:
- exact messages and codes of the hex error kinds
- conversion between exceptions and HexkitError models
"""
import pytest
from pydantic import ValidationError

from hexkit.errors import (
    CanonicalizationException,
    ErrorCodes,
    HexConversionError,
    HexError,
    HexkitError,
    HexkitException,
    InvalidCharacter,
    LengthError,
)


class TestHexErrorKinds:
    """Tests for the closed set of hex errors."""

    @pytest.mark.parametrize(
        "exc_type, code, message",
        [
            (
                InvalidCharacter,
                ErrorCodes.HEX_INVALID_CHARACTER,
                "Only hexadecimal characters (0-9,a-f) are permitted",
            ),
            (
                LengthError,
                ErrorCodes.HEX_LENGTH_ERROR,
                "Hex string lengths must be a multiple of 2",
            ),
            (
                HexConversionError,
                ErrorCodes.HEX_CONVERSION_ERROR,
                "Invalid hex representation for the target type",
            ),
        ],
    )
    def test_code_and_message(self, exc_type, code, message):
        """Test each kind has a fixed code and message."""
        err = exc_type()

        assert err.code == code
        assert err.message == message
        assert str(err) == message
        assert isinstance(err, HexError)
        assert isinstance(err, ValueError)
        assert isinstance(err, HexkitException)

    def test_invalid_character_carries_cause(self):
        """Test InvalidCharacter keeps the parse failure."""
        cause = ValueError("bad digit")
        err = InvalidCharacter(cause=cause)

        assert err.cause is cause

    def test_repr(self):
        """Test repr shows code and message."""
        assert repr(LengthError()) == (
            "LengthError(code='HEX_LENGTH_ERROR', "
            "message='Hex string lengths must be a multiple of 2')"
        )


class TestErrorModels:
    """Tests for HexkitError <-> exception conversion."""

    def test_to_error_model(self):
        """Test exception converts to a structured model."""
        model = LengthError(details={"length": 3}).to_error_model()

        assert model.code == ErrorCodes.HEX_LENGTH_ERROR
        assert model.message == "Hex string lengths must be a multiple of 2"
        assert model.details == {"length": 3}

    def test_to_exception_restores_kind(self):
        """Test a model with a hex code rebuilds the matching exception."""
        model = HexkitError(
            code=ErrorCodes.HEX_INVALID_CHARACTER,
            message="ignored",
            details={"pair": "zz"},
        )
        exc = model.to_exception()

        assert isinstance(exc, InvalidCharacter)
        assert exc.details == {"pair": "zz"}
        assert str(exc) == "Only hexadecimal characters (0-9,a-f) are permitted"

    def test_to_exception_generic(self):
        """Test unknown codes rebuild a generic exception."""
        exc = HexkitError(code="OTHER", message="something").to_exception()

        assert type(exc) is HexkitException
        assert exc.code == "OTHER"
        assert exc.message == "something"

    def test_model_forbids_extra_fields(self):
        """Test the model rejects unknown fields."""
        with pytest.raises(ValidationError):
            HexkitError(code="X", message="y", retryable=True)

    def test_canonicalization_exception(self):
        """Test CanonicalizationException code."""
        exc = CanonicalizationException("nope", details={"path": "a"})

        assert exc.code == ErrorCodes.CANONICALIZATION_ERROR
        assert exc.details == {"path": "a"}
        assert not isinstance(exc, ValueError)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
