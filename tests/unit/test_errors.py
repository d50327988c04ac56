"""
Error Model Unit Tests
Tests for ledger/schemas/errors.py
"""
from ledger.schemas.errors import (
    ConfigurationException,
    ErrorCodes,
    InvalidLeafCountException,
    LedgerError,
)


class TestToErrorModel:
    """Exceptions convert to structured LedgerError models."""

    def test_invalid_leaf_count(self):
        error = InvalidLeafCountException(6).to_error_model()

        assert isinstance(error, LedgerError)
        assert error.code == ErrorCodes.INVALID_LEAF_COUNT
        assert error.details == {"leaf_count": 6}
        assert "power of two" in error.message
        assert error.retryable is False

    def test_configuration_error_keeps_path(self):
        exc = ConfigurationException("missing", code=ErrorCodes.KEY_LOAD_ERROR, path="k.der")

        error = exc.to_error_model()

        assert error.code == ErrorCodes.KEY_LOAD_ERROR
        assert error.details == {"path": "k.der"}

    def test_repr(self):
        assert repr(InvalidLeafCountException(3)).startswith(
            "InvalidLeafCountException(code='INVALID_LEAF_COUNT'"
        )
