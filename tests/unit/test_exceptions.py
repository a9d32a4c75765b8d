"""Tests for pipeline exception types."""

import pytest

from pagewright import utils
from pagewright.utils.exceptions import ContractError, PagewrightError


class TestContractError:
    """Tests for ContractError."""

    def test_message_and_details(self):
        """Test the message names the argument and the received type."""
        error = ContractError("messages", "a list of strings", "hello")

        assert error.message == "Argument 'messages' must be a list of strings (got str)"
        assert error.details == {"argument": "messages", "expected": "a list of strings"}
        assert error.argument == "messages"

    def test_is_type_error(self):
        """Test callers can catch it as a TypeError or the package base."""
        with pytest.raises(TypeError):
            raise ContractError("brief", "a mapping", 3)
        assert issubclass(ContractError, PagewrightError)

    def test_public_exceptions(self):
        """Test the utils package exports only raised exception types."""
        assert utils.__all__ == ["ContractError", "PagewrightError"]
        assert not hasattr(utils, "ValidationError")
