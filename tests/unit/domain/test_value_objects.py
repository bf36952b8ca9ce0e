"""
Unit tests for domain value objects.
"""

import pytest

from tool_context.domain.value_objects.tool_name import ToolName
from tool_context.domain.exceptions.domain_exceptions import InvalidToolNameError


class TestToolName:
    """Tests for ToolName value object."""

    def test_valid_simple_name(self):
        """Test creation with a simple identifier."""
        name = ToolName("add")
        assert name.value == "add"

    def test_valid_name_with_underscores_and_digits(self):
        """Test creation with underscores and digits."""
        assert ToolName("get_weather_2").value == "get_weather_2"

    def test_valid_name_with_dashes_and_dots(self):
        """Test creation with dashes and dots."""
        assert ToolName("files.read-text").value == "files.read-text"

    def test_valid_leading_underscore(self):
        """Test creation with a leading underscore."""
        assert ToolName("_private").value == "_private"

    def test_valid_max_length(self):
        """Test a name of exactly the maximum length."""
        assert ToolName("a" * 64).value == "a" * 64

    def test_invalid_empty_string(self):
        """Test rejection of empty string."""
        with pytest.raises(InvalidToolNameError):
            ToolName("")

    def test_invalid_too_long(self):
        """Test rejection of overly long names."""
        with pytest.raises(InvalidToolNameError):
            ToolName("a" * 65)

    def test_invalid_leading_digit(self):
        """Test rejection of names starting with a digit."""
        with pytest.raises(InvalidToolNameError):
            ToolName("2fast")

    def test_invalid_whitespace(self):
        """Test rejection of names with spaces."""
        with pytest.raises(InvalidToolNameError):
            ToolName("add numbers")

    def test_invalid_trailing_newline(self):
        """Test a trailing newline is not accepted as part of the name."""
        with pytest.raises(InvalidToolNameError):
            ToolName("add\n")

    def test_invalid_lambda_name(self):
        """Test rejection of '<lambda>'."""
        with pytest.raises(InvalidToolNameError):
            ToolName("<lambda>")

    def test_invalid_non_string(self):
        """Test rejection of non-string values."""
        with pytest.raises(InvalidToolNameError):
            ToolName(None)

    def test_str_representation(self):
        """Test string representation."""
        assert str(ToolName("add")) == "add"

    def test_immutability(self):
        """Test that the value object is immutable."""
        name = ToolName("add")
        with pytest.raises(AttributeError):
            name.value = "subtract"

    def test_equality(self):
        """Test equality comparison."""
        assert ToolName("add") == ToolName("add")
        assert ToolName("add") != ToolName("subtract")
