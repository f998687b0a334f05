"""
Unit tests for the configuration checks shared by utility setters.
"""

import re
import pytest

from refit.utilities.validation import (
    UtilityConfigurationError,
    check_for_blank_string,
    check_for_empty_string,
    check_for_regex
)


class TestValidation:
    """Test cases for the validation helpers."""

    def test_blank_string(self):
        """Test that blank checks reject None, empty and whitespace values."""
        check_for_blank_string("GroupId", "com.test")

        for value in [None, "", "   ", "\t\n"]:
            with pytest.raises(UtilityConfigurationError, match="GroupId cannot be blank"):
                check_for_blank_string("GroupId", value)

    def test_empty_string(self):
        """Test that empty checks accept None but reject empty values."""
        check_for_empty_string("Version", None)
        check_for_empty_string("Version", "1.0")

        for value in ["", "  "]:
            with pytest.raises(UtilityConfigurationError, match="Version cannot be empty"):
                check_for_empty_string("Version", value)

    def test_regex(self):
        """Test compiling regular expressions."""
        assert check_for_regex("Name regex", None) is None
        assert isinstance(check_for_regex("Name regex", r".*\.txt"), re.Pattern)

        with pytest.raises(UtilityConfigurationError, match="Name regex cannot be empty"):
            check_for_regex("Name regex", "")

        with pytest.raises(UtilityConfigurationError, match="not a valid regular expression"):
            check_for_regex("Name regex", "(unclosed")

    def test_configuration_error_is_value_error(self):
        """Test that configuration errors can be handled as ValueError."""
        with pytest.raises(ValueError):
            check_for_blank_string("ArtifactId", "")
