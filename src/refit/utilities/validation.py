"""
Configuration checks shared by the utilities' setters.

Every check fails fast with UtilityConfigurationError so an invalid utility
can never reach execution.
"""

import re
from typing import Optional


class UtilityConfigurationError(ValueError):
    """Raised when a utility is given an invalid configuration value."""
    pass


def check_for_blank_string(name: str, value: Optional[str]) -> None:
    """
    Reject None, empty and whitespace-only values.

    Raises:
        UtilityConfigurationError: If the value is blank
    """
    if value is None or not value.strip():
        raise UtilityConfigurationError(f"{name} cannot be blank")


def check_for_empty_string(name: str, value: Optional[str]) -> None:
    """
    Accept None, reject empty and whitespace-only values.

    Raises:
        UtilityConfigurationError: If the value is set but empty
    """
    if value is not None and not value.strip():
        raise UtilityConfigurationError(f"{name} cannot be empty")


def check_for_regex(name: str, value: Optional[str]) -> Optional[re.Pattern]:
    """
    Accept None, otherwise require a non-empty, compilable regular expression.

    Returns:
        The compiled pattern, or None when value is None

    Raises:
        UtilityConfigurationError: If the value is empty or not a valid regex
    """
    check_for_empty_string(name, value)
    if value is None:
        return None
    try:
        return re.compile(value)
    except re.error as e:
        raise UtilityConfigurationError(f"{name} is not a valid regular expression '{value}': {e}") from e
