"""
Transformation utilities for Refit Utilities.

This module contains the inspection utilities and the location and
validation helpers they are built on.
"""

from .find_files import FindFiles
from .paths import Location, relative_path, resolve_location
from .pom_parent_match import PomParentMatch
from .validation import UtilityConfigurationError

__all__ = [
    'FindFiles',
    'Location',
    'PomParentMatch',
    'UtilityConfigurationError',
    'relative_path',
    'resolve_location'
]
