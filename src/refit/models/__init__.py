"""
Data models for Refit Utilities.

This module contains the core data structures shared by all utilities.
"""

from .context import TransformationContext
from .coordinates import Coordinates
from .results import ExecutionResult, ResultType, UtilityError

__all__ = [
    'TransformationContext',
    'Coordinates',
    'ExecutionResult',
    'ResultType',
    'UtilityError'
]
