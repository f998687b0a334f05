"""
Configuration management package for Refit Utilities.

This package loads utility declarations from YAML configuration files.
"""

from .parser import (
    ConfigParser,
    ConfigParseResult,
    ConfigurationError,
    load_config
)

__all__ = [
    'ConfigParser',
    'ConfigParseResult',
    'ConfigurationError',
    'load_config'
]
