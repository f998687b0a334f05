"""
Refit Utilities - Core Package

Inspection utilities for source-code transformations: file search driven by
regular expressions and Maven POM parent matching, both reporting through a
common execution result model.
"""

__version__ = "0.1.0"
__author__ = "Refit Utilities Team"
