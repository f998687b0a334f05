"""
Structured descriptor readers for Refit Utilities.

This module contains the readers turning project descriptor documents into
data models that utilities can inspect.
"""

from .pom import DescriptorParseError, ProjectDescriptor, read_pom

__all__ = ['DescriptorParseError', 'ProjectDescriptor', 'read_pom']
