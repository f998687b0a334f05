"""
Location resolution for Refit Utilities.

Utilities point at files and folders either relative to the root of the
application being transformed, or through a transformation context attribute
holding an absolute path. This module resolves those locations and renders
paths relative to a base in forward-slash form, independently of the host
path separator.
"""

import os
from pathlib import Path, PurePath, PurePosixPath
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..models.context import TransformationContext
from ..models.results import UtilityError


ROOT_FOLDER_DESCRIPTION = "the root folder"


class Location(BaseModel):
    """
    Where a utility operates.

    Attributes:
        relative_path: Path relative to the application root ("." is the root itself)
        context_attribute: Name of the context attribute holding an absolute path
        additional_relative_path: Path appended to the context attribute's path
    """

    model_config = ConfigDict(frozen=True)

    relative_path: Optional[str] = Field(".", description="Path relative to the application root")
    context_attribute: Optional[str] = Field(None, description="Context attribute holding an absolute path")
    additional_relative_path: Optional[str] = Field(None, description="Path appended to the attribute's path")

    @model_validator(mode='after')
    def validate_location(self):
        """Validate that exactly one kind of location is set."""
        if self.context_attribute is None:
            if self.additional_relative_path is not None:
                raise ValueError("Additional relative path requires a context attribute")
            if self.relative_path is None:
                raise ValueError("Either a relative path or a context attribute must be set")
        elif self.relative_path is not None:
            raise ValueError("Relative path and context attribute are mutually exclusive")
        return self

    @classmethod
    def relative(cls, relative_path: str) -> 'Location':
        return cls(relative_path=relative_path)

    @classmethod
    def absolute(cls, context_attribute: str, additional_relative_path: Optional[str] = None) -> 'Location':
        return cls(relative_path=None, context_attribute=context_attribute,
                   additional_relative_path=additional_relative_path)

    def is_absolute(self) -> bool:
        return self.context_attribute is not None

    def is_application_root(self) -> bool:
        """Check if this location is the application root itself."""
        if self.is_absolute():
            return False
        return not _relative_parts(self.relative_path)

    def describe(self) -> str:
        """Human readable name of this location."""
        if self.is_absolute():
            description = f"the location held by context attribute '{self.context_attribute}'"
            parts = _relative_parts(self.additional_relative_path)
            if parts:
                description = f"'{'/'.join(parts)}' under {description}"
            return description

        if self.is_application_root():
            return ROOT_FOLDER_DESCRIPTION
        return '/'.join(_relative_parts(self.relative_path))


def _relative_parts(path: Optional[str]) -> tuple:
    """
    Split a relative path into its components.

    Both separators are accepted, leading separators are ignored and "."
    components are dropped.
    """
    if path is None or not path.strip():
        return ()
    normalized = path.strip().replace('\\', '/').lstrip('/')
    return tuple(part for part in PurePosixPath(normalized).parts if part != '.')


def resolve_location(app_root: Union[str, Path], location: Location,
                     context: Optional[TransformationContext] = None) -> Path:
    """
    Resolve a location into a concrete filesystem path.

    Args:
        app_root: Root folder of the application being transformed
        location: Location configured on the utility
        context: Transformation context, needed for absolute locations

    Returns:
        The resolved path (it is not checked for existence)

    Raises:
        UtilityError: If an absolute location's context attribute is missing
            or does not hold a path
    """
    if not location.is_absolute():
        return Path(app_root).joinpath(*_relative_parts(location.relative_path))

    attribute = location.context_attribute
    if context is None or not context.contains(attribute):
        raise UtilityError(f"Context attribute '{attribute}' is not set, so the absolute location cannot be resolved")

    base = context.get(attribute)
    if not isinstance(base, (str, os.PathLike)):
        raise UtilityError(
            f"Context attribute '{attribute}' must hold a path, got {type(base).__name__}"
        )

    return Path(base).joinpath(*_relative_parts(location.additional_relative_path))


def relative_path(base: Union[str, Path], path: Union[str, Path]) -> str:
    """
    Get the path of ``path`` relative to ``base`` using forward slashes.

    Returns an empty string when both point at the same location.
    """
    relative = os.path.relpath(path, base)
    if relative == os.curdir:
        return ""
    return PurePath(relative).as_posix()
