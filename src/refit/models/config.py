"""
Configuration data models for Refit Utilities.

This module defines the structures used to declare utilities in configuration
files, validates them, and builds the configured utility instances.
"""

from typing import Any, Dict, List, Optional, Union
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..utilities.find_files import FindFiles
from ..utilities.pom_parent_match import PomParentMatch


class UtilityType(Enum):
    """Supported utility types."""
    FIND_FILES = "find_files"
    POM_PARENT_MATCH = "pom_parent_match"


FIND_FILES_FIELDS = ('name_regex', 'path_regex', 'recursive')
POM_PARENT_MATCH_FIELDS = ('group_id', 'artifact_id', 'version')


class UtilityDefinition(BaseModel):
    """
    Declaration of one utility.

    Attributes:
        type: Kind of utility to build
        relative: Location relative to the application root
        absolute: Context attribute holding an absolute location
        absolute_relative: Path appended to the absolute location
        name_regex: File name regular expression (find_files)
        path_regex: Folder path regular expression (find_files)
        recursive: Whether sub-folders are searched (find_files)
        group_id: Parent group id (pom_parent_match)
        artifact_id: Parent artifact id (pom_parent_match)
        version: Parent version (pom_parent_match, optional)
    """

    model_config = ConfigDict(extra='forbid')

    type: UtilityType = Field(..., description="Kind of utility to build")
    relative: Optional[str] = Field(None, description="Location relative to the application root")
    absolute: Optional[str] = Field(None, description="Context attribute holding an absolute location")
    absolute_relative: Optional[str] = Field(None, description="Path appended to the absolute location")
    name_regex: Optional[str] = Field(None, description="File name regular expression")
    path_regex: Optional[str] = Field(None, description="Folder path regular expression")
    recursive: Optional[bool] = Field(None, description="Whether sub-folders are searched")
    group_id: Optional[str] = Field(None, description="Parent group id")
    artifact_id: Optional[str] = Field(None, description="Parent artifact id")
    version: Optional[str] = Field(None, description="Parent version")

    @field_validator('type', mode='before')
    @classmethod
    def validate_type(cls, v) -> UtilityType:
        """Validate and convert type to enum."""
        if isinstance(v, str):
            try:
                return UtilityType(v)
            except ValueError:
                raise ValueError(f"Invalid utility type: {v}")
        return v

    @field_validator('version', mode='before')
    @classmethod
    def validate_version(cls, v):
        """Reject unquoted YAML numbers, which lose digits such as 1.10 -> 1.1."""
        if v is not None and not isinstance(v, str):
            raise ValueError(f"Version must be a quoted string (e.g. version: '1.10'), got {type(v).__name__} {v!r}")
        return v

    @model_validator(mode='after')
    def validate_definition(self):
        """Validate that the fields set are consistent with the utility type."""
        if self.relative is not None and self.absolute is not None:
            raise ValueError("'relative' and 'absolute' are mutually exclusive")

        if self.absolute_relative is not None and self.absolute is None:
            raise ValueError("'absolute_relative' requires 'absolute'")

        if self.type == UtilityType.FIND_FILES:
            foreign = [name for name in POM_PARENT_MATCH_FIELDS if getattr(self, name) is not None]
        else:
            foreign = [name for name in FIND_FILES_FIELDS if getattr(self, name) is not None]
            if self.group_id is None or self.artifact_id is None:
                raise ValueError("pom_parent_match requires 'group_id' and 'artifact_id'")

        if foreign:
            raise ValueError(f"Fields not supported by {self.type.value}: {', '.join(foreign)}")

        return self

    def build(self) -> Union[FindFiles, PomParentMatch]:
        """
        Build the configured utility.

        Raises:
            UtilityConfigurationError: If a value is rejected by the utility
        """
        if self.type == UtilityType.FIND_FILES:
            utility = FindFiles(name_regex=self.name_regex, path_regex=self.path_regex,
                                recursive=bool(self.recursive))
        else:
            utility = PomParentMatch(self.group_id, self.artifact_id, self.version)

        if self.relative is not None:
            utility.relative(self.relative)
        elif self.absolute is not None:
            utility.absolute(self.absolute, self.absolute_relative)

        return utility

    def get_warnings(self) -> List[str]:
        """Get non-fatal remarks about this definition."""
        warnings = []

        if self.type == UtilityType.FIND_FILES:
            if self.name_regex is None and self.path_regex is None:
                warnings.append("find_files without name_regex or path_regex matches every file")
            if self.recursive is False and self.path_regex is not None:
                warnings.append("find_files with path_regex is always recursive, 'recursive: false' is ignored")

        return warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation, leaving out unset fields."""
        data = self.model_dump(exclude_none=True)
        data['type'] = self.type.value
        return data


class UtilitiesConfig(BaseModel):
    """
    Top level configuration: the list of utilities to build.

    Attributes:
        utilities: Utility declarations, in order
    """

    utilities: List[UtilityDefinition] = Field(..., min_length=1, description="Utility declarations")

    def build_utilities(self) -> List[Union[FindFiles, PomParentMatch]]:
        return [definition.build() for definition in self.utilities]

    def get_warnings(self) -> List[str]:
        warnings = []
        for index, definition in enumerate(self.utilities):
            for warning in definition.get_warnings():
                warnings.append(f"Utility #{index + 1}: {warning}")
        return warnings

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UtilitiesConfig':
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return {'utilities': [definition.to_dict() for definition in self.utilities]}
