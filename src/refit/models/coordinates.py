"""
Artifact coordinate models for Refit Utilities.

A coordinate triple identifies a Maven artifact. It is used both as a match
target and as the value of a parsed parent declaration.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Coordinates(BaseModel):
    """
    Identity of an artifact as (groupId, artifactId, optional version).

    Attributes:
        group_id: Artifact group id
        artifact_id: Artifact id
        version: Artifact version, None when not declared or not relevant
    """

    model_config = ConfigDict(frozen=True)

    group_id: str = Field(..., min_length=1, description="Artifact group id")
    artifact_id: str = Field(..., min_length=1, description="Artifact id")
    version: Optional[str] = Field(None, description="Artifact version")

    @field_validator('group_id', 'artifact_id')
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Coordinate fields cannot be blank")
        return v

    @field_validator('version')
    @classmethod
    def validate_version(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Version cannot be blank when set")
        return v

    def matches(self, other: Optional['Coordinates']) -> bool:
        """
        Check whether ``other`` has this identity.

        Group and artifact ids must be equal. The version is only compared
        when this instance declares one.
        """
        if other is None:
            return False
        if self.group_id != other.group_id or self.artifact_id != other.artifact_id:
            return False
        return self.version is None or self.version == other.version

    def __str__(self) -> str:
        if self.version is None:
            return f"{self.group_id}:{self.artifact_id}"
        return f"{self.group_id}:{self.artifact_id}:{self.version}"
