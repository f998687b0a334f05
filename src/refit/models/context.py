"""
Transformation context model for Refit Utilities.

The context carries named attributes produced while a transformation runs.
Utilities read it to resolve absolute locations.
"""

from typing import Any, Dict
from pydantic import BaseModel, Field


class TransformationContext(BaseModel):
    """
    Named attributes shared across the utilities of one transformation.

    Attributes:
        attributes: Attribute values keyed by name
    """

    attributes: Dict[str, Any] = Field(default_factory=dict, description="Attribute values keyed by name")

    def get(self, name: str, default: Any = None) -> Any:
        return self.attributes.get(name, default)

    def put(self, name: str, value: Any) -> None:
        self.attributes[name] = value

    def contains(self, name: str) -> bool:
        return name in self.attributes

    def __str__(self) -> str:
        return f"TransformationContext({len(self.attributes)} attributes)"
