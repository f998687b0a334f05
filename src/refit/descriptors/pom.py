"""
Maven POM reader for Refit Utilities.

Parses a pom.xml stream with lxml and exposes the parts utilities inspect,
most importantly the declared parent artifact.
"""

import logging
from typing import BinaryIO, Optional
from lxml import etree
from pydantic import BaseModel, Field

from ..models.coordinates import Coordinates


logger = logging.getLogger(__name__)


class DescriptorParseError(Exception):
    """Raised when a project descriptor cannot be parsed."""
    pass


class ProjectDescriptor(BaseModel):
    """
    Subset of a Maven project model.

    Attributes:
        group_id: Project group id (None when inherited from the parent)
        artifact_id: Project artifact id
        version: Project version (None when inherited from the parent)
        packaging: Declared packaging, None when not declared
        parent: Declared parent artifact, None when the project has no parent
    """

    group_id: Optional[str] = Field(None, description="Project group id")
    artifact_id: Optional[str] = Field(None, description="Project artifact id")
    version: Optional[str] = Field(None, description="Project version")
    packaging: Optional[str] = Field(None, description="Declared packaging")
    parent: Optional[Coordinates] = Field(None, description="Declared parent artifact")

    def has_parent(self) -> bool:
        return self.parent is not None


def _local_name(element: etree._Element) -> Optional[str]:
    # Comments and processing instructions have no string tag
    if not isinstance(element.tag, str):
        return None
    return etree.QName(element).localname


def _child(element: etree._Element, name: str) -> Optional[etree._Element]:
    for child in element:
        if _local_name(child) == name:
            return child
    return None


def _child_text(element: etree._Element, name: str) -> Optional[str]:
    child = _child(element, name)
    if child is None or child.text is None:
        return None
    text = child.text.strip()
    return text or None


def _read_parent(project: etree._Element) -> Optional[Coordinates]:
    parent = _child(project, 'parent')
    if parent is None:
        return None

    group_id = _child_text(parent, 'groupId')
    artifact_id = _child_text(parent, 'artifactId')
    if group_id is None or artifact_id is None:
        raise DescriptorParseError("Parent declaration requires both groupId and artifactId")

    return Coordinates(group_id=group_id, artifact_id=artifact_id,
                       version=_child_text(parent, 'version'))


def read_pom(stream: BinaryIO) -> ProjectDescriptor:
    """
    Read a Maven project descriptor.

    Args:
        stream: Binary stream positioned at the start of the document

    Returns:
        ProjectDescriptor with the project identity and declared parent

    Raises:
        DescriptorParseError: If the document is not well formed XML or is
            not a Maven project
    """
    parser = etree.XMLParser(resolve_entities=False, no_network=True)

    try:
        tree = etree.parse(stream, parser)
    except etree.XMLSyntaxError as e:
        raise DescriptorParseError(f"Invalid POM document: {e}") from e

    project = tree.getroot()
    if _local_name(project) != 'project':
        raise DescriptorParseError(f"Expected root element 'project' but found '{_local_name(project)}'")

    descriptor = ProjectDescriptor(
        group_id=_child_text(project, 'groupId'),
        artifact_id=_child_text(project, 'artifactId'),
        version=_child_text(project, 'version'),
        packaging=_child_text(project, 'packaging'),
        parent=_read_parent(project)
    )

    logger.debug(f"Read POM for artifact {descriptor.artifact_id} (parent: {descriptor.parent})")
    return descriptor
