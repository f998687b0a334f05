"""
POM parent match condition for Refit Utilities.

Checks whether a Maven pom file declares a parent artifact with the given
coordinates.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..descriptors.pom import read_pom
from ..models.context import TransformationContext
from ..models.coordinates import Coordinates
from ..models.results import ExecutionResult, UtilityError
from ..models import results
from .paths import Location, relative_path, resolve_location
from .validation import check_for_blank_string, check_for_empty_string


logger = logging.getLogger(__name__)


DEFAULT_POM_FILE = "pom.xml"


class PomParentMatch:
    """
    Check if a pom file has a parent artifact matching groupId, artifactId
    and, optionally, version. When no version is set only groupId and
    artifactId are compared.

    The pom file is located with ``relative`` or ``absolute``, and defaults
    to ``pom.xml`` at the root of the transformed application.

    A pom file without parent, or with a different parent, is a regular
    ``False`` value. Files that cannot be read or parsed produce error
    results.
    """

    DESCRIPTION = "Check if the pom has a parent matching '{coordinates}' exists in a POM file"

    def __init__(self, group_id: Optional[str] = None, artifact_id: Optional[str] = None,
                 version: Optional[str] = None):
        self._group_id: Optional[str] = None
        self._artifact_id: Optional[str] = None
        self._version: Optional[str] = None
        self._location = Location.relative(DEFAULT_POM_FILE)

        if group_id is not None:
            self.set_group_id(group_id)
        if artifact_id is not None:
            self.set_artifact_id(artifact_id)
        self.set_version(version)

    def set_group_id(self, group_id: str) -> 'PomParentMatch':
        check_for_blank_string("GroupId", group_id)
        self._group_id = group_id
        return self

    def set_artifact_id(self, artifact_id: str) -> 'PomParentMatch':
        check_for_blank_string("ArtifactId", artifact_id)
        self._artifact_id = artifact_id
        return self

    def set_version(self, version: Optional[str]) -> 'PomParentMatch':
        check_for_empty_string("Version", version)
        self._version = version
        return self

    def relative(self, relative_path: str) -> 'PomParentMatch':
        """Point at a pom file relative to the application root."""
        check_for_blank_string("Relative path", relative_path)
        self._location = Location.relative(relative_path)
        return self

    def absolute(self, context_attribute: str, additional_relative_path: Optional[str] = None) -> 'PomParentMatch':
        """Point at a pom file held by (or under) a transformation context attribute."""
        check_for_blank_string("Context attribute name", context_attribute)
        self._location = Location.absolute(context_attribute, additional_relative_path)
        return self

    @property
    def group_id(self) -> Optional[str]:
        return self._group_id

    @property
    def artifact_id(self) -> Optional[str]:
        return self._artifact_id

    @property
    def version(self) -> Optional[str]:
        return self._version

    @property
    def location(self) -> Location:
        return self._location

    @property
    def coordinates(self) -> Optional[Coordinates]:
        """Target coordinates, None until both groupId and artifactId are set."""
        if self._group_id is None or self._artifact_id is None:
            return None
        return Coordinates(group_id=self._group_id, artifact_id=self._artifact_id, version=self._version)

    def _coordinates_text(self) -> str:
        version = "" if self._version is None else f":{self._version}"
        return f"{self._group_id}:{self._artifact_id}{version}"

    def get_description(self) -> str:
        return self.DESCRIPTION.format(coordinates=self._coordinates_text())

    def execution(self, app_root: Union[str, Path],
                  context: Optional[TransformationContext] = None) -> ExecutionResult:
        """
        Check the pom file's parent.

        Args:
            app_root: Root folder of the transformed application
            context: Transformation context, needed for absolute locations

        Returns:
            VALUE result with True or False, or ERROR result if the pom file
            could not be located, read, parsed or closed
        """
        coordinates = self.coordinates
        if coordinates is None:
            return results.error(self, UtilityError("GroupId and ArtifactId must be set before execution"))

        try:
            pom_file = resolve_location(app_root, self._location, context)
        except UtilityError as e:
            logger.error(f"Could not resolve pom file: {e}")
            return results.error(self, e)

        if self._location.is_absolute():
            pom_file_name = pom_file.as_posix()
        else:
            pom_file_name = relative_path(app_root, pom_file)

        stream = None
        exists = False
        failure = None

        try:
            stream = open(pom_file, 'rb')
            descriptor = read_pom(stream)
            exists = coordinates.matches(descriptor.parent)
        except Exception as e:
            details = f"Exception happened when checking if POM parent {coordinates} exists in {pom_file_name}"
            failure = UtilityError(details, e)
        finally:
            if stream is not None:
                try:
                    stream.close()
                except OSError as e:
                    if failure is None:
                        failure = UtilityError(f"Exception happened when closing pom file {pom_file_name}", e)
                    else:
                        failure.add_suppressed(e)

        if failure is not None:
            logger.error(f"{failure}: {failure.cause}")
            return results.error(self, failure)

        logger.debug(f"POM parent {coordinates} {'found' if exists else 'not found'} in {pom_file_name}")
        return results.value(self, exists)

    def __str__(self) -> str:
        return self.get_description()
