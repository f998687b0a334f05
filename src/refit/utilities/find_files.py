"""
File search utility for Refit Utilities.

Finds files whose name and/or folder path match regular expressions, under a
search root located relative to the transformed application (or through a
transformation context attribute).
"""

import os
import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..models.context import TransformationContext
from ..models.results import ExecutionResult, UtilityError
from ..models import results
from .paths import Location, relative_path, resolve_location
from .validation import check_for_blank_string, check_for_regex


logger = logging.getLogger(__name__)


NO_FILES_FOUND = "No files have been found"


class FindFiles:
    """
    Find files based on regular expressions matched against the file name
    and/or the file's folder path.

    The search may be recursive (including sub-folders) or not. Setting a
    path regular expression makes the search recursive, and turning
    recursion off clears the path regular expression.

    Both expressions must match entirely. The path expression is evaluated
    against the path of the folder holding the file, relative to the search
    root, using forward slashes as separator on every platform. Files
    directly under the search root have an empty folder path.

    If no location is set, the search starts at the root of the transformed
    application, which is equivalent to ``relative(".")``.

    If no files are found, a warning result carrying an empty list is
    returned.
    """

    DESCRIPTION = "Find files whose name and/or path match regular expression and are under {folder}{scope}"

    def __init__(self, name_regex: Optional[str] = None, path_regex: Optional[str] = None,
                 recursive: bool = False):
        """
        Initialize the file search.

        Args:
            name_regex: Regular expression matched against file names
            path_regex: Regular expression matched against folder paths, forces recursion
            recursive: Whether sub-folders are searched as well
        """
        self._name_regex: Optional[str] = None
        self._name_pattern = None
        self._path_regex: Optional[str] = None
        self._path_pattern = None
        self._recursive = False
        self._location = Location()

        self.set_name_regex(name_regex)
        self.set_recursive(recursive)
        self.set_path_regex(path_regex)

    def set_name_regex(self, name_regex: Optional[str]) -> 'FindFiles':
        """Set the regular expression used to match file names."""
        self._name_pattern = check_for_regex("Name regex", name_regex)
        self._name_regex = name_regex
        return self

    def set_path_regex(self, path_regex: Optional[str]) -> 'FindFiles':
        """
        Set the regular expression used to match folder paths.

        Use forward slash as separator. A non-None value also turns
        recursion on.
        """
        self._path_pattern = check_for_regex("Path regex", path_regex)
        self._path_regex = path_regex
        if path_regex is not None:
            self._recursive = True
        return self

    def set_recursive(self, recursive: bool) -> 'FindFiles':
        """
        Set whether sub-folders are searched.

        Setting this to False also clears the path regular expression.
        """
        self._recursive = bool(recursive)
        if not self._recursive:
            self._path_regex = None
            self._path_pattern = None
        return self

    def relative(self, relative_path: str) -> 'FindFiles':
        """Search from a folder relative to the application root."""
        check_for_blank_string("Relative path", relative_path)
        self._location = Location.relative(relative_path)
        return self

    def absolute(self, context_attribute: str, additional_relative_path: Optional[str] = None) -> 'FindFiles':
        """Search from the folder held by a transformation context attribute."""
        check_for_blank_string("Context attribute name", context_attribute)
        self._location = Location.absolute(context_attribute, additional_relative_path)
        return self

    @property
    def name_regex(self) -> Optional[str]:
        return self._name_regex

    @property
    def path_regex(self) -> Optional[str]:
        return self._path_regex

    @property
    def recursive(self) -> bool:
        return self._recursive

    @property
    def location(self) -> Location:
        return self._location

    def get_description(self) -> str:
        scope = " and sub-folders" if self._recursive else " only (not including sub-folders)"
        return self.DESCRIPTION.format(folder=self._location.describe(), scope=scope)

    def execution(self, app_root: Union[str, Path],
                  context: Optional[TransformationContext] = None) -> ExecutionResult:
        """
        Run the search.

        Args:
            app_root: Root folder of the transformed application
            context: Transformation context, needed for absolute locations

        Returns:
            VALUE result with the list of matching files, WARNING result with
            an empty list when nothing matched, or ERROR result if the search
            root could not be resolved or walked
        """
        try:
            search_root = resolve_location(app_root, self._location, context)
        except UtilityError as e:
            logger.error(f"Could not resolve search root: {e}")
            return results.error(self, e)

        logger.debug(f"Searching files under {search_root} (recursive: {self._recursive})")

        try:
            files = self._find(search_root)
        except Exception as e:
            folder = self._location.describe()
            failure = UtilityError(f"Exception happened when searching files under {folder}", e)
            logger.error(f"{failure}: {e}")
            return results.error(self, failure)

        if not files:
            logger.warning(f"{NO_FILES_FOUND} under {search_root}")
            return results.warning(self, NO_FILES_FOUND, files)

        logger.debug(f"Found {len(files)} files under {search_root}")
        return results.value(self, files)

    def _find(self, search_root: Path) -> List[Path]:
        """
        Walk the search root and collect accepted files in traversal order.

        Folders and file names are visited in sorted order. Symbolic links to
        folders are not followed.

        Raises:
            OSError: If the search root or one of its sub-folders cannot be read
        """
        accept = self._build_filter(search_root)
        files = []

        for current_dir, subdirs, filenames in os.walk(search_root, onerror=_raise_walk_error):
            current_path = Path(current_dir)

            if self._recursive:
                subdirs.sort()
            else:
                subdirs[:] = []

            for filename in sorted(filenames):
                file_path = current_path / filename
                if accept(file_path):
                    files.append(file_path)

        return files

    def _build_filter(self, search_root: Path) -> Callable[[Path], bool]:
        """Build the predicate deciding whether a walked file is part of the result."""
        name_pattern = self._name_pattern
        path_pattern = self._path_pattern

        def accept(file_path: Path) -> bool:
            if not file_path.is_file():
                return False
            if name_pattern is not None and not name_pattern.fullmatch(file_path.name):
                return False
            if path_pattern is not None:
                folder_path = relative_path(search_root, file_path.parent)
                if not path_pattern.fullmatch(folder_path):
                    return False
            return True

        return accept

    def __str__(self) -> str:
        return self.get_description()


def _raise_walk_error(error: OSError) -> None:
    raise error
