"""
Unit tests for location resolution.

Tests Location validation and descriptions, resolution of relative and
absolute locations, and forward-slash relative path rendering.
"""

import os
import tempfile
import shutil
from pathlib import Path
import pytest
from pydantic import ValidationError

from refit.models.context import TransformationContext
from refit.models.results import UtilityError
from refit.utilities.paths import Location, relative_path, resolve_location


class TestLocation:
    """Test cases for the Location model."""

    def test_default_is_application_root(self):
        """Test that the default location is the application root."""
        location = Location()

        assert location.relative_path == "."
        assert location.is_absolute() is False
        assert location.is_application_root() is True
        assert location.describe() == "the root folder"

    def test_root_equivalents(self):
        """Test that several spellings of the root are recognized."""
        for path in [".", "./", "/", "", "\\"]:
            assert Location.relative(path).is_application_root() is True
            assert Location.relative(path).describe() == "the root folder"

    def test_relative_description_normalizes_separators(self):
        """Test that relative locations are described with forward slashes."""
        assert Location.relative("src/main").describe() == "src/main"
        assert Location.relative("src\\main\\java").describe() == "src/main/java"
        assert Location.relative("/src/main/resources/dogs.yaml").describe() == "src/main/resources/dogs.yaml"

    def test_absolute_description(self):
        """Test descriptions of absolute locations."""
        location = Location.absolute("modulesFolder")
        assert location.is_absolute() is True
        assert location.is_application_root() is False
        assert location.describe() == "the location held by context attribute 'modulesFolder'"

        location = Location.absolute("modulesFolder", "core/src")
        assert location.describe() == "'core/src' under the location held by context attribute 'modulesFolder'"

    def test_relative_and_absolute_are_exclusive(self):
        """Test that a location cannot be both relative and absolute."""
        with pytest.raises(ValidationError):
            Location(relative_path="src", context_attribute="folder")

    def test_additional_path_requires_attribute(self):
        """Test that an additional relative path needs a context attribute."""
        with pytest.raises(ValidationError):
            Location(additional_relative_path="src")

    def test_location_is_frozen(self):
        """Test that locations cannot be changed once created."""
        location = Location.relative("src")
        with pytest.raises(ValidationError):
            location.relative_path = "other"


class TestResolveLocation:
    """Test cases for resolve_location."""

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.app_root = Path(self.temp_dir)
        (self.app_root / "src" / "main").mkdir(parents=True)

    def teardown_method(self):
        """Clean up test fixtures."""
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def test_resolve_root(self):
        """Test resolving the default location."""
        assert resolve_location(self.app_root, Location()) == self.app_root

    def test_resolve_relative(self):
        """Test resolving relative locations, with either separator."""
        expected = self.app_root / "src" / "main"

        assert resolve_location(self.app_root, Location.relative("src/main")) == expected
        assert resolve_location(self.app_root, Location.relative("/src/main")) == expected
        assert resolve_location(self.app_root, Location.relative("src\\main")) == expected
        assert resolve_location(str(self.app_root), Location.relative("src/main")) == expected

    def test_resolve_absolute(self):
        """Test resolving locations held by context attributes."""
        context = TransformationContext()
        context.put("mainFolder", self.app_root / "src" / "main")
        context.put("srcFolder", str(self.app_root / "src"))

        assert resolve_location(self.app_root, Location.absolute("mainFolder"), context) == self.app_root / "src" / "main"
        assert resolve_location(self.app_root, Location.absolute("srcFolder", "main"), context) == self.app_root / "src" / "main"

    def test_resolve_absolute_missing_attribute(self):
        """Test that a missing context attribute is reported."""
        with pytest.raises(UtilityError, match="Context attribute 'missing' is not set"):
            resolve_location(self.app_root, Location.absolute("missing"), TransformationContext())

        with pytest.raises(UtilityError):
            resolve_location(self.app_root, Location.absolute("missing"))

    def test_resolve_absolute_not_a_path(self):
        """Test that a context attribute holding something else is reported."""
        context = TransformationContext(attributes={"count": 3})

        with pytest.raises(UtilityError, match="must hold a path"):
            resolve_location(self.app_root, Location.absolute("count"), context)


class TestRelativePath:
    """Test cases for relative_path."""

    def test_same_location(self):
        """Test that a path relative to itself is empty."""
        assert relative_path("/app", "/app") == ""

    def test_nested_path_uses_forward_slashes(self):
        """Test relative paths of nested locations."""
        base = Path("/app")
        assert relative_path(base, base / "sub") == "sub"
        assert relative_path(base, base / "sub" / "deeper" / "c.txt") == "sub/deeper/c.txt"
