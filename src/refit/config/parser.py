"""
YAML configuration parser for Refit Utilities.

This module loads utility declarations from YAML files, validates them and
builds the configured utility instances, reporting configuration problems
with helpful messages.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import logging
from dataclasses import dataclass, field
from pydantic import ValidationError

from ..models.config import UtilitiesConfig
from ..utilities.find_files import FindFiles
from ..utilities.pom_parent_match import PomParentMatch
from ..utilities.validation import UtilityConfigurationError


logger = logging.getLogger(__name__)


@dataclass
class ConfigParseResult:
    """
    Result of configuration parsing operation.

    Attributes:
        config: The parsed and validated configuration
        utilities: Utility instances built from the configuration
        warnings: List of non-fatal warnings
        config_path: Path to the configuration file used
    """
    config: UtilitiesConfig
    utilities: List[Union[FindFiles, PomParentMatch]]
    warnings: List[str] = field(default_factory=list)
    config_path: Optional[Path] = None


class ConfigurationError(Exception):
    """Raised when configuration parsing or validation fails."""
    pass


class ConfigParser:
    """
    YAML configuration parser with validation and error handling.

    Loads a YAML document with a top level ``utilities`` list, validates each
    declaration and builds the utilities. Configuration files can be given
    explicitly or discovered in a folder.
    """

    DEFAULT_CONFIG_NAMES = [
        '.refit.yaml',
        '.refit.yml',
        'refit.yaml',
        'refit.yml'
    ]

    def __init__(self, strict_mode: bool = False):
        """
        Initialize the configuration parser.

        Args:
            strict_mode: If True, treat warnings as errors
        """
        self.strict_mode = strict_mode
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load_config(self, config_path: Union[str, Path]) -> ConfigParseResult:
        """
        Load configuration from a YAML file and build its utilities.

        Args:
            config_path: Path to the configuration file

        Returns:
            ConfigParseResult containing the configuration and utilities

        Raises:
            ConfigurationError: If the file cannot be read or is invalid
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        config_data = self._load_yaml_file(config_path)
        result = self.parse_config(config_data)
        result.config_path = config_path

        self.logger.info(f"Loaded {len(result.utilities)} utilities from {config_path}")
        return result

    def find_config(self, search_dir: Optional[Union[str, Path]] = None) -> Optional[Path]:
        """
        Find a configuration file in a folder.

        Args:
            search_dir: Folder to look into, defaults to the current directory

        Returns:
            Path to the first configuration file found, or None
        """
        search_dir = Path(search_dir) if search_dir is not None else Path.cwd()

        for config_name in self.DEFAULT_CONFIG_NAMES:
            config_file = search_dir / config_name
            if config_file.is_file():
                self.logger.info(f"Found configuration file: {config_file}")
                return config_file

        self.logger.info(f"No configuration file found in {search_dir}")
        return None

    def parse_config(self, config_data: Dict[str, Any]) -> ConfigParseResult:
        """
        Validate configuration data and build its utilities.

        Args:
            config_data: Configuration data, as loaded from YAML

        Returns:
            ConfigParseResult without config_path

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        try:
            config = UtilitiesConfig.from_dict(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

        try:
            utilities = config.build_utilities()
        except UtilityConfigurationError as e:
            raise ConfigurationError(f"Invalid utility configuration: {e}") from e

        warnings = config.get_warnings()
        for warning in warnings:
            self.logger.warning(warning)

        if self.strict_mode and warnings:
            raise ConfigurationError(f"Configuration warnings in strict mode: {'; '.join(warnings)}")

        return ConfigParseResult(config=config, utilities=utilities, warnings=warnings)

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load and parse YAML file.

        Args:
            file_path: Path to YAML file

        Returns:
            Parsed YAML data as dictionary

        Raises:
            ConfigurationError: If file cannot be read or parsed
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()

            if not content.strip():
                raise ConfigurationError(f"Configuration file is empty: {file_path}")

            data = yaml.safe_load(content)

            if not isinstance(data, dict):
                raise ConfigurationError(f"Configuration file must contain a YAML object, got {type(data).__name__}")

            return data

        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {file_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e


def load_config(config_path: Union[str, Path], strict_mode: bool = False) -> ConfigParseResult:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to configuration file
        strict_mode: Whether to treat warnings as errors

    Returns:
        ConfigParseResult containing parsed configuration

    Raises:
        ConfigurationError: If configuration is invalid
    """
    parser = ConfigParser(strict_mode=strict_mode)
    return parser.load_config(config_path)
