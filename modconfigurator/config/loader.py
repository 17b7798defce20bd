"""Locating and reading the persisted deployment configuration."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError, StoreReadError
from .models import parse_document
from .types import ConfigurationDocument, ConfigurationSource, _NotInitialized

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("app") / "etc" / "config.yml"


class ConfigurationLoader:
    """Finds a project's configuration file and loads it."""

    def resolve_project_dir(self, project_dir: str | Path | None = None) -> Path:
        """Canonical project root: the argument, MODCONFIGURATOR_PROJECT_DIR, or cwd."""
        if project_dir is not None:
            return self._canonicalize(Path(project_dir).expanduser(), "project directory")

        project_dir_env = os.getenv("MODCONFIGURATOR_PROJECT_DIR")
        if project_dir_env:
            return self._validate_project_dir(project_dir_env)

        return Path.cwd().resolve()

    def find_config(self, project_dir: Path) -> ConfigurationSource:
        """Find the configuration file under an already canonical project root."""
        config_file_env = os.getenv("MODCONFIGURATOR_CONFIG_FILE")
        if config_file_env:
            relative_path = self._validate_config_file(config_file_env)
        else:
            relative_path = DEFAULT_CONFIG_FILE

        return ConfigurationSource(project_dir=project_dir, path=project_dir / relative_path)

    def load_yaml_file(self, source: ConfigurationSource) -> Any:
        """
        Read and parse the YAML file for a source.

        Raises:
            StoreReadError: If the file is missing, unreadable or not valid YAML
        """
        try:
            with open(source.path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise StoreReadError("Configuration file does not exist", path=source.path) from e
        except PermissionError as e:
            raise StoreReadError("Permission denied reading configuration", path=source.path) from e
        except yaml.YAMLError as e:
            raise StoreReadError(f"Failed to parse YAML configuration: {e}", path=source.path) from e
        except OSError as e:
            raise StoreReadError(f"Failed to read configuration: {e}", path=source.path) from e

        logger.debug(f"Successfully loaded configuration from: {source.path}")
        return data

    def load(self, source: ConfigurationSource) -> ConfigurationDocument | _NotInitialized:
        """Load a source and run the parse step on it."""
        return parse_document(self.load_yaml_file(source), source)

    def _canonicalize(self, path: Path, description: str) -> Path:
        try:
            return path.resolve()
        except (OSError, RuntimeError) as e:
            raise ConfigurationError(f"Failed to resolve {description} '{path}': {e}") from e

    def _validate_project_dir(self, path_string: str) -> Path:
        """Validate MODCONFIGURATOR_PROJECT_DIR to prevent path traversal."""
        raw_path = Path(path_string).expanduser()

        if not raw_path.is_absolute():
            logger.error(f"MODCONFIGURATOR_PROJECT_DIR must be absolute path, got: {path_string}")
            raise ConfigurationError("MODCONFIGURATOR_PROJECT_DIR must be an absolute path")

        if ".." in raw_path.parts:
            logger.error(
                f"MODCONFIGURATOR_PROJECT_DIR contains parent directory references: {path_string}"
            )
            raise ConfigurationError("MODCONFIGURATOR_PROJECT_DIR cannot contain '..' path components")

        path = self._canonicalize(raw_path, "MODCONFIGURATOR_PROJECT_DIR")
        if not path.exists():
            logger.warning(f"MODCONFIGURATOR_PROJECT_DIR does not exist: {path}")

        logger.debug(f"Validated MODCONFIGURATOR_PROJECT_DIR: {path}")
        return path

    def _validate_config_file(self, path_string: str) -> Path:
        """Validate MODCONFIGURATOR_CONFIG_FILE stays inside the project root."""
        path = Path(path_string)

        if path.is_absolute():
            raise ConfigurationError("MODCONFIGURATOR_CONFIG_FILE must be relative to the project")

        if ".." in path.parts:
            raise ConfigurationError("MODCONFIGURATOR_CONFIG_FILE cannot contain '..' path components")

        return path
