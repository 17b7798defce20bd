"""Durable, atomic persistence of merged configuration documents."""

import logging
import os
import tempfile
from typing import Any

import yaml

from .exceptions import StoreReadError, StoreWriteError
from .loader import ConfigurationLoader
from .merger import merge_partial
from .types import ConfigurationSource

logger = logging.getLogger(__name__)


class ConfigurationWriter:
    """Merges partial documents into the persisted file for one source."""

    def __init__(self, source: ConfigurationSource, loader: ConfigurationLoader | None = None):
        self.source = source
        self.loader = loader or ConfigurationLoader()

    def save_config(self, partial: dict[str, Any]) -> dict[str, Any]:
        """
        Merge partial into the persisted document and write it back.

        The file on disk is re-read so keys written by other tools since it was
        cached are preserved. The write goes to a temporary file next to the
        target which then replaces it, so a crash leaves either the old or the
        new document.

        Args:
            partial: Nested mapping of keys to set

        Returns:
            The merged document as written

        Raises:
            StoreReadError: If the current document cannot be read
            StoreWriteError: If the merged document cannot be written
        """
        current = self._read_current()
        merged = merge_partial(current, partial)
        self._atomic_write(merged)
        logger.info(f"Saved configuration to {self.source.path}")
        return merged

    def _read_current(self) -> dict[str, Any]:
        if not self.source.exists:
            return {}

        data = self.loader.load_yaml_file(self.source)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise StoreReadError(
                "Configuration file must contain a YAML mapping", path=self.source.path
            )
        return data

    def _atomic_write(self, data: dict[str, Any]) -> None:
        path = self.source.path
        directory = path.parent

        try:
            fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=directory)
        except OSError as e:
            raise StoreWriteError(f"Cannot create temporary file: {e}", path=path) from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
                f.flush()
                os.fsync(f.fileno())
            if path.exists():
                os.chmod(tmp, path.stat().st_mode & 0o777)
            os.replace(tmp, path)
            logger.debug(f"Replaced {path} with {tmp}")
        except (OSError, yaml.YAMLError) as e:
            raise StoreWriteError(f"Failed to write configuration: {e}", path=path) from e
        finally:
            if os.path.exists(tmp):
                os.remove(tmp)
