"""Key/value access to a cached document backed by a writer."""

import logging
from typing import Any

from .types import ConfigurationDocument
from .writer import ConfigurationWriter

logger = logging.getLogger(__name__)


class ConfigurationStore:
    """Reads from the cached document and persists partial updates through the writer."""

    def __init__(self, document: ConfigurationDocument, writer: ConfigurationWriter):
        self.document = document
        self.writer = writer

    @property
    def lock(self):
        return self.document.lock

    def get(self, key: str) -> Any | None:
        """Value at a ``/``-separated path, or None when unset."""
        return self.document.get(key)

    def get_module(self, module_name: str) -> Any | None:
        """Raw value recorded for a module, looked up by its exact name."""
        return self.document.modules.get(module_name)

    def save_config(self, partial: dict[str, Any]) -> None:
        """Persist a partial document, then make it visible to subsequent reads."""
        with self.lock:
            merged = self.writer.save_config(partial)
            self.document.data = merged
            logger.debug(f"Updated cached configuration for {self.document.source.project_dir}")
