"""Per-project cache of loaded configuration documents."""

import logging
import threading
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

from .types import ConfigurationDocument, _NotInitialized

logger = logging.getLogger(__name__)

CachedDocument: TypeAlias = ConfigurationDocument | _NotInitialized


class DocumentCache:
    """
    Documents keyed by canonical project path.

    Entries are loaded on first access and never invalidated; the cache lives as
    long as the reconciliation run that owns it.
    """

    def __init__(self):
        self._documents: dict[Path, CachedDocument] = {}
        self._lock = threading.Lock()

    def get_or_load(self, project_dir: Path, load: Callable[[], CachedDocument]) -> CachedDocument:
        """Return the cached entry for project_dir, calling load once on a miss."""
        key = project_dir.resolve()
        with self._lock:
            if key not in self._documents:
                logger.debug(f"Loading configuration for {key}")
                self._documents[key] = load()
            else:
                logger.debug(f"Using cached configuration for {key}")
            return self._documents[key]

    def __contains__(self, project_dir: Path) -> bool:
        return project_dir.resolve() in self._documents

    def __len__(self) -> int:
        return len(self._documents)
