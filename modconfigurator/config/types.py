"""Core data types for the configuration store."""

import threading
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

MODULES_SECTION = "modules"
KEY_SEPARATOR = "/"


class ModuleState(Enum):
    """Tri-state activation of a module in the configuration document."""

    UNSET = "undefined"
    ENABLED = "enabled"
    DISABLED = "disabled"

    @classmethod
    def from_value(cls, value: Any) -> "ModuleState":
        """Map a persisted value to a state. Absence (None) is UNSET."""
        if value is None:
            return cls.UNSET
        if isinstance(value, str):
            return cls.DISABLED if value.strip() in ("", "0") else cls.ENABLED
        return cls.ENABLED if value else cls.DISABLED

    @property
    def persisted_value(self) -> int | None:
        return {
            ModuleState.UNSET: None,
            ModuleState.ENABLED: 1,
            ModuleState.DISABLED: 0,
        }[self]


class _NotInitialized:
    """Marker for a document that has no modules section yet."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_INITIALIZED"

    def __bool__(self) -> bool:
        return False


NOT_INITIALIZED = _NotInitialized()


@dataclass
class ConfigurationSource:
    """Location of the persisted document for one project."""

    project_dir: Path
    path: Path

    @property
    def exists(self) -> bool:
        return self.path.exists()


@dataclass
class ConfigurationDocument:
    """Cached, mutable view of one project's persisted document.

    ``lock`` serializes read-decide-write sequences against this document.
    """

    source: ConfigurationSource
    data: dict[str, Any] = field(default_factory=dict)
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    def get(self, key: str) -> Any | None:
        """Resolve a ``/``-separated path, returning None if any segment is missing."""
        node: Any = self.data
        for segment in key.split(KEY_SEPARATOR):
            if not isinstance(node, dict) or segment not in node:
                return None
            node = node[segment]
        return node

    @property
    def modules(self) -> dict[str, Any]:
        section = self.data.get(MODULES_SECTION)
        return section if isinstance(section, dict) else {}

    def module_state(self, module_name: str) -> ModuleState:
        return ModuleState.from_value(self.modules.get(module_name))
