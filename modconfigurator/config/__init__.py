"""Configuration document access for module reconciliation."""

from .cache import DocumentCache
from .exceptions import ConfigurationError, ConfiguratorError, StoreReadError, StoreWriteError
from .loader import DEFAULT_CONFIG_FILE, ConfigurationLoader
from .merger import merge_partial
from .models import ModulesSection, parse_document
from .store import ConfigurationStore
from .types import (
    MODULES_SECTION,
    NOT_INITIALIZED,
    ConfigurationDocument,
    ConfigurationSource,
    ModuleState,
)
from .writer import ConfigurationWriter

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "MODULES_SECTION",
    "NOT_INITIALIZED",
    "ConfigurationDocument",
    "ConfigurationError",
    "ConfigurationLoader",
    "ConfigurationSource",
    "ConfigurationStore",
    "ConfigurationWriter",
    "ConfiguratorError",
    "DocumentCache",
    "ModuleState",
    "ModulesSection",
    "StoreReadError",
    "StoreWriteError",
    "merge_partial",
    "parse_document",
]
