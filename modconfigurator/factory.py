"""Resolving a configurator for a project location."""

import logging
from pathlib import Path

from .config.cache import CachedDocument, DocumentCache
from .config.loader import ConfigurationLoader
from .config.store import ConfigurationStore
from .config.types import ConfigurationDocument, ModuleState
from .config.writer import ConfigurationWriter
from .configurators import (
    DEPENDENT_MODULES,
    GATING_MODULE,
    Configurator,
    ModuleDecisionPolicy,
    NoOpConfigurator,
)
from .output import DiagnosticOutput

logger = logging.getLogger(__name__)


class ConfiguratorResolver:
    """Builds configurators, sharing one cached document per canonical project path."""

    def __init__(
        self,
        output: DiagnosticOutput,
        cache: DocumentCache | None = None,
        loader: ConfigurationLoader | None = None,
    ):
        self.output = output
        self.cache = cache if cache is not None else DocumentCache()
        self.loader = loader or ConfigurationLoader()

    def create_configurator(self, project_dir: str | Path | None = None) -> Configurator:
        """
        Create the configurator for a project.

        Args:
            project_dir: Project root; see ConfigurationLoader.resolve_project_dir

        Returns:
            ModuleDecisionPolicy when the document has a modules section,
            NoOpConfigurator otherwise

        Raises:
            StoreReadError: If the persisted document cannot be read
            ConfigurationError: If the project location is invalid
        """
        document = self.get_document(project_dir)

        match document:
            case ConfigurationDocument():
                gating_enabled = self.is_gating_module_enabled(document)
                logger.debug(f"{GATING_MODULE} enabled: {gating_enabled}")
                store = ConfigurationStore(
                    document, ConfigurationWriter(document.source, self.loader)
                )
                return ModuleDecisionPolicy(
                    store=store,
                    output=self.output,
                    gating_enabled=gating_enabled,
                    dependent_modules=DEPENDENT_MODULES,
                )
            case _:
                logger.info("No modules section in configuration, leaving modules untouched")
                return NoOpConfigurator(self.output)

    def get_document(self, project_dir: str | Path | None = None) -> CachedDocument:
        """Cached document (or NOT_INITIALIZED) for the canonical project path."""
        root = self.loader.resolve_project_dir(project_dir)
        source = self.loader.find_config(root)
        return self.cache.get_or_load(root, lambda: self.loader.load(source))

    @staticmethod
    def is_gating_module_enabled(document: ConfigurationDocument) -> bool:
        """True when the gating module is recorded as enabled."""
        for module_name, enabled in document.modules.items():
            if module_name == GATING_MODULE:
                return ModuleState.from_value(enabled) is ModuleState.ENABLED
        return False
