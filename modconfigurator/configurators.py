"""Module configurators: the decision policy and its no-op counterpart."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from .config.store import ConfigurationStore
from .config.types import MODULES_SECTION, ModuleState
from .output import DiagnosticOutput

logger = logging.getLogger(__name__)

GATING_MODULE = "Magento_InventoryApi"

# Enabled together with GATING_MODULE when they have no recorded state yet.
DEPENDENT_MODULES = frozenset(
    {
        "Magento_InventoryDistanceBasedSourceSelection",
        "Magento_InventoryDistanceBasedSourceSelectionAdminUi",
        "Magento_InventoryDistanceBasedSourceSelectionApi",
        "Magento_InventoryElasticsearch",
    }
)


class Decision(Enum):
    """Outcome of one configure call."""

    LEAVE_UNCHANGED = "leave_unchanged"
    ENABLE = "enable"
    DISABLE = "disable"


@dataclass
class ConfigureResult:
    """What configure decided for a module and the state it left behind."""

    module_name: str
    decision: Decision
    state: ModuleState


class Configurator(ABC):
    """Common interface for reconciling one module at a time."""

    @abstractmethod
    def configure(self, module_name: str) -> ConfigureResult | None:
        pass


@dataclass
class NoOpConfigurator(Configurator):
    """Used while the document has no modules section; touches nothing."""

    output: DiagnosticOutput | None = None

    def configure(self, module_name: str) -> ConfigureResult | None:
        logger.debug(f"Modules section not initialized, skipping {module_name}")
        return None


@dataclass
class ModuleDecisionPolicy(Configurator):
    """
    Decides and persists the state of one module per ``configure`` call.

    Priority order:
    1. A module with any recorded state is left as it is.
    2. A dependent module is enabled when the gating module was enabled at resolution time.
    3. Anything else is disabled.
    """

    store: ConfigurationStore
    output: DiagnosticOutput
    gating_enabled: bool = False
    dependent_modules: frozenset[str] = field(default=DEPENDENT_MODULES)
    gating_module: str = GATING_MODULE

    def configure(self, module_name: str) -> ConfigureResult:
        with self.store.lock:
            current = self.get_state(module_name)
            decision = self.decide(module_name, current)

            match decision:
                case Decision.LEAVE_UNCHANGED:
                    self.output.write_error(
                        f"    ...Keep {module_name} module {current.value} as in current configuration"
                    )
                    return ConfigureResult(module_name, decision, current)
                case Decision.ENABLE:
                    self.output.write_error(
                        f"    ...Enabling {module_name} module because module "
                        f"{self.gating_module} is enabled."
                    )
                    return self._write(module_name, decision, ModuleState.ENABLED)
                case Decision.DISABLE:
                    self.output.write_error(
                        f"    ...Disabling {module_name} module for backward compatibility"
                    )
                    return self._write(module_name, decision, ModuleState.DISABLED)

    def decide(self, module_name: str, current: ModuleState) -> Decision:
        """Pure decision for a module given its current state."""
        if current is not ModuleState.UNSET:
            return Decision.LEAVE_UNCHANGED

        if self.gating_enabled and module_name in self.dependent_modules:
            return Decision.ENABLE

        return Decision.DISABLE

    def get_state(self, module_name: str) -> ModuleState:
        return ModuleState.from_value(self.store.get_module(module_name))

    def _write(self, module_name: str, decision: Decision, state: ModuleState) -> ConfigureResult:
        self.store.save_config({MODULES_SECTION: {module_name: state.persisted_value}})
        logger.debug(f"Module {module_name} set to {state.value}")
        return ConfigureResult(module_name, decision, state)
