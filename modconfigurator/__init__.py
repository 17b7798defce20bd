"""Reconcile module enable/disable flags in a project's deployment configuration."""

from .configurators import (
    DEPENDENT_MODULES,
    GATING_MODULE,
    Configurator,
    ConfigureResult,
    Decision,
    ModuleDecisionPolicy,
    NoOpConfigurator,
)
from .factory import ConfiguratorResolver

__all__ = [
    "DEPENDENT_MODULES",
    "GATING_MODULE",
    "Configurator",
    "ConfigureResult",
    "ConfiguratorResolver",
    "Decision",
    "ModuleDecisionPolicy",
    "NoOpConfigurator",
]
