"""Exceptions raised while reading and writing the deployment configuration."""

from pathlib import Path


class ConfiguratorError(Exception):
    """Base error for module configuration failures."""

    def __init__(self, message: str, path: Path | str | None = None):
        self.message = message
        self.path = str(path) if path is not None else None
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.path:
            return f"{self.message} (in {self.path})"
        return self.message


class StoreReadError(ConfiguratorError):
    """The persisted document is missing, unreadable or corrupt."""


class StoreWriteError(ConfiguratorError):
    """The merged document could not be persisted."""


class ConfigurationError(ConfiguratorError):
    """Invalid runtime configuration, e.g. a bad environment variable."""
