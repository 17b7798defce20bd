"""Pydantic models and the parse step for the persisted document."""

from typing import Any, Literal

from pydantic import RootModel, StrictBool, StrictInt, ValidationError, field_validator

from .exceptions import StoreReadError
from .types import (
    MODULES_SECTION,
    NOT_INITIALIZED,
    ConfigurationDocument,
    ConfigurationSource,
    _NotInitialized,
)


class ModulesSection(RootModel[dict[str, StrictBool | StrictInt | Literal["0", "1"] | None]]):
    """The ``modules`` section: module name -> 0/1, "0"/"1" or a boolean."""

    @field_validator("root")
    @classmethod
    def validate_module_names(
        cls, v: dict[str, bool | int | str | None]
    ) -> dict[str, bool | int | str | None]:
        """Validate module names are non-empty strings."""
        for name in v.keys():
            if not isinstance(name, str) or not name.strip():
                raise ValueError(f"Module name '{name}' must be a non-empty string")
        return v


def parse_document(
    data: Any, source: ConfigurationSource
) -> ConfigurationDocument | _NotInitialized:
    """
    Turn raw loaded data into a typed document or the not-initialized signal.

    Args:
        data: Result of ``yaml.safe_load`` (None for an empty file)
        source: Where the data was read from, used for error reporting

    Returns:
        ConfigurationDocument when a modules mapping exists, else NOT_INITIALIZED

    Raises:
        StoreReadError: If the data is not a mapping or the modules section is invalid
    """
    if data is None:
        return NOT_INITIALIZED

    if not isinstance(data, dict):
        raise StoreReadError("Configuration file must contain a YAML mapping", path=source.path)

    if not isinstance(data.get(MODULES_SECTION), dict):
        return NOT_INITIALIZED

    try:
        ModulesSection.model_validate(data[MODULES_SECTION])
    except ValidationError as e:
        error_details = []
        for error in e.errors():
            location = " -> ".join(str(x) for x in error["loc"]) if error["loc"] else "root"
            error_details.append(f"{location}: {error['msg']}")
        raise StoreReadError(
            "Invalid modules section:\n" + "\n".join(error_details), path=source.path
        ) from e

    return ConfigurationDocument(source=source, data=data)
