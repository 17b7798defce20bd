"""Shared test utilities for building project layouts."""

from pathlib import Path

import yaml

from modconfigurator.config import DEFAULT_CONFIG_FILE


def create_project(project_dir: Path, config_data: dict | None) -> Path:
    """Write config_data as the project's config file and return its path."""
    config_path = project_dir / DEFAULT_CONFIG_FILE
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        if config_data is not None:
            yaml.safe_dump(config_data, f, sort_keys=False)
    return config_path


def read_config(project_dir: Path) -> dict:
    with open(project_dir / DEFAULT_CONFIG_FILE) as f:
        return yaml.safe_load(f)
