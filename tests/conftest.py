"""Pytest configuration and shared fixtures."""

import os
from unittest.mock import patch

import pytest

from modconfigurator.output import BufferedOutput


@pytest.fixture(autouse=True)
def clean_environment():
    with patch.dict(os.environ):
        for name in (
            "MODCONFIGURATOR_PROJECT_DIR",
            "MODCONFIGURATOR_CONFIG_FILE",
            "MODCONFIGURATOR_LOG_LEVEL",
        ):
            os.environ.pop(name, None)
        yield


@pytest.fixture
def output():
    return BufferedOutput()


@pytest.fixture
def project_dir(tmp_path):
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def sample_config_data():
    return {
        "modules": {
            "Magento_Store": 1,
            "Magento_InventoryApi": 1,
            "Magento_Foo": 0,
        },
        "system": {"default": {"general": {"locale": {"code": "en_US"}}}},
    }
