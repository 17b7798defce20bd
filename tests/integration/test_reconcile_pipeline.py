"""End-to-end reconciliation against real configuration files."""

import threading

import pytest

from modconfigurator import (
    DEPENDENT_MODULES,
    ConfiguratorResolver,
    ModuleDecisionPolicy,
    NoOpConfigurator,
)
from modconfigurator.config import StoreWriteError
from tests.utils import create_project, read_config


class TestReconcileScenarios:
    def test_default_disable_without_gating_module(self, project_dir, output):
        create_project(project_dir, {"modules": {}})

        ConfiguratorResolver(output).create_configurator(project_dir).configure(
            "Magento_InventoryElasticsearch"
        )

        assert read_config(project_dir) == {"modules": {"Magento_InventoryElasticsearch": 0}}

    def test_cascade_enable_with_gating_module(self, project_dir, output):
        create_project(project_dir, {"modules": {"Magento_InventoryApi": 1}})

        ConfiguratorResolver(output).create_configurator(project_dir).configure(
            "Magento_InventoryElasticsearch"
        )

        assert read_config(project_dir)["modules"] == {
            "Magento_InventoryApi": 1,
            "Magento_InventoryElasticsearch": 1,
        }

    def test_configured_module_is_kept(self, project_dir, output):
        config_path = create_project(
            project_dir, {"modules": {"Magento_InventoryApi": 1, "Foo": 0}}
        )
        before = config_path.read_text()
        mtime = config_path.stat().st_mtime_ns

        ConfiguratorResolver(output).create_configurator(project_dir).configure("Foo")

        assert config_path.read_text() == before
        assert config_path.stat().st_mtime_ns == mtime
        assert output.lines == ["    ...Keep Foo module disabled as in current configuration"]

    def test_no_modules_section(self, project_dir, output):
        config_path = create_project(project_dir, {"system": {"default": {}}})
        before = config_path.read_text()

        configurator = ConfiguratorResolver(output).create_configurator(project_dir)
        configurator.configure("Foo")

        assert isinstance(configurator, NoOpConfigurator)
        assert config_path.read_text() == before
        assert output.lines == []

    def test_unlisted_module_with_gating_enabled(self, project_dir, output):
        create_project(project_dir, {"modules": {"Magento_InventoryApi": 1}})

        ConfiguratorResolver(output).create_configurator(project_dir).configure(
            "SomeUnlistedModule"
        )

        assert read_config(project_dir)["modules"]["SomeUnlistedModule"] == 0


class TestReconcileRuns:
    def test_full_run_is_idempotent(self, project_dir, output):
        create_project(
            project_dir,
            {
                "modules": {"Magento_Store": 1, "Magento_InventoryApi": 1},
                "system": {"default": {"web": {"secure": 1}}},
            },
        )
        modules = sorted(DEPENDENT_MODULES) + ["Magento_InventoryCatalog"]

        configurator = ConfiguratorResolver(output).create_configurator(project_dir)
        for module in modules:
            configurator.configure(module)
        first_run = read_config(project_dir)

        second_output = type(output)()
        configurator = ConfiguratorResolver(second_output).create_configurator(project_dir)
        for module in modules:
            configurator.configure(module)

        assert read_config(project_dir) == first_run
        assert all(line.startswith("    ...Keep ") for line in second_output.lines)
        assert first_run["system"] == {"default": {"web": {"secure": 1}}}
        assert first_run["modules"]["Magento_InventoryCatalog"] == 0
        for module in DEPENDENT_MODULES:
            assert first_run["modules"][module] == 1

    def test_operator_choice_survives_gating(self, project_dir, output):
        create_project(
            project_dir,
            {"modules": {"Magento_InventoryApi": 1, "Magento_InventoryElasticsearch": 0}},
        )

        ConfiguratorResolver(output).create_configurator(project_dir).configure(
            "Magento_InventoryElasticsearch"
        )

        assert read_config(project_dir)["modules"]["Magento_InventoryElasticsearch"] == 0

    def test_writes_do_not_touch_other_modules(self, project_dir, output):
        modules = {"Magento_A": 1, "Magento_B": 0, "Magento_C": 1}
        create_project(project_dir, {"modules": dict(modules)})

        ConfiguratorResolver(output).create_configurator(project_dir).configure("Magento_D")

        persisted = read_config(project_dir)["modules"]
        assert {k: persisted[k] for k in modules} == modules

    def test_module_name_with_separator_is_kept_on_rerun(self, project_dir, output):
        create_project(project_dir, {"modules": {}})

        ConfiguratorResolver(output).create_configurator(project_dir).configure("Vendor/Mod")
        first_run = read_config(project_dir)

        second_output = type(output)()
        ConfiguratorResolver(second_output).create_configurator(project_dir).configure("Vendor/Mod")

        assert first_run == {"modules": {"Vendor/Mod": 0}}
        assert read_config(project_dir) == first_run
        assert second_output.lines == [
            "    ...Keep Vendor/Mod module disabled as in current configuration"
        ]

    def test_string_flags_are_kept(self, project_dir, output):
        create_project(project_dir, {"modules": {"Magento_InventoryApi": "1", "Foo": "0"}})

        configurator = ConfiguratorResolver(output).create_configurator(project_dir)
        configurator.configure("Foo")
        configurator.configure("Magento_InventoryElasticsearch")

        assert read_config(project_dir)["modules"] == {
            "Magento_InventoryApi": "1",
            "Foo": "0",
            "Magento_InventoryElasticsearch": 1,
        }
        assert output.lines[0] == "    ...Keep Foo module disabled as in current configuration"

    def test_write_failure_leaves_file_intact(self, project_dir, output):
        config_path = create_project(project_dir, {"modules": {"Magento_A": 1}})
        before = config_path.read_text()
        configurator = ConfiguratorResolver(output).create_configurator(project_dir)
        config_path.parent.chmod(0o500)

        try:
            if _can_write(config_path.parent):
                pytest.skip("running with privileges that bypass directory permissions")
            with pytest.raises(StoreWriteError):
                configurator.configure("Magento_B")
        finally:
            config_path.parent.chmod(0o755)

        assert config_path.read_text() == before

    def test_concurrent_configure_calls(self, project_dir, output):
        create_project(project_dir, {"modules": {"Magento_InventoryApi": 1}})
        configurator = ConfiguratorResolver(output).create_configurator(project_dir)
        assert isinstance(configurator, ModuleDecisionPolicy)
        modules = [f"Vendor_Module{i}" for i in range(10)] + sorted(DEPENDENT_MODULES)

        threads = [threading.Thread(target=configurator.configure, args=(m,)) for m in modules]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        persisted = read_config(project_dir)["modules"]
        assert len(persisted) == len(modules) + 1
        for module in DEPENDENT_MODULES:
            assert persisted[module] == 1


def _can_write(directory):
    probe = directory / ".probe"
    try:
        probe.write_text("")
    except OSError:
        return False
    probe.unlink()
    return True
