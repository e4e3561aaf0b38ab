"""
Unit tests for template configuration loading.
"""

import pytest

from errtm.core.config_loader import load_template, load_builder
from errtm.core.descriptor import Descriptor, Setting
from errtm.core.exceptions import ConfigurationError


class TestLoadTemplate:
    """Test suite for load_template()."""

    def test_loads_descriptor_fields(self, write_config):
        path = write_config({"provider_name": "TFProvider", "resource_name": "VM", "state": "setting"})

        assert load_template(path) == Descriptor(
            provider_name="TFProvider", resource_name="VM", state=Setting
        )

    def test_accepts_string_path(self, write_config):
        path = write_config({"ProviderName": "TFProvider"})

        assert load_template(str(path)).provider_name == "TFProvider"

    def test_missing_file_raises_error(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            load_template(tmp_path / "missing.json")

        assert "not found" in str(exc_info.value)
        assert exc_info.value.config_file == str(tmp_path / "missing.json")

    def test_invalid_json_raises_error(self, write_config):
        path = write_config("{not json")

        with pytest.raises(ConfigurationError) as exc_info:
            load_template(path)

        assert "Invalid JSON" in str(exc_info.value)

    def test_non_object_raises_error(self, write_config):
        path = write_config(["provider_name"])

        with pytest.raises(ConfigurationError) as exc_info:
            load_template(path)

        assert "list" in str(exc_info.value)

    def test_unknown_field_raises_error(self, write_config):
        path = write_config({"region": "eu-central-1"})

        with pytest.raises(ConfigurationError) as exc_info:
            load_template(path)

        assert "region" in str(exc_info.value)
        assert exc_info.value.config_file == str(path)

    def test_unknown_state_raises_configuration_error(self, write_config):
        path = write_config({"state": "patching"})

        with pytest.raises(ConfigurationError) as exc_info:
            load_template(path)

        assert "patching" in str(exc_info.value)


class TestLoadBuilder:
    """Test suite for load_builder()."""

    def test_builder_uses_loaded_template(self, write_config):
        path = write_config({"provider_name": "TFProvider", "resource_name": "VM"})
        builder = load_builder(path)

        assert builder.set_id("i-1").set_cause("timeout").produce() == "error in TFProvider VM (i-1): timeout"
        assert builder.produce() == "error in TFProvider VM"
