"""
Unit tests for Descriptor and ErrorState.
"""

import pytest

from errtm.core.descriptor import (
    Descriptor,
    ErrorState,
    Setting,
    coerce_state,
    to_text,
)
from errtm.core.exceptions import ConfigurationError, InvalidStateError


class TestCoerceState:
    """Test suite for lifecycle state normalization."""

    @pytest.mark.parametrize("value", ["SETTING", "setting", " Setting ", ErrorState.SETTING])
    def test_accepts_names_in_any_case(self, value):
        """Test that state names are matched case-insensitively."""
        assert coerce_state(value) is ErrorState.SETTING

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_values_mean_not_set(self, value):
        assert coerce_state(value) is None

    def test_unknown_state_raises_error(self):
        """Test that free text outside the enumeration is rejected."""
        with pytest.raises(InvalidStateError) as exc_info:
            coerce_state("patching")

        assert exc_info.value.value == "patching"
        assert "CREATING" in exc_info.value.allowed
        assert isinstance(exc_info.value, ValueError)

    def test_non_string_state_raises_error(self):
        with pytest.raises(InvalidStateError):
            coerce_state(3)

    def test_word_is_lowercase_name(self):
        assert [s.word for s in ErrorState] == ["creating", "reading", "updating", "deleting", "setting"]


class TestDescriptor:
    """Test suite for the Descriptor record."""

    def test_defaults_are_empty(self):
        descriptor = Descriptor()

        assert descriptor.is_empty()
        assert descriptor.state is None
        assert descriptor.cause == ""

    def test_string_state_is_coerced(self):
        assert Descriptor(state="setting").state is Setting

    def test_cause_is_stringified(self):
        """Test that numbers and exceptions are accepted as causes."""
        assert Descriptor(cause=503).cause == "503"
        assert Descriptor(cause=RuntimeError("boom")).cause == "boom"
        assert to_text(None) == ""

    def test_copy_is_independent(self):
        original = Descriptor(id="a")
        copied = original.copy()
        copied.id = "b"

        assert original.id == "a"
        assert copied == Descriptor(id="b")

    def test_to_dict_uses_state_value(self):
        data = Descriptor(provider_name="P", state=Setting).to_dict()

        assert data["provider_name"] == "P"
        assert data["state"] == "SETTING"
        assert Descriptor().to_dict()["state"] == ""

    def test_from_dict_accepts_legacy_names(self):
        """Test that CamelCase keys such as Error and Type are mapped."""
        descriptor = Descriptor.from_dict({
            "ProviderName": "TFProvider",
            "Error": "nil pointer",
            "Type": "SETTING",
            "resource_name": "VM",
        })

        assert descriptor == Descriptor(
            provider_name="TFProvider",
            resource_name="VM",
            cause="nil pointer",
            state=Setting,
        )

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Descriptor.from_dict({"region": "eu-central-1"})

        assert "region" in str(exc_info.value)

    def test_assigned_state_is_coerced(self):
        """Test that a state assigned after construction is normalized."""
        descriptor = Descriptor()
        descriptor.state = "setting"

        assert descriptor.state is Setting

    def test_assigned_unknown_state_raises_error(self):
        descriptor = Descriptor(id="i-1")

        with pytest.raises(InvalidStateError):
            descriptor.state = "bogus"

        assert descriptor.state is None

    def test_text_fields_normalize_none(self):
        """Test that None in any text field becomes the empty value."""
        descriptor = Descriptor(id=None, provider_name=None, resource_name=None, attribute=None)

        assert descriptor.is_empty()
        assert descriptor.to_dict() == {
            "id": "",
            "provider_name": "",
            "resource_name": "",
            "cause": "",
            "attribute": "",
            "state": "",
        }

    def test_assigned_text_is_stringified(self):
        descriptor = Descriptor()
        descriptor.id = 42
        descriptor.cause = None

        assert descriptor.id == "42"
        assert descriptor.cause == ""
