import json
import pytest

from errtm import Descriptor, MessageBuilder, Creating


@pytest.fixture(scope="function")
def provider_builder():
    """Builder whose template holds only the provider name."""
    return MessageBuilder.with_provider("MyProvider")


@pytest.fixture(scope="function")
def full_descriptor():
    """Descriptor with every field except the attribute set."""
    return Descriptor(
        id="5456543433545656",
        provider_name="TerraformProvider",
        resource_name="PeeringConnection",
        cause="Error processing your request",
        state=Creating,
    )


@pytest.fixture(scope="function")
def write_config(tmp_path):
    """Write a JSON document to a temp file and return its path."""
    def _write(content, name="config_error_template.json"):
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path
    return _write
