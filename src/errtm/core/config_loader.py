"""
Template configuration loading.

A template file is a JSON object whose keys are descriptor fields, e.g.

    {"provider_name": "TFProvider", "resource_name": "VM"}

Usage:
    from errtm.core.config_loader import load_builder

    VM_ERRORS = load_builder(Path("config_error_template.json"))
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from errtm.logger import logger
from .builder import MessageBuilder
from .descriptor import Descriptor
from .exceptions import ConfigurationError, InvalidStateError


def _load_json_file(file_path: Path) -> Dict[str, Any]:
    """
    Load a JSON file that must contain an object.

    Raises:
        ConfigurationError: If the file is missing, has invalid JSON or
            does not hold a JSON object
    """
    if not file_path.exists():
        raise ConfigurationError(
            f"Required configuration file not found: {file_path.name}",
            config_file=str(file_path)
        )

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in configuration file: {e}",
            config_file=str(file_path)
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected a JSON object, got {type(data).__name__}",
            config_file=str(file_path)
        )
    return data


def load_template(path: Union[str, Path]) -> Descriptor:
    """
    Load a template descriptor from a JSON file.

    Raises:
        ConfigurationError: If the file is unusable or names an unknown field
            or an unknown lifecycle state
    """
    file_path = Path(path)
    data = _load_json_file(file_path)
    try:
        template = Descriptor.from_dict(data)
    except ConfigurationError as e:
        raise ConfigurationError(str(e), config_file=str(file_path)) from e
    except InvalidStateError as e:
        raise ConfigurationError(str(e), config_file=str(file_path)) from e

    logger.debug(f"Loaded error template from {file_path}: {template!r}")
    return template


def load_builder(path: Union[str, Path]) -> MessageBuilder:
    """Create a MessageBuilder whose template is read from a JSON file."""
    return MessageBuilder(template=load_template(path))
