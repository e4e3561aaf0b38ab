"""
Descriptor and lifecycle state types.

A Descriptor is the record of fields used to render one error message.
Every field defaults to its empty value, and "empty" is the only "not set"
marker: a field explicitly set to "" is indistinguishable from one never set.
"""

from dataclasses import dataclass, fields, asdict
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from errtm import constants as CONSTANTS
from .exceptions import ConfigurationError, InvalidStateError


class ErrorState(str, Enum):
    """Lifecycle phase during which an error occurred."""
    CREATING = "CREATING"
    READING = "READING"
    UPDATING = "UPDATING"
    DELETING = "DELETING"
    SETTING = "SETTING"

    @property
    def word(self) -> str:
        """Spelling used inside a message (e.g. "creating")."""
        return self.value.lower()


Creating = ErrorState.CREATING
Reading = ErrorState.READING
Updating = ErrorState.UPDATING
Deleting = ErrorState.DELETING
Setting = ErrorState.SETTING

StateLike = Union[ErrorState, str, None]


def coerce_state(value: StateLike) -> Optional[ErrorState]:
    """
    Normalize a state given as an ErrorState or its name in any case.

    Returns None for None and "". Raises InvalidStateError for anything else
    that is not one of the five lifecycle states.
    """
    if value is None or value == "":
        return None
    if isinstance(value, ErrorState):
        return value
    if isinstance(value, str):
        try:
            return ErrorState(value.strip().upper())
        except ValueError:
            pass
    raise InvalidStateError(value, [state.value for state in ErrorState])


def to_text(value: Any) -> str:
    """Stringify an arbitrary field value; None becomes the empty text."""
    if value is None:
        return ""
    return str(value)


@dataclass
class Descriptor:
    """
    Fields describing one error occurrence.

    Attributes:
        id: Identifier of the affected resource
        provider_name: Name of the plugin/provider
        resource_name: Name of the resource kind
        cause: Underlying error text appended after a colon
        attribute: Name of a misconfigured field
        state: Lifecycle phase, None when not set
    """
    id: str = ""
    provider_name: str = ""
    resource_name: str = ""
    cause: str = ""
    attribute: str = ""
    state: Optional[ErrorState] = None

    def __setattr__(self, name, value):
        # every assignment, including the generated __init__, is normalized
        if name == "state":
            value = coerce_state(value)
        elif name in CONSTANTS.DESCRIPTOR_FIELDS:
            value = to_text(value)
        super().__setattr__(name, value)

    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))

    def copy(self) -> "Descriptor":
        return Descriptor(**{f.name: getattr(self, f.name) for f in fields(self)})

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["state"] = self.state.value if self.state else ""
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Descriptor":
        """
        Build a Descriptor from a mapping of field names.

        Accepts the current snake_case names and the older CamelCase ones
        ("Error" for cause, "Type" for state, ...).

        Raises:
            ConfigurationError: If a key is not a descriptor field
            InvalidStateError: If the state names no lifecycle state
        """
        values = {}
        for key, value in data.items():
            name = CONSTANTS.DESCRIPTOR_FIELD_ALIASES.get(key, key)
            if name not in CONSTANTS.DESCRIPTOR_FIELDS:
                raise ConfigurationError(
                    f"Unknown descriptor field '{key}'. "
                    f"Allowed: {CONSTANTS.DESCRIPTOR_FIELDS}"
                )
            values[name] = value
        return cls(**values)
