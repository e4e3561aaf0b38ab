"""
Custom exceptions for the error message builder.

Exception Hierarchy:
    ErrtmError (base)
    ├── InvalidStateError - Unknown lifecycle state text
    └── ConfigurationError - Invalid or missing template configuration

    ProvisioningError - The produced diagnostic itself. The builder returns
        it, it never raises it; provider code decides whether to raise.
"""

from typing import Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .descriptor import Descriptor


class ErrtmError(Exception):
    """Base exception for everything raised by this library."""


class InvalidStateError(ErrtmError, ValueError):
    """
    Raised when a lifecycle state is given as text that names none of the
    known states.

    Example:
        >>> builder.set_state("patching")
        InvalidStateError: Unknown lifecycle state 'patching'. Allowed: ['CREATING', ...]
    """

    def __init__(self, value: object, allowed: Sequence[str]):
        self.value = value
        self.allowed = list(allowed)
        super().__init__(f"Unknown lifecycle state '{value}'. Allowed: {self.allowed}")


class ConfigurationError(ErrtmError):
    """
    Raised when a template configuration file or descriptor mapping is invalid.

    This typically occurs when:
    - The config file is missing
    - The config file has invalid JSON or is not a JSON object
    - A mapping contains a key that is not a descriptor field
    """

    def __init__(self, message: str, config_file: Optional[str] = None):
        self.config_file = config_file
        if config_file:
            message = f"{message} (file: {config_file})"
        super().__init__(message)


class ProvisioningError(Exception):
    """
    A rendered diagnostic wrapped as an exception value.

    Attributes:
        message: The rendered text, identical to ``str(error)``
        descriptor: The effective descriptor the message was rendered from
    """

    def __init__(self, message: str, descriptor: Optional["Descriptor"] = None):
        self.message = message
        self.descriptor = descriptor
        super().__init__(message)

    def __eq__(self, other):
        if not isinstance(other, ProvisioningError):
            return NotImplemented
        return self.message == other.message

    def __hash__(self):
        return hash(self.message)
