"""
Core of the error message builder.

Modules:
    descriptor: Descriptor record and ErrorState lifecycle enumeration
    merge: Precedence merging of descriptor tiers
    formatter: Descriptor -> message text
    builder: MessageBuilder with template and override tiers
    config_loader: Template loading from JSON files
    exceptions: Exception types raised or returned by the library
"""

from .descriptor import (
    Descriptor,
    ErrorState,
    Creating,
    Reading,
    Updating,
    Deleting,
    Setting,
)
from .merge import merge, layered_merge
from .formatter import format_message
from .builder import (
    BuilderSnapshot,
    MessageBuilder,
    new_template,
    save_provider_name,
    set_cause,
)
from .config_loader import load_template, load_builder
from .exceptions import (
    ErrtmError,
    InvalidStateError,
    ConfigurationError,
    ProvisioningError,
)

__all__ = [
    # Descriptor
    "Descriptor",
    "ErrorState",
    "Creating",
    "Reading",
    "Updating",
    "Deleting",
    "Setting",
    # Merge / format
    "merge",
    "layered_merge",
    "format_message",
    # Builder
    "BuilderSnapshot",
    "MessageBuilder",
    "new_template",
    "save_provider_name",
    "set_cause",
    # Config
    "load_template",
    "load_builder",
    # Exceptions
    "ErrtmError",
    "InvalidStateError",
    "ConfigurationError",
    "ProvisioningError",
]
