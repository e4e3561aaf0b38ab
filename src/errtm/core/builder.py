"""
Reusable error message builder.

A MessageBuilder owns two descriptors:

    template - durable, written by save_*() and kept across productions
    override - transient, written by set_*() and cleared after each production

All setters return the builder itself so calls can be chained:

    VM_ERRORS = MessageBuilder.with_provider("TFProvider").save_resource_name("VM")

    raise VM_ERRORS.set_id(vm_id).set_state(Creating).set_cause(exc).to_error()
    # -> error creating TFProvider VM (i-123): <exc>

    raise VM_ERRORS.fill_error(Descriptor(state=Deleting, cause="503"))
    # -> error deleting TFProvider VM: 503

Thread Safety:
    A builder is plain mutable state with no locking. Share one between
    threads only with external synchronization, or give each thread its own
    builder built from a snapshot().
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from errtm.logger import logger
from .descriptor import Descriptor, StateLike
from .exceptions import ProvisioningError
from .formatter import format_message
from .merge import layered_merge


@dataclass(frozen=True)
class BuilderSnapshot:
    """Copies of both tiers of a builder at one point in time."""
    template: Descriptor = field(default_factory=Descriptor)
    override: Descriptor = field(default_factory=Descriptor)


class MessageBuilder:
    """Layered descriptor with template and override tiers."""

    def __init__(self, template: Optional[Descriptor] = None):
        self._template = template.copy() if template is not None else Descriptor()
        self._override = Descriptor()

    def __repr__(self):
        return f"MessageBuilder(template={self._template!r}, override={self._override!r})"

    # ==========================================
    # Constructors
    # ==========================================

    @classmethod
    def with_provider(cls, name: str) -> "MessageBuilder":
        """Builder whose template already names the provider."""
        return cls().save_provider_name(name)

    @classmethod
    def with_cause(cls, value: Any) -> "MessageBuilder":
        """Builder with a cause pending for the next production only."""
        return cls().set_cause(value)

    # ==========================================
    # Tiers
    # ==========================================

    @property
    def template(self) -> Descriptor:
        return self._template.copy()

    @property
    def override(self) -> Descriptor:
        return self._override.copy()

    def snapshot(self) -> BuilderSnapshot:
        return BuilderSnapshot(template=self._template.copy(), override=self._override.copy())

    def restore(self, snapshot: BuilderSnapshot) -> "MessageBuilder":
        """Replace both tiers with copies of the snapshot's tiers."""
        self._template = snapshot.template.copy()
        self._override = snapshot.override.copy()
        logger.debug(f"Builder restored from snapshot: {snapshot!r}")
        return self

    # ==========================================
    # Template setters (durable)
    # ==========================================

    def save_id(self, value: str) -> "MessageBuilder":
        self._template.id = value
        return self

    def save_provider_name(self, value: str) -> "MessageBuilder":
        self._template.provider_name = value
        return self

    def save_resource_name(self, value: str) -> "MessageBuilder":
        self._template.resource_name = value
        return self

    def save_cause(self, value: Any) -> "MessageBuilder":
        """Store any value as the durable cause; it is converted with str()."""
        self._template.cause = value
        return self

    def save_attribute(self, value: str) -> "MessageBuilder":
        self._template.attribute = value
        return self

    def save_state(self, value: StateLike) -> "MessageBuilder":
        """
        Store the durable lifecycle state.

        Raises:
            InvalidStateError: If value names no lifecycle state
        """
        self._template.state = value
        return self

    # ==========================================
    # Override setters (next production only)
    # ==========================================

    def set_id(self, value: str) -> "MessageBuilder":
        self._override.id = value
        return self

    def set_provider_name(self, value: str) -> "MessageBuilder":
        self._override.provider_name = value
        return self

    def set_resource_name(self, value: str) -> "MessageBuilder":
        self._override.resource_name = value
        return self

    def set_cause(self, value: Any) -> "MessageBuilder":
        """Set the cause for the next production; any value is converted with str()."""
        self._override.cause = value
        return self

    def set_attribute(self, value: str) -> "MessageBuilder":
        self._override.attribute = value
        return self

    def set_state(self, value: StateLike) -> "MessageBuilder":
        """
        Set the lifecycle state for the next production.

        Raises:
            InvalidStateError: If value names no lifecycle state
        """
        self._override.state = value
        return self

    # ==========================================
    # Production
    # ==========================================

    def effective(self, argument: Optional[Descriptor] = None) -> Descriptor:
        """Merged descriptor for the current tiers. Does not clear the override."""
        return layered_merge([self._template, self._override, argument])

    def _reset_override(self):
        if not self._override.is_empty():
            logger.debug(f"Clearing override tier: {self._override!r}")
        self._override = Descriptor()

    def _render(self, argument: Optional[Descriptor]) -> ProvisioningError:
        descriptor = self.effective(argument)
        try:
            return ProvisioningError(format_message(descriptor), descriptor=descriptor)
        finally:
            self._reset_override()

    def produce(self) -> str:
        """Render template + override, then clear the override tier."""
        return self._render(None).message

    def produce_with(self, argument: Descriptor) -> str:
        """
        Render template + override + argument, then clear the override tier.

        Non-empty fields of argument win over both tiers.
        """
        return self._render(argument).message

    fill_message = produce_with

    def to_error(self) -> ProvisioningError:
        """Like produce(), but return the message wrapped as an exception value."""
        return self._render(None)

    def fill_error(self, argument: Descriptor) -> ProvisioningError:
        """Like produce_with(), but return the message wrapped as an exception value."""
        return self._render(argument)


def new_template() -> MessageBuilder:
    return MessageBuilder()


def save_provider_name(name: str) -> MessageBuilder:
    return MessageBuilder.with_provider(name)


def set_cause(value: Any) -> MessageBuilder:
    return MessageBuilder.with_cause(value)
