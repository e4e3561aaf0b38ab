"""
Precedence merging of descriptors.

Every entry point that renders a message resolves its effective descriptor
through layered_merge(), lowest precedence first:

    produce():              [template, override]
    produce_with(argument): [template, override, argument]

A field of a higher tier replaces the lower value only when it is non-empty,
so merge(d, Descriptor()) == merge(Descriptor(), d) == d.
"""

from dataclasses import fields
from typing import Iterable, Optional

from .descriptor import Descriptor


def merge(base: Descriptor, overlay: Optional[Descriptor]) -> Descriptor:
    """Return a new Descriptor with overlay's non-empty fields laid over base."""
    merged = base.copy()
    if overlay is None:
        return merged
    for f in fields(Descriptor):
        value = getattr(overlay, f.name)
        if value:
            setattr(merged, f.name, value)
    return merged


def layered_merge(tiers: Iterable[Optional[Descriptor]]) -> Descriptor:
    """
    Merge an ordered sequence of tiers, lowest precedence first.

    None tiers are skipped. An empty sequence yields an empty Descriptor.
    Inputs are never mutated.
    """
    effective = Descriptor()
    for tier in tiers:
        effective = merge(effective, tier)
    return effective
