"""Trait value model: Descriptor, DescriptorKind, Trait and the required marker."""

from traitkit.model.descriptor import (
    Accessor,
    Descriptor,
    DescriptorKind,
    RequiredMarker,
    required,
    same_value,
)
from traitkit.model.trait import RESERVED_NAMES, Trait

__all__ = [
    "Accessor",
    "Descriptor",
    "DescriptorKind",
    "RESERVED_NAMES",
    "RequiredMarker",
    "Trait",
    "required",
    "same_value",
]
