"""Trait algebra: factory, compose/override, resolve and create."""

from traitkit.engine.compose import compose, merge_descriptors, override
from traitkit.engine.factory import trait
from traitkit.engine.instantiate import (
    TraitProperty,
    create,
    has_property,
    make_object,
    own_keys,
    trait_of,
)
from traitkit.engine.resolve import resolve

__all__ = [
    "TraitProperty",
    "compose",
    "create",
    "has_property",
    "make_object",
    "merge_descriptors",
    "override",
    "own_keys",
    "resolve",
    "trait",
    "trait_of",
]
