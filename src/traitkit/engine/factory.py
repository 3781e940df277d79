"""Trait factory: turn a plain record into a Trait."""

from __future__ import annotations

import logging
import types
from collections.abc import Mapping
from typing import Any

from traitkit.model import Accessor, Descriptor, RequiredMarker, Trait

logger = logging.getLogger(__name__)

# Namespace entries every class body gets; they are not trait members.
CLASS_BOOKKEEPING: frozenset[str] = frozenset(
    {
        "__module__",
        "__qualname__",
        "__doc__",
        "__dict__",
        "__weakref__",
        "__annotations__",
        "__annotate__",
        "__annotate_func__",
        "__annotations_cache__",
        "__classcell__",
        "__slots__",
        "__firstlineno__",
        "__static_attributes__",
        "__type_params__",
    }
)

Record = Mapping[str, Any] | type


def to_descriptor(name: str, value: Any) -> Descriptor:
    """Convert one record value into its descriptor.

    Args:
        name: Property name (used by REQUIRED descriptors for error messages).
        value: The record value.

    Returns:
        REQUIRED for the required marker, ACCESSOR for a property or Accessor
        pair, METHOD for callables, the value itself for a Descriptor, else DATA.
    """
    if isinstance(value, Descriptor):
        return value.for_name(name)
    if isinstance(value, RequiredMarker):
        return Descriptor.required(name)
    if isinstance(value, property):
        return Descriptor.accessor(value.fget, value.fset)
    if isinstance(value, Accessor):
        return Descriptor.accessor(value.get, value.set)
    if callable(value) or isinstance(value, (staticmethod, classmethod)):
        return Descriptor.method(value)
    return Descriptor.data(value)


def _slot_names(cls: type) -> frozenset[str]:
    slots = vars(cls).get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return frozenset(slots)


def _record_items(record: Record) -> Mapping[str, Any]:
    if isinstance(record, type):
        slots = _slot_names(record)
        return {
            k: v
            for k, v in vars(record).items()
            if k not in CLASS_BOOKKEEPING
            and not (k in slots and isinstance(v, types.MemberDescriptorType))
        }
    if isinstance(record, Mapping):
        return record
    raise TypeError(f"trait() expects a mapping or a class, got {type(record).__name__}")


def trait(record: Record | None = None) -> Trait:
    """Build a Trait from a record of name -> value.

    Args:
        record: A mapping, or a class whose namespace is used as the record.
            ``required`` marks a name as required; a ``property`` or
            ``Accessor`` becomes an accessor pair.

    Returns:
        A new Trait with one descriptor per record entry.

    Raises:
        TypeError: If the record is not a mapping/class, a name is not a string,
            or a name is reserved (see traitkit.model.trait.RESERVED_NAMES).
            Class records skip ``__slots__`` and the slot members it creates.

    Example:
        >>> t = trait({"a": 0, "b": required})
        >>> t["b"].is_required
        True
    """
    items = _record_items(record if record is not None else {})
    descriptors: dict[str, Descriptor] = {}
    for name, value in items.items():
        if not isinstance(name, str):
            raise TypeError(f"Trait property names must be strings, got {name!r}")
        descriptors[name] = to_descriptor(name, value)
    logger.debug("Built trait with %d properties", len(descriptors))
    return Trait(descriptors)
