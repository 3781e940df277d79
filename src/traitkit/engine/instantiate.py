"""Instantiation: materialise a trait as a Python object.

Each create() call synthesises a fresh class deriving from ``base`` and
installs one TraitProperty per trait name. TraitProperty subclasses are data
descriptors, so they take precedence over the instance ``__dict__``:

- ValueProperty / MethodProperty hold DATA / METHOD values,
- AccessorProperty delegates to a getter/setter pair,
- RequiredProperty / ConflictProperty raise on every read and write.

Unresolved names are therefore present on the object (has_property() sees
them) but fail the moment they are used.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from traitkit.config import get_trait_settings
from traitkit.engine.compose import override
from traitkit.engine.factory import Record, trait
from traitkit.errors import MissingRequiredError, UnresolvedConflictError
from traitkit.model import Descriptor, DescriptorKind, Trait

logger = logging.getLogger(__name__)

TRAIT_ATTR = "__trait__"


class TraitProperty(ABC):
    """A property installed on a created object's class.

    Subclasses define how a read and a write of the slot behave.
    """

    def __init__(self, name: str, descriptor: Descriptor) -> None:
        self.name = name
        self.descriptor = descriptor
        self.owner: type | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.owner = owner
        self.name = name

    @property
    def enumerable(self) -> bool:
        return self.descriptor.enumerable

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return self.read(instance)

    def __set__(self, instance: Any, value: Any) -> None:
        self.write(instance, value)

    def __delete__(self, instance: Any) -> None:
        if not self.descriptor.configurable:
            raise AttributeError(f"property {self.name!r} is not configurable")
        vars(instance).pop(self.name, None)
        # Each created object owns its class.
        delattr(self.owner or type(instance), self.name)

    @abstractmethod
    def read(self, instance: Any) -> Any:
        """Return the slot's value for ``instance``."""

    @abstractmethod
    def write(self, instance: Any, value: Any) -> None:
        """Store ``value`` into the slot for ``instance``."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class ValueProperty(TraitProperty):
    """DATA slot; the current value lives in the instance ``__dict__``."""

    def read(self, instance: Any) -> Any:
        return vars(instance).get(self.name, self.descriptor.value)

    def write(self, instance: Any, value: Any) -> None:
        if not self.descriptor.writable:
            raise AttributeError(
                f"property {self.name!r} of {type(instance).__name__!r} object is read-only"
            )
        vars(instance)[self.name] = value


class MethodProperty(ValueProperty):
    """METHOD slot; the callable is bound to the instance on read."""

    def read(self, instance: Any) -> Any:
        value = super().read(instance)
        binder = getattr(type(value), "__get__", None)
        if binder is None:
            return value
        return binder(value, instance, type(instance))


class AccessorProperty(TraitProperty):
    """ACCESSOR slot backed by a getter/setter pair."""

    def read(self, instance: Any) -> Any:
        if self.descriptor.get is None:
            raise AttributeError(f"property {self.name!r} has no getter")
        return self.descriptor.get(instance)

    def write(self, instance: Any, value: Any) -> None:
        if self.descriptor.set is None:
            raise AttributeError(f"property {self.name!r} has no setter")
        self.descriptor.set(instance, value)


class RequiredProperty(TraitProperty):
    """REQUIRED slot: present, but every access raises MissingRequiredError."""

    def read(self, instance: Any) -> Any:
        raise MissingRequiredError(self.name)

    def write(self, instance: Any, value: Any) -> None:
        raise MissingRequiredError(self.name)


class ConflictProperty(TraitProperty):
    """CONFLICT slot: present, but every access raises UnresolvedConflictError."""

    def read(self, instance: Any) -> Any:
        raise UnresolvedConflictError(self.name)

    def write(self, instance: Any, value: Any) -> None:
        raise UnresolvedConflictError(self.name)


PROPERTY_TYPES: dict[DescriptorKind, type[TraitProperty]] = {
    DescriptorKind.DATA: ValueProperty,
    DescriptorKind.METHOD: MethodProperty,
    DescriptorKind.ACCESSOR: AccessorProperty,
    DescriptorKind.REQUIRED: RequiredProperty,
    DescriptorKind.CONFLICT: ConflictProperty,
}


def make_property(name: str, descriptor: Descriptor) -> TraitProperty:
    """Build the TraitProperty matching a descriptor's kind."""
    return PROPERTY_TYPES[descriptor.kind](name, descriptor)


def create(
    source: Trait,
    base: type | None = None,
    extra: Mapping[str, Any] | Trait | None = None,
) -> Any:
    """Materialise a trait as an object.

    Never raises for REQUIRED or CONFLICT slots; those raise
    MissingRequiredError / UnresolvedConflictError when the object accesses
    them.

    Args:
        source: The trait to instantiate. It is not modified.
        base: Class the new object's class derives from (default: object).
        extra: Record or Trait layered over ``source`` with priority: it
            satisfies required slots and replaces concrete or conflicting ones.

    Returns:
        A new object whose class is private to it. ``__init__`` of ``base`` is
        not called.

    Raises:
        TypeError: If ``base`` is not a class. Reserved property names never
            reach this point; Trait rejects them when it is built.
    """
    if base is None:
        base = object
    if not isinstance(base, type):
        raise TypeError(f"create() base must be a class, got {type(base).__name__}")

    final = source
    if extra is not None:
        layer = extra if isinstance(extra, Trait) else trait(extra)
        final = override(layer, source)

    namespace: dict[str, Any] = {
        name: make_property(name, descriptor) for name, descriptor in final.items()
    }
    namespace[TRAIT_ATTR] = final

    settings = get_trait_settings()
    cls = type(base)(settings.class_name, (base,), namespace)
    instance = cls.__new__(cls)

    if not final.is_complete:
        logger.debug(
            "Created %s with unresolved properties: required=%s, conflicts=%s",
            cls.__name__,
            sorted(final.required_names),
            sorted(final.conflicting_names),
        )
    return instance


def make_object(record: Record, base: type | None = None) -> Any:
    """Shorthand for create(trait(record), base)."""
    return create(trait(record), base)


def has_property(obj: Any, name: str) -> bool:
    """Whether ``obj`` has attribute ``name``, without running any getter.

    REQUIRED and CONFLICT properties count as present.
    """
    if name in getattr(obj, "__dict__", {}):
        return True
    return any(name in vars(klass) for klass in type(obj).__mro__)


def own_keys(obj: Any) -> list[str]:
    """Names of the enumerable trait properties of a created object."""
    return [
        name
        for name, attr in vars(type(obj)).items()
        if isinstance(attr, TraitProperty) and attr.enumerable
    ]


def trait_of(obj: Any) -> Trait | None:
    """The trait a created object was built from, or None."""
    found = getattr(type(obj), TRAIT_ATTR, None)
    return found if isinstance(found, Trait) else None
