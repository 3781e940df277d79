"""Descriptor: the definition of one named property of a trait."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, NamedTuple


class RequiredMarker(Enum):
    """Record value marking a name as required by the trait factory.

    Compared by value, so it pickles and survives module reloads.
    """

    REQUIRED = "required"

    def __repr__(self) -> str:
        return "required"


required = RequiredMarker.REQUIRED


class Accessor(NamedTuple):
    """Getter/setter pair usable as a record value."""

    get: Callable[[Any], Any] | None = None
    set: Callable[[Any, Any], None] | None = None


class DescriptorKind(Enum):
    """Variants of a property descriptor."""

    DATA = "data"
    METHOD = "method"
    ACCESSOR = "accessor"
    REQUIRED = "required"
    CONFLICT = "conflict"


# Values of these types are compared by equality, everything else by identity.
_SCALAR_TYPES = (bool, int, float, complex, str, bytes, type(None))


def same_value(a: Any, b: Any) -> bool:
    """Identity comparison that treats equal immutable scalars as identical."""
    if a is b:
        return True
    return type(a) is type(b) and isinstance(a, _SCALAR_TYPES) and a == b


@dataclass(frozen=True, eq=False)
class Descriptor:
    """One property definition.

    DATA and METHOD carry ``value``; ACCESSOR carries ``get``/``set`` and has no
    ``writable`` flag. REQUIRED and CONFLICT only carry the ``name`` used in error
    messages.
    """

    kind: DescriptorKind
    name: str | None = None
    value: Any = None
    get: Callable[[Any], Any] | None = None
    set: Callable[[Any, Any], None] | None = None
    enumerable: bool = True
    configurable: bool = True
    writable: bool | None = True

    @classmethod
    def data(
        cls,
        value: Any,
        enumerable: bool = True,
        configurable: bool = True,
        writable: bool = True,
    ) -> Descriptor:
        return cls(
            DescriptorKind.DATA,
            value=value,
            enumerable=enumerable,
            configurable=configurable,
            writable=writable,
        )

    @classmethod
    def method(
        cls,
        value: Callable[..., Any],
        enumerable: bool = True,
        configurable: bool = True,
        writable: bool = True,
    ) -> Descriptor:
        return cls(
            DescriptorKind.METHOD,
            value=value,
            enumerable=enumerable,
            configurable=configurable,
            writable=writable,
        )

    @classmethod
    def accessor(
        cls,
        get: Callable[[Any], Any] | None = None,
        set: Callable[[Any, Any], None] | None = None,
        enumerable: bool = True,
        configurable: bool = True,
    ) -> Descriptor:
        return cls(
            DescriptorKind.ACCESSOR,
            get=get,
            set=set,
            enumerable=enumerable,
            configurable=configurable,
            writable=None,
        )

    @classmethod
    def required(cls, name: str | None = None) -> Descriptor:
        return cls(DescriptorKind.REQUIRED, name=name, writable=None)

    @classmethod
    def conflict(cls, name: str | None = None) -> Descriptor:
        return cls(DescriptorKind.CONFLICT, name=name, writable=None)

    @property
    def is_required(self) -> bool:
        return self.kind is DescriptorKind.REQUIRED

    @property
    def is_conflict(self) -> bool:
        return self.kind is DescriptorKind.CONFLICT

    @property
    def is_sentinel(self) -> bool:
        """True for REQUIRED and CONFLICT placeholders."""
        return self.kind in (DescriptorKind.REQUIRED, DescriptorKind.CONFLICT)

    @property
    def is_concrete(self) -> bool:
        return not self.is_sentinel

    def for_name(self, name: str) -> Descriptor:
        """Return this descriptor as it should appear in slot ``name``.

        Placeholders carry the slot name for their error message; concrete
        descriptors are returned unchanged.
        """
        if self.is_sentinel and self.name != name:
            return replace(self, name=name)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Descriptor):
            return NotImplemented
        if self.is_sentinel or other.is_sentinel:
            return self.kind is other.kind
        return (
            same_value(self.value, other.value)
            and self.get is other.get
            and self.set is other.set
            and self.enumerable == other.enumerable
            and self.configurable == other.configurable
            and bool(self.writable) == bool(other.writable)
        )

    def __hash__(self) -> int:
        if self.is_sentinel:
            return hash(self.kind)
        return hash((self.enumerable, self.configurable, bool(self.writable)))

    def __repr__(self) -> str:
        if self.is_sentinel:
            return f"{self.kind.name.title()}({self.name!r})"
        flags = "".join(
            flag[0] if on else "-"
            for flag, on in (
                ("enumerable", self.enumerable),
                ("configurable", self.configurable),
                ("writable", self.writable),
            )
        )
        if self.kind is DescriptorKind.ACCESSOR:
            return f"Accessor(get={self.get!r}, set={self.set!r}, {flags})"
        return f"{self.kind.name.title()}({self.value!r}, {flags})"
