"""Trait: an immutable mapping from property name to Descriptor."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from traitkit.errors import IncompleteTraitError
from traitkit.model.descriptor import Descriptor

if TYPE_CHECKING:
    from traitkit.engine.resolve import Resolutions

# Names type() interprets while building a class, plus the attribute create()
# keeps the trait under. A property cannot live at any of them.
RESERVED_NAMES: frozenset[str] = frozenset(
    {
        "__new__",
        "__slots__",
        "__dict__",
        "__weakref__",
        "__class__",
        "__init_subclass__",
        "__class_getitem__",
        "__set_name__",
        "__module__",
        "__qualname__",
        "__classcell__",
        "__trait__",
    }
)


class Trait(Mapping[str, Descriptor]):
    """A set of named property descriptors.

    Traits are values: compose, resolve and create never mutate them. Two traits
    are equal when they have the same names and equivalent descriptors per name,
    regardless of insertion order. A trait also compares equal to a plain mapping
    of descriptors.

    Example:
        >>> from traitkit import trait, required
        >>> t = trait({"a": 1, "b": required})
        >>> sorted(t.required_names)
        ['b']
    """

    __slots__ = ("_descriptors",)

    def __init__(self, descriptors: Mapping[str, Descriptor] | None = None) -> None:
        items = dict(descriptors or {})
        for name, descriptor in items.items():
            if not isinstance(name, str):
                raise TypeError(f"Trait property names must be strings, got {name!r}")
            if name in RESERVED_NAMES:
                raise TypeError(f"{name!r} is reserved and cannot be a trait property")
            if not isinstance(descriptor, Descriptor):
                raise TypeError(f"Trait property {name!r} is not a Descriptor: {descriptor!r}")
            items[name] = descriptor.for_name(name)
        self._descriptors: dict[str, Descriptor] = items

    def __getitem__(self, name: str) -> Descriptor:
        return self._descriptors[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        if set(self._descriptors) != set(other):
            return False
        return all(self._descriptors[name] == other[name] for name in self._descriptors)

    def __repr__(self) -> str:
        body = ", ".join(f"{name!r}: {d!r}" for name, d in sorted(self._descriptors.items()))
        return f"Trait({{{body}}})"

    @property
    def required_names(self) -> frozenset[str]:
        """Names still waiting for a definition."""
        return frozenset(n for n, d in self._descriptors.items() if d.is_required)

    @property
    def conflicting_names(self) -> frozenset[str]:
        """Names defined incompatibly by two or more sources."""
        return frozenset(n for n, d in self._descriptors.items() if d.is_conflict)

    @property
    def is_complete(self) -> bool:
        return not any(d.is_sentinel for d in self._descriptors.values())

    def validate(self) -> Trait:
        """Raise IncompleteTraitError unless every property is concrete.

        create() never calls this; use it to reject a trait up front.

        Returns:
            This trait, for chaining.
        """
        if not self.is_complete:
            raise IncompleteTraitError(self.required_names, self.conflicting_names)
        return self

    def resolve(self, resolutions: Resolutions) -> Trait:
        """Rename and exclude properties; see traitkit.engine.resolve."""
        from traitkit.engine.resolve import resolve

        return resolve(self, resolutions)

    def create(self, base: type | None = None, extra: Mapping[str, Any] | None = None) -> Any:
        """Build an object from this trait; see traitkit.engine.instantiate."""
        from traitkit.engine.instantiate import create

        return create(self, base, extra)
