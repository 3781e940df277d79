"""Composition: merge traits name by name with a symmetric conflict rule.

The merge rule forms a semilattice over descriptors:

- equivalent descriptors collapse to one of them,
- REQUIRED is the identity element,
- CONFLICT absorbs everything,
- two non-equivalent concrete descriptors become CONFLICT.

That makes compose() commutative, associative and idempotent. It never raises
for conflicts; they are reported when a created object touches the property.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import reduce

from traitkit.config import get_trait_settings
from traitkit.model import Descriptor, Trait

logger = logging.getLogger(__name__)


def merge_pair(name: str, left: Descriptor, right: Descriptor) -> Descriptor:
    """Merge two descriptors contributed to the same slot."""
    if left == right:
        return left
    if left.is_conflict or right.is_conflict:
        return Descriptor.conflict(name)
    if left.is_required:
        return right
    if right.is_required:
        return left
    if get_trait_settings().log_conflicts:
        logger.warning("Conflicting definitions for property %r", name, extra={"property": name})
    return Descriptor.conflict(name)


def merge_descriptors(name: str, descriptors: Iterable[Descriptor]) -> Descriptor:
    """Reduce every descriptor contributed to slot ``name`` into one.

    Raises:
        ValueError: If no descriptor is given.
    """
    contributions = list(descriptors)
    if not contributions:
        raise ValueError(f"No descriptors to merge for property {name!r}")
    merged = reduce(lambda left, right: merge_pair(name, left, right), contributions)
    return merged.for_name(name)


def gather(traits: Iterable[Trait]) -> dict[str, list[Descriptor]]:
    """Collect the descriptors each trait contributes, keyed by name."""
    slots: dict[str, list[Descriptor]] = {}
    for source in traits:
        for name, descriptor in source.items():
            slots.setdefault(name, []).append(descriptor)
    return slots


def _log_result(operation: str, inputs: int, result: Trait) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "%s of %d trait(s) -> %d properties, conflicts=%s",
            operation,
            inputs,
            len(result),
            sorted(result.conflicting_names),
        )


def compose(*traits: Trait) -> Trait:
    """Symmetric composition of any number of traits.

    Args:
        *traits: Traits to merge. Order does not affect the result.

    Returns:
        A new Trait over the union of names. Names defined differently by two
        traits map to CONFLICT; REQUIRED names are satisfied by any concrete
        definition.

    Example:
        >>> t = compose(trait({"a": 1}), trait({"a": 2, "b": 3}))
        >>> sorted(t.conflicting_names)
        ['a']
    """
    slots = gather(traits)
    result = Trait({name: merge_descriptors(name, found) for name, found in slots.items()})
    _log_result("compose", len(traits), result)
    return result


def override(*traits: Trait) -> Trait:
    """Priority composition: earlier traits win.

    For each name the leftmost concrete or CONFLICT descriptor is kept; REQUIRED
    only survives when no trait defines the name otherwise. Never manufactures a
    conflict.

    Args:
        *traits: Traits in decreasing priority.

    Returns:
        A new Trait over the union of names.
    """
    slots = gather(traits)
    merged: dict[str, Descriptor] = {}
    for name, found in slots.items():
        merged[name] = next((d for d in found if not d.is_required), found[0])
    result = Trait(merged)
    _log_result("override", len(traits), result)
    return result
