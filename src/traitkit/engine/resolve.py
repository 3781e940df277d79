"""Resolution: rename and exclude properties of a single trait.

Works in two passes so swaps, overlapping exclude+rename and renames onto an
occupied name all go through the composition merge rule:

1. every property contributes its descriptor to a target slot (its own name,
   its rename target, or nothing when excluded);
2. each slot is reduced with merge_descriptors().

Any name that was renamed or excluded and ended up with no contribution is
backfilled with REQUIRED, so moving a property away leaves a trace.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from traitkit.engine.compose import merge_descriptors
from traitkit.model import Descriptor, Trait

logger = logging.getLogger(__name__)

Resolutions = Mapping[str, str | None]


def is_exclusion(target: str | None) -> bool:
    """None and the empty string both mean "drop this property"."""
    return target is None or target == ""


def resolve(source: Trait, resolutions: Resolutions) -> Trait:
    """Apply a rename/exclude map to a trait.

    Args:
        source: Trait to resolve. It is not modified.
        resolutions: Maps an existing name to a new name, or to None/"" to
            exclude it. Names the trait does not define are ignored.

    Returns:
        A new Trait.

    Raises:
        TypeError: If a target is neither a string nor an exclusion marker.

    Example:
        >>> trait({"a": 1, "b": 2}).resolve({"a": "b", "b": "a"})  # swap
    """
    for old, target in resolutions.items():
        if not (is_exclusion(target) or isinstance(target, str)):
            raise TypeError(
                f"Resolution for {old!r} must be a name or None, got {type(target).__name__}"
            )

    slots: dict[str, list[Descriptor]] = {}
    vacated: list[str] = []
    for name, descriptor in source.items():
        if name not in resolutions:
            slots.setdefault(name, []).append(descriptor)
            continue
        vacated.append(name)
        target = resolutions[name]
        if is_exclusion(target):
            continue
        slots.setdefault(target, []).append(descriptor)

    for name in vacated:
        if name not in slots:
            slots[name] = [Descriptor.required(name)]

    result = Trait({name: merge_descriptors(name, found) for name, found in slots.items()})
    logger.debug(
        "resolve %s -> %d properties, required=%s, conflicts=%s",
        dict(resolutions),
        len(result),
        sorted(result.required_names),
        sorted(result.conflicting_names),
    )
    return result
