"""Errors raised by traitkit.

Unresolved slots never fail during compose/resolve/create. They fail when a
created object reads or writes the unresolved property.
"""

from __future__ import annotations

from collections.abc import Iterable

ERR_REQUIRED = "Missing required property: "
ERR_CONFLICT = "Remaining conflicting property: "


class TraitError(Exception):
    """Base class for trait algebra errors."""


class MissingRequiredError(TraitError):
    """A required property was accessed before anything supplied it.

    Attributes:
        name: The property name that is still required.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"{ERR_REQUIRED}{name}")
        self.name = name


class UnresolvedConflictError(TraitError):
    """A conflicting property was accessed before it was resolved.

    Attributes:
        name: The property name that is still conflicting.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"{ERR_CONFLICT}{name}")
        self.name = name


class IncompleteTraitError(TraitError):
    """A trait still has required or conflicting properties.

    Attributes:
        required: Sorted names of required properties.
        conflicting: Sorted names of conflicting properties.
    """

    def __init__(self, required: Iterable[str], conflicting: Iterable[str]) -> None:
        self.required = tuple(sorted(required))
        self.conflicting = tuple(sorted(conflicting))
        parts = []
        if self.required:
            parts.append(f"missing required: {', '.join(self.required)}")
        if self.conflicting:
            parts.append(f"remaining conflicts: {', '.join(self.conflicting)}")
        super().__init__(f"Incomplete trait ({'; '.join(parts)})")
