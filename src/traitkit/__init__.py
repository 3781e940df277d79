"""traitkit - composable traits with deferred conflict and requirement checks."""

from traitkit.config import TraitSettings, get_trait_settings
from traitkit.engine import (
    compose,
    create,
    has_property,
    make_object,
    override,
    own_keys,
    resolve,
    trait,
    trait_of,
)
from traitkit.errors import (
    IncompleteTraitError,
    MissingRequiredError,
    TraitError,
    UnresolvedConflictError,
)
from traitkit.logging_config import configure_logging, get_logger
from traitkit.model import Accessor, Descriptor, DescriptorKind, RequiredMarker, Trait, required

__version__ = "0.1.0"

__all__ = [
    "Accessor",
    "Descriptor",
    "DescriptorKind",
    "IncompleteTraitError",
    "MissingRequiredError",
    "RequiredMarker",
    "Trait",
    "TraitError",
    "TraitSettings",
    "UnresolvedConflictError",
    "__version__",
    "compose",
    "configure_logging",
    "create",
    "get_logger",
    "get_trait_settings",
    "has_property",
    "make_object",
    "override",
    "own_keys",
    "required",
    "resolve",
    "trait",
    "trait_of",
]
