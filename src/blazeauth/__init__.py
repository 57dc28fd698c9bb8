"""
BlazeAuth public package initialization.

Exposes the authentication adapter options together with the persistence
protocols and errors they are configured against.
"""

from .errors import (  # noqa: F401
    InvalidArgumentError,
    OptionsError,
    OptionsValidationError,
    UnknownOptionError,
    UnresolvedReferenceError,
)
from .options import AuthenticationAdapterOptions, Options  # noqa: F401
from .persistence import (  # noqa: F401
    DeferredManager,
    ObjectManager,
    ObjectRepository,
    PersistenceManagerRef,
    ResolvedManager,
)

__all__ = [
    "AuthenticationAdapterOptions",
    "Options",
    "ObjectManager",
    "ObjectRepository",
    "PersistenceManagerRef",
    "ResolvedManager",
    "DeferredManager",
    "OptionsError",
    "InvalidArgumentError",
    "UnresolvedReferenceError",
    "UnknownOptionError",
    "OptionsValidationError",
]
