"""
Persistence collaborators: repository and manager protocols, manager references.
"""

from .protocols import ObjectManager, ObjectRepository
from .references import DeferredManager, PersistenceManagerRef, ResolvedManager, as_manager_ref

__all__ = [
    "DeferredManager",
    "ObjectManager",
    "ObjectRepository",
    "PersistenceManagerRef",
    "ResolvedManager",
    "as_manager_ref",
]
