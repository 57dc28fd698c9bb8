"""
Persistence manager references.

A manager option holds either a live :class:`ObjectManager` or the key a
service locator knows it by. The two cases are kept apart so a repository is
only ever requested from a resolved manager.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Union

from ..errors import InvalidArgumentError, UnresolvedReferenceError
from .protocols import ObjectManager, ObjectRepository

Locator = Union[Mapping[str, Any], Callable[[str], Any]]


@dataclass(frozen=True)
class ResolvedManager:
    manager: ObjectManager

    def get_repository(self, identity_class: Any) -> ObjectRepository:
        return self.manager.get_repository(identity_class)


@dataclass(frozen=True)
class DeferredManager:
    key: str

    def resolve(self, locator: Locator) -> ResolvedManager:
        """
        Look the key up through ``locator`` (a mapping or a one-argument callable).
        """

        try:
            if isinstance(locator, Mapping):
                candidate = locator[self.key]
            else:
                candidate = locator(self.key)
        except KeyError as exc:
            raise UnresolvedReferenceError(
                f'No persistence manager is registered under "{self.key}"'
            ) from exc
        if isinstance(candidate, ResolvedManager):
            return candidate
        if not isinstance(candidate, ObjectManager):
            raise UnresolvedReferenceError(
                f'Service "{self.key}" resolved to {type(candidate).__name__}, '
                "which does not provide get_repository()"
            )
        return ResolvedManager(candidate)


PersistenceManagerRef = Union[ResolvedManager, DeferredManager]


def as_manager_ref(value: Any) -> Optional[PersistenceManagerRef]:
    """
    Classify a raw persistence manager option.
    """

    if value is None:
        return None
    if isinstance(value, (ResolvedManager, DeferredManager)):
        return value
    if isinstance(value, str):
        if value == "":
            raise InvalidArgumentError("Persistence manager lookup key must not be empty")
        return DeferredManager(value)
    if isinstance(value, ObjectManager):
        return ResolvedManager(value)
    raise InvalidArgumentError(
        f"Persistence manager must be an ObjectManager or a lookup key, {type(value).__name__} given"
    )
