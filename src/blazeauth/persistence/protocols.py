"""
Protocols describing the persistence collaborators consumed by BlazeAuth.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ObjectRepository(Protocol):
    """
    Lookup interface for instances of a single entity type.
    """

    def find(self, identifier: Any) -> Optional[Any]:
        """
        Return the entity with the given identifier, or ``None``.
        """

    def find_all(self) -> Sequence[Any]:
        """
        Return every entity managed by the repository.
        """

    def find_by(
        self,
        criteria: Mapping[str, Any],
        order_by: Optional[Mapping[str, str]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Sequence[Any]:
        """
        Return entities whose properties equal the supplied criteria.
        """

    def find_one_by(self, criteria: Mapping[str, Any]) -> Optional[Any]:
        """
        Return the first entity matching the criteria, or ``None``.
        """


@runtime_checkable
class ObjectManager(Protocol):
    """
    Persistence manager able to hand out repositories per entity class.
    """

    def get_repository(self, class_name: Any) -> ObjectRepository:
        """
        Return the repository responsible for ``class_name``.
        """
