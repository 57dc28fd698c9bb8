"""
Entities and in-memory persistence for the BlazeAuth login example.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence


@dataclass
class User:
    id: int
    username: str
    password: str
    active: bool = True


class InMemoryRepository:
    def __init__(self, entities: Optional[Sequence[Any]] = None) -> None:
        self._entities: List[Any] = list(entities or [])

    def add(self, entity: Any) -> None:
        self._entities.append(entity)

    def find(self, identifier: Any) -> Optional[Any]:
        for entity in self._entities:
            if getattr(entity, "id", None) == identifier:
                return entity
        return None

    def find_all(self) -> Sequence[Any]:
        return list(self._entities)

    def find_by(
        self,
        criteria: Mapping[str, Any],
        order_by: Optional[Mapping[str, str]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Sequence[Any]:
        matches = [
            entity
            for entity in self._entities
            if all(getattr(entity, key, None) == value for key, value in criteria.items())
        ]
        for key, direction in reversed(list((order_by or {}).items())):
            matches.sort(key=lambda entity: getattr(entity, key), reverse=direction.upper() == "DESC")
        start = offset or 0
        end = start + limit if limit is not None else None
        return matches[start:end]

    def find_one_by(self, criteria: Mapping[str, Any]) -> Optional[Any]:
        matches = self.find_by(criteria, limit=1)
        return matches[0] if matches else None


class InMemoryObjectManager:
    """
    Hands out one repository per entity class name.
    """

    def __init__(self) -> None:
        self._repositories: Dict[str, InMemoryRepository] = {}

    def get_repository(self, class_name: Any) -> InMemoryRepository:
        key = class_name if isinstance(class_name, str) else class_name.__name__
        return self._repositories.setdefault(key, InMemoryRepository())
