"""
Options binding an authentication adapter to an entity repository.

The adapter needs ``identity_property`` and ``credential_property`` plus a way
to reach the repository: either ``repository`` directly, or
``persistence_manager`` together with ``identity_class``. A configured
repository always wins over the manager.

``persistence_manager`` may also hold the key a service locator knows the
manager by. Such a key has to be resolved (see
:meth:`AuthenticationAdapterOptions.resolve_persistence_manager`) before the
repository can be derived from it.
"""

from __future__ import annotations

import os
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..errors import InvalidArgumentError, OptionsValidationError, UnresolvedReferenceError
from ..persistence import (
    DeferredManager,
    ObjectRepository,
    PersistenceManagerRef,
    as_manager_ref,
)
from ..persistence.references import Locator
from ..utils import time_call
from .base import Options

ENV_PREFIX = "BLAZEAUTH_"
_ENV_OPTIONS = ("persistence_manager", "identity_class", "identity_property", "credential_property")


def _require_name(option: str, value: Any) -> str:
    if not isinstance(value, str) or value == "":
        given = "empty string" if value == "" else type(value).__name__
        raise InvalidArgumentError(f"Provided {option} is invalid, {given} given")
    return value


class AuthenticationAdapterOptions(Options):
    __aliases__ = {
        "object_manager": "persistence_manager",
        "object_repository": "repository",
    }

    _persistence_manager: Any = None
    _repository: Optional[ObjectRepository] = None
    _identity_class: Any = None
    _identity_property: Optional[str] = None
    _credential_property: Optional[str] = None
    _credential_callable: Optional[Callable[..., Any]] = None

    @classmethod
    def from_env(
        cls,
        prefix: str = ENV_PREFIX,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "AuthenticationAdapterOptions":
        """
        Build options from ``<prefix>IDENTITY_PROPERTY`` style variables.

        The persistence manager read this way is always a lookup key.
        """

        source = os.environ if environ is None else environ
        values = {}
        for name in _ENV_OPTIONS:
            value = source.get(f"{prefix}{name.upper()}")
            if value:
                values[name] = value
        return cls(values)

    # ------------------------------------------------------------------ #
    # Persistence manager
    # ------------------------------------------------------------------ #
    @property
    def persistence_manager(self) -> Any:
        return self._persistence_manager

    @persistence_manager.setter
    def persistence_manager(self, value: Any) -> None:
        as_manager_ref(value)
        self._persistence_manager = value

    @property
    def persistence_manager_ref(self) -> Optional[PersistenceManagerRef]:
        return as_manager_ref(self._persistence_manager)

    def resolve_persistence_manager(self, locator: Locator) -> "AuthenticationAdapterOptions":
        ref = self.persistence_manager_ref
        if not isinstance(ref, DeferredManager):
            return self
        resolved = ref.resolve(locator)
        self.logger.debug(
            "Resolved persistence manager %s", ref.key, extra={"service_key": ref.key}
        )
        self._persistence_manager = resolved.manager
        return self

    # ------------------------------------------------------------------ #
    # Repository
    # ------------------------------------------------------------------ #
    @property
    def repository(self) -> ObjectRepository:
        """
        The configured repository, or the manager's repository for ``identity_class``.
        """

        if self._repository is not None:
            return self._repository

        ref = self.persistence_manager_ref
        if ref is None:
            raise UnresolvedReferenceError(
                "Neither a repository nor a persistence manager has been configured"
            )
        if isinstance(ref, DeferredManager):
            raise UnresolvedReferenceError(
                f'Persistence manager "{ref.key}" is still a lookup key; '
                "resolve it before requesting the repository"
            )
        if self._identity_class is None:
            raise UnresolvedReferenceError(
                "An identity class is required to obtain a repository from the persistence manager"
            )
        with time_call(
            "options.resolve_repository",
            self.logger,
            identity_class=str(self._identity_class),
        ):
            return ref.get_repository(self._identity_class)

    @repository.setter
    def repository(self, value: Optional[ObjectRepository]) -> None:
        if value is not None and not isinstance(value, ObjectRepository):
            raise InvalidArgumentError(
                f"Repository must implement ObjectRepository, {type(value).__name__} given"
            )
        self._repository = value

    # ------------------------------------------------------------------ #
    # Identity and credential
    # ------------------------------------------------------------------ #
    @property
    def identity_class(self) -> Any:
        return self._identity_class

    @identity_class.setter
    def identity_class(self, value: Any) -> None:
        self._identity_class = value

    @property
    def identity_property(self) -> Optional[str]:
        return self._identity_property

    @identity_property.setter
    def identity_property(self, value: str) -> None:
        self._identity_property = _require_name("identity_property", value)

    @property
    def credential_property(self) -> Optional[str]:
        return self._credential_property

    @credential_property.setter
    def credential_property(self, value: str) -> None:
        self._credential_property = _require_name("credential_property", value)

    @property
    def credential_callable(self) -> Optional[Callable[..., Any]]:
        return self._credential_callable

    @credential_callable.setter
    def credential_callable(self, value: Callable[..., Any]) -> None:
        if not callable(value):
            shown = value if isinstance(value, str) else type(value).__name__
            raise InvalidArgumentError(f'"{shown}" is not a callable')
        self._credential_callable = value

    # ------------------------------------------------------------------ #
    # Fluent accessors
    # ------------------------------------------------------------------ #
    def set_persistence_manager(self, value: Any) -> "AuthenticationAdapterOptions":
        self.persistence_manager = value
        return self

    def get_persistence_manager(self) -> Any:
        return self.persistence_manager

    def set_repository(self, value: ObjectRepository) -> "AuthenticationAdapterOptions":
        self.repository = value
        return self

    def get_repository(self) -> ObjectRepository:
        return self.repository

    def set_identity_class(self, value: Any) -> "AuthenticationAdapterOptions":
        self.identity_class = value
        return self

    def get_identity_class(self) -> Any:
        return self.identity_class

    def set_identity_property(self, value: str) -> "AuthenticationAdapterOptions":
        self.identity_property = value
        return self

    def get_identity_property(self) -> Optional[str]:
        return self.identity_property

    def set_credential_property(self, value: str) -> "AuthenticationAdapterOptions":
        self.credential_property = value
        return self

    def get_credential_property(self) -> Optional[str]:
        return self.credential_property

    def set_credential_callable(self, value: Callable[..., Any]) -> "AuthenticationAdapterOptions":
        self.credential_callable = value
        return self

    def get_credential_callable(self) -> Optional[Callable[..., Any]]:
        return self.credential_callable

    # ------------------------------------------------------------------ #
    def validate(self) -> "AuthenticationAdapterOptions":
        """
        Check that the options are complete enough for an authentication adapter.
        """

        errors: Dict[str, List[str]] = {}
        if self._identity_property is None:
            errors.setdefault("identity_property", []).append("This option is required.")
        if self._credential_property is None:
            errors.setdefault("credential_property", []).append("This option is required.")
        if self._repository is None:
            if self._persistence_manager is None:
                errors.setdefault("__all__", []).append(
                    "Either repository or persistence_manager with identity_class is required."
                )
            elif self._identity_class is None:
                errors.setdefault("identity_class", []).append(
                    "Required when the repository comes from the persistence manager."
                )
        if errors:
            raise OptionsValidationError(errors)
        return self


__all__ = ["AuthenticationAdapterOptions", "ENV_PREFIX"]
