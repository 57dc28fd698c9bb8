"""
Login example: options built from configuration, manager resolved from a registry.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from blazeauth import AuthenticationAdapterOptions

from .models import InMemoryObjectManager, User

MANAGER_SERVICE = "orm.manager.default"

DEFAULT_CONFIG: Dict[str, Any] = {
    "objectManager": MANAGER_SERVICE,
    "identityClass": "User",
    "identityProperty": "username",
    "credentialProperty": "password",
}


def build_options(
    config: Mapping[str, Any],
    services: Mapping[str, Any],
) -> AuthenticationAdapterOptions:
    options = AuthenticationAdapterOptions(config)
    options.resolve_persistence_manager(services)
    return options.validate()


def seed_sample_data(manager: InMemoryObjectManager) -> List[User]:
    users = [
        User(id=1, username="ada", password="lovelace"),
        User(id=2, username="grace", password="hopper"),
        User(id=3, username="alan", password="turing", active=False),
    ]
    repository = manager.get_repository("User")
    for user in users:
        repository.add(user)
    return users


def find_identity(options: AuthenticationAdapterOptions, identity: Any) -> Optional[Any]:
    repository = options.repository
    return repository.find_one_by({options.identity_property: identity})


def credential_matches(options: AuthenticationAdapterOptions, entity: Any, credential: Any) -> bool:
    stored = getattr(entity, options.credential_property)
    check = options.credential_callable
    if check is None:
        return stored == credential
    return bool(check(entity, credential))


def run_demo() -> Dict[str, bool]:
    manager = InMemoryObjectManager()
    seed_sample_data(manager)
    config = dict(
        DEFAULT_CONFIG,
        credentialCallable=lambda user, password: user.active and user.password == password,
    )
    options = build_options(config, {MANAGER_SERVICE: manager})

    attempts = {"ada": "lovelace", "grace": "wrong", "alan": "turing"}
    results: Dict[str, bool] = {}
    for username, password in attempts.items():
        user = find_identity(options, username)
        results[username] = user is not None and credential_matches(options, user, password)
    return results
