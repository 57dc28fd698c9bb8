import pytest

from blazeauth.errors import InvalidArgumentError, UnresolvedReferenceError
from blazeauth.persistence import (
    DeferredManager,
    ObjectManager,
    ObjectRepository,
    ResolvedManager,
    as_manager_ref,
)


class Repository:
    def find(self, identifier):
        return None

    def find_all(self):
        return []

    def find_by(self, criteria, order_by=None, limit=None, offset=None):
        return []

    def find_one_by(self, criteria):
        return None


class Manager:
    def __init__(self):
        self.repository = Repository()

    def get_repository(self, class_name):
        return self.repository


class PartialRepository:
    def find(self, identifier):
        return None


def test_protocols_check_required_methods():
    assert isinstance(Repository(), ObjectRepository)
    assert not isinstance(PartialRepository(), ObjectRepository)
    assert isinstance(Manager(), ObjectManager)
    assert not isinstance("orm.manager.default", ObjectManager)


def test_as_manager_ref_classifies_values():
    manager = Manager()
    assert as_manager_ref(None) is None
    assert as_manager_ref("orm.manager.default") == DeferredManager("orm.manager.default")
    assert as_manager_ref(manager) == ResolvedManager(manager)
    ref = ResolvedManager(manager)
    assert as_manager_ref(ref) is ref


@pytest.mark.parametrize("value", ["", 1, Repository()])
def test_as_manager_ref_rejects_other_values(value):
    with pytest.raises(InvalidArgumentError):
        as_manager_ref(value)


def test_resolved_manager_delegates_repository_lookup():
    manager = Manager()
    assert ResolvedManager(manager).get_repository("User") is manager.repository


def test_deferred_manager_resolves_through_mapping_and_callable():
    manager = Manager()
    deferred = DeferredManager("orm.manager.default")
    assert deferred.resolve({"orm.manager.default": manager}) == ResolvedManager(manager)
    assert deferred.resolve(lambda key: manager).manager is manager


def test_deferred_manager_accepts_resolved_reference():
    ref = ResolvedManager(Manager())
    assert DeferredManager("orm.manager.default").resolve({"orm.manager.default": ref}) is ref


def test_deferred_manager_missing_key_chains_lookup_error():
    with pytest.raises(UnresolvedReferenceError) as excinfo:
        DeferredManager("orm.manager.missing").resolve({})
    assert isinstance(excinfo.value.__cause__, KeyError)
    assert isinstance(excinfo.value, LookupError)
