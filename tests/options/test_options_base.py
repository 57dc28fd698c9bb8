import logging

import pytest

from blazeauth import AuthenticationAdapterOptions, UnknownOptionError


class LooseOptions(AuthenticationAdapterOptions):
    __strict__ = False


@pytest.mark.parametrize(
    "key",
    ["identity_property", "identityProperty", "IdentityProperty", "identity-property", "IDENTITY_PROPERTY"],
)
def test_option_keys_are_normalized(key):
    options = AuthenticationAdapterOptions({key: "username"})
    assert options.identity_property == "username"


def test_option_names_follow_definition_order():
    assert AuthenticationAdapterOptions.option_names() == (
        "persistence_manager",
        "repository",
        "identity_class",
        "identity_property",
        "credential_property",
        "credential_callable",
    )


def test_canonical_name_resolves_aliases():
    assert AuthenticationAdapterOptions.canonical_name("objectManager") == "persistence_manager"
    assert AuthenticationAdapterOptions.canonical_name("objectRepository") == "repository"
    assert AuthenticationAdapterOptions.canonical_name("unknown") is None


def test_unknown_key_raises_in_strict_mode():
    with pytest.raises(UnknownOptionError, match="identity"):
        AuthenticationAdapterOptions({"identity": "username"})


def test_unknown_attribute_assignment_raises_in_strict_mode():
    options = AuthenticationAdapterOptions()
    with pytest.raises(UnknownOptionError):
        options.identity = "username"


def test_unknown_key_is_skipped_when_not_strict(caplog):
    caplog.set_level(logging.DEBUG, logger="blazeauth")
    options = LooseOptions({"identity": "username", "credentialProperty": "password"})
    assert options.credential_property == "password"
    assert "identity" not in options.to_dict()
    assert any("Skipping unknown option identity" in record.getMessage() for record in caplog.records)


def test_set_and_set_from_mapping_return_options():
    options = AuthenticationAdapterOptions()
    assert options.set("identityProperty", "username") is options
    assert options.set_from_mapping({"credential_property": "password"}) is options
    assert options.credential_property == "password"


def test_keyword_arguments_are_applied_after_mapping():
    options = AuthenticationAdapterOptions(
        {"identity_property": "username"}, identity_property="email"
    )
    assert options.identity_property == "email"


def test_to_dict_does_not_resolve_repository():
    options = AuthenticationAdapterOptions(
        persistence_manager="orm.manager.default",
        identity_class="User",
        identity_property="username",
    )
    assert options.to_dict() == {
        "persistence_manager": "orm.manager.default",
        "repository": None,
        "identity_class": "User",
        "identity_property": "username",
        "credential_property": None,
        "credential_callable": None,
    }


def test_options_copy_from_another_instance():
    source = AuthenticationAdapterOptions(identity_property="username", identity_class="User")
    copy = AuthenticationAdapterOptions(source)
    assert copy == source
    assert copy is not source


def test_equality_compares_type_and_values():
    first = AuthenticationAdapterOptions(identity_property="username")
    second = AuthenticationAdapterOptions(identity_property="username")
    assert first == second
    second.identity_property = "email"
    assert first != second
    assert first != LooseOptions(identity_property="username")


def test_repr_lists_options():
    options = AuthenticationAdapterOptions(identity_property="username")
    rendered = repr(options)
    assert rendered.startswith("AuthenticationAdapterOptions(")
    assert "identity_property='username'" in rendered


def test_applying_mapping_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="blazeauth")
    AuthenticationAdapterOptions({"identity_property": "username", "credential_property": "password"})
    assert any("Applied 2 option(s)" in record.getMessage() for record in caplog.records)
