import pytest

from backoffice_auth.auth.login_providers import get_auto_login_provider, has_deny_local_login
from backoffice_auth.auth.providers import (
    GitHubAuthenticationOptions,
    KeycloakAuthenticationOptions,
    OpenIdConnectAuthenticationOptions,
    SalesforceAuthenticationOptions,
)
from backoffice_auth.auth.reserved_paths import ReservedPathRegistry
from backoffice_auth.config.models import BackOfficeAuthConfigModel, ProviderConfigModel
from backoffice_auth.config.registration import (
    create_authentication_options,
    register_provider,
    register_providers,
)


def _provider(**overrides) -> ProviderConfigModel:
    data = {"type": "github", "client_id": "cid", "client_secret": "secret"}
    data.update(overrides)
    return ProviderConfigModel.model_validate(data)


@pytest.mark.parametrize(
    "overrides,expected_type",
    [
        ({"type": "github"}, GitHubAuthenticationOptions),
        ({"type": "salesforce"}, SalesforceAuthenticationOptions),
        (
            {"type": "keycloak", "server_url": "https://kc", "realm": "cms"},
            KeycloakAuthenticationOptions,
        ),
        ({"type": "oidc", "authority": "https://idp"}, OpenIdConnectAuthenticationOptions),
    ],
)
def test_create_authentication_options(overrides: dict, expected_type: type) -> None:
    options = create_authentication_options(_provider(**overrides))

    assert isinstance(options, expected_type)
    assert options.client_id == "cid"


def test_register_provider_applies_settings(reserved_paths: ReservedPathRegistry) -> None:
    provider = register_provider(
        _provider(
            style="btn-github",
            icon="fa-github",
            deny_local_login=True,
            auto_link={"auto_link_external_account": True, "default_culture": "en-US"},
        ),
        reserved_paths=reserved_paths,
    )

    settings = provider.settings
    assert settings.authentication_type == "Umbraco.GitHub"
    assert settings.style == "btn-github"
    assert settings.deny_local_login is True
    assert settings.auto_login_redirect is False
    assert settings.auto_link_options is not None
    assert settings.auto_link_options.auto_link_external_account is True
    assert settings.auto_link_options.default_culture == "en-US"
    assert settings.auto_link_options.get_default_user_groups() == ["editor"]
    assert "/signin-github" in reserved_paths


def test_register_provider_explicit_callback_path(reserved_paths: ReservedPathRegistry) -> None:
    provider = register_provider(
        _provider(callback_path="/umbraco-github-signin"), reserved_paths=reserved_paths
    )

    assert provider.callback_path == "/umbraco-github-signin"
    assert reserved_paths.snapshot() == frozenset({"/umbraco-github-signin"})


@pytest.mark.parametrize("callback_path", ["", "   "])
def test_register_provider_blank_callback_path_uses_default(
    callback_path: str, reserved_paths: ReservedPathRegistry
) -> None:
    provider_config = _provider(type="google", callback_path=callback_path)
    assert provider_config.callback_path is None

    provider = register_provider(provider_config, reserved_paths=reserved_paths)

    assert provider.callback_path == "/signin-google"
    assert reserved_paths.snapshot() == frozenset({"/signin-google"})


def test_register_providers_keeps_order(reserved_paths: ReservedPathRegistry) -> None:
    config = BackOfficeAuthConfigModel(
        providers=[
            _provider(type="google", auto_login_redirect=True),
            _provider(type="github", auto_login_redirect=True),
        ]
    )

    registered = register_providers(config, reserved_paths=reserved_paths)
    descriptions = [p.description for p in registered]

    assert [p.authentication_type for p in registered] == ["Umbraco.Google", "Umbraco.GitHub"]
    assert get_auto_login_provider(descriptions) == "Umbraco.GitHub"
    assert has_deny_local_login(descriptions) is False
    assert reserved_paths.snapshot() == frozenset({"/signin-google", "/signin-github"})
