"""Translate provider config models into annotated authentication options."""

import logging

from backoffice_auth.auth.back_office import BackOfficeProviderOptions
from backoffice_auth.auth.providers import (
    AtlassianAuthenticationOptions,
    GitHubAuthenticationOptions,
    GoogleAuthenticationOptions,
    KeycloakAuthenticationOptions,
    OAuthAuthenticationOptions,
    OpenIdConnectAuthenticationOptions,
    SalesforceAuthenticationOptions,
)
from backoffice_auth.auth.providers.salesforce import DEFAULT_LOGIN_URL
from backoffice_auth.auth.reserved_paths import ReservedPathRegistry
from backoffice_auth.auth.types import ExternalSignInAutoLinkOptions

from .models import AutoLinkConfigModel, BackOfficeAuthConfigModel, ProviderConfigModel

logger = logging.getLogger(__name__)

_SIMPLE_PROVIDERS: dict[str, type[OAuthAuthenticationOptions]] = {
    "google": GoogleAuthenticationOptions,
    "github": GitHubAuthenticationOptions,
    "atlassian": AtlassianAuthenticationOptions,
}


def create_authentication_options(
    provider_config: ProviderConfigModel,
) -> OAuthAuthenticationOptions:
    """Create the options object for a configured provider."""
    common = {
        "client_id": provider_config.client_id,
        "client_secret": provider_config.client_secret,
        "authentication_type": provider_config.authentication_type,
        "caption": provider_config.caption,
        "callback_path": provider_config.callback_path,
        "scope": provider_config.scope,
    }

    provider = provider_config.type
    if provider in _SIMPLE_PROVIDERS:
        return _SIMPLE_PROVIDERS[provider](**common)

    if provider == "salesforce":
        return SalesforceAuthenticationOptions(
            login_url=provider_config.login_url or DEFAULT_LOGIN_URL, **common
        )

    if provider == "keycloak":
        if not provider_config.server_url or not provider_config.realm:
            raise ValueError("Keycloak provider selected but server_url or realm is missing")
        return KeycloakAuthenticationOptions(
            server_url=provider_config.server_url, realm=provider_config.realm, **common
        )

    if provider == "oidc":
        if not provider_config.authority:
            raise ValueError("OpenID Connect provider selected but no authority configured")
        return OpenIdConnectAuthenticationOptions(authority=provider_config.authority, **common)

    raise ValueError(f"Unsupported provider: {provider}")


def translate_auto_link_config(auto_link: AutoLinkConfigModel) -> ExternalSignInAutoLinkOptions:
    return ExternalSignInAutoLinkOptions(
        auto_link_external_account=auto_link.auto_link_external_account,
        default_user_groups=tuple(auto_link.default_user_groups),
        default_culture=auto_link.default_culture,
    )


def register_provider(
    provider_config: ProviderConfigModel,
    reserved_paths: ReservedPathRegistry | None = None,
) -> BackOfficeProviderOptions:
    """Create and annotate the options of one provider."""
    options = create_authentication_options(provider_config)
    provider = BackOfficeProviderOptions(options, reserved_paths=reserved_paths)
    provider.configure(provider_config.style, provider_config.icon, provider_config.callback_path)

    if provider_config.deny_local_login:
        provider.deny_local_login()
    if provider_config.auto_login_redirect:
        provider.auto_login_redirect()
    if provider_config.auto_link is not None:
        provider.set_auto_link_options(translate_auto_link_config(provider_config.auto_link))

    logger.info(
        f"Registered back-office provider {provider.authentication_type} "
        f"(callback: {provider.callback_path or 'none'})"
    )
    return provider


def register_providers(
    config: BackOfficeAuthConfigModel,
    reserved_paths: ReservedPathRegistry | None = None,
) -> list[BackOfficeProviderOptions]:
    """Register every configured provider, in file order."""
    return [register_provider(p, reserved_paths=reserved_paths) for p in config.providers]
