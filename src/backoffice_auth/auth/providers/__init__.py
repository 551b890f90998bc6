"""Options classes for the identity providers backoffice-auth ships configuration for.

Every class exposes ``callback_path`` and so satisfies ``ProvidesCallbackPath``.
"""

from .atlassian import AtlassianAuthenticationOptions
from .base import OAuthAuthenticationOptions
from .github import GitHubAuthenticationOptions
from .google import GoogleAuthenticationOptions
from .keycloak import KeycloakAuthenticationOptions
from .oidc import OpenIdConnectAuthenticationOptions
from .salesforce import SalesforceAuthenticationOptions

__all__ = [
    "AtlassianAuthenticationOptions",
    "GitHubAuthenticationOptions",
    "GoogleAuthenticationOptions",
    "KeycloakAuthenticationOptions",
    "OAuthAuthenticationOptions",
    "OpenIdConnectAuthenticationOptions",
    "SalesforceAuthenticationOptions",
]
