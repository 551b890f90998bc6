"""Generic OpenID Connect provider options (Azure AD B2C, Okta, Auth0, ...)."""

from __future__ import annotations

from ..types import AuthenticationDescription, PathString
from .base import OAuthAuthenticationOptions


class OpenIdConnectAuthenticationOptions(OAuthAuthenticationOptions):
    """Options for any provider publishing an OpenID Connect discovery document.

    Endpoints are resolved by the middleware from ``metadata_address``.
    """

    default_authentication_type = "OpenIdConnect"
    default_caption = "OpenID Connect"
    default_callback_path = "/signin-oidc"
    default_scope = ("openid", "profile", "email")

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        authority: str,
        authentication_type: str | None = None,
        caption: str | None = None,
        callback_path: str | PathString | None = None,
        scope: str | list[str] | None = None,
        description: AuthenticationDescription | None = None,
    ):
        super().__init__(
            client_id=client_id,
            client_secret=client_secret,
            authentication_type=authentication_type,
            caption=caption,
            callback_path=callback_path,
            scope=scope,
            description=description,
        )
        self.authority = authority.rstrip("/")

    @property
    def metadata_address(self) -> str:
        return f"{self.authority}/.well-known/openid-configuration"
