"""Keycloak OAuth provider options."""

from __future__ import annotations

from ..types import AuthenticationDescription, PathString
from .base import OAuthAuthenticationOptions


class KeycloakAuthenticationOptions(OAuthAuthenticationOptions):
    """Keycloak options; endpoints are derived from the server URL and realm."""

    default_authentication_type = "Keycloak"
    default_caption = "Keycloak"
    default_callback_path = "/signin-keycloak"
    default_scope = ("openid", "profile", "email")

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        server_url: str,
        realm: str,
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
        self.server_url = server_url.rstrip("/")
        self.realm = realm

        realm_base = f"{self.server_url}/realms/{self.realm}/protocol/openid-connect"
        self.authorization_endpoint = f"{realm_base}/auth"
        self.token_endpoint = f"{realm_base}/token"
