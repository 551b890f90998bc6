"""Salesforce OAuth provider options."""

from __future__ import annotations

from ..types import AuthenticationDescription, PathString
from .base import OAuthAuthenticationOptions

DEFAULT_LOGIN_URL = "https://login.salesforce.com"


class SalesforceAuthenticationOptions(OAuthAuthenticationOptions):
    """Salesforce options; sandboxes and My Domain orgs override ``login_url``."""

    default_authentication_type = "Salesforce"
    default_caption = "Salesforce"
    default_callback_path = "/signin-salesforce"
    default_scope = ("openid", "profile", "email")

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        login_url: str = DEFAULT_LOGIN_URL,
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
        self.login_url = login_url.rstrip("/")
        self.authorization_endpoint = f"{self.login_url}/services/oauth2/authorize"
        self.token_endpoint = f"{self.login_url}/services/oauth2/token"
