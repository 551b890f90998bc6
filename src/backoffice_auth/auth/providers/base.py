"""Shared base for OAuth 2.0 provider options."""

from __future__ import annotations

from typing import ClassVar

from ..types import AuthenticationDescription, AuthenticationOptions, PathString


class OAuthAuthenticationOptions(AuthenticationOptions):
    """Options common to every OAuth 2.0 authorization-code provider.

    Subclasses set the default authentication type, caption, callback path and
    endpoints of their provider. ``callback_path`` makes every subclass a
    ``ProvidesCallbackPath``.
    """

    default_caption: ClassVar[str | None] = None
    default_callback_path: ClassVar[str] = "/signin-oauth"
    default_scope: ClassVar[tuple[str, ...]] = ()
    authorization_endpoint: str = ""
    token_endpoint: str = ""

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        authentication_type: str | None = None,
        caption: str | None = None,
        callback_path: str | PathString | None = None,
        scope: str | list[str] | None = None,
        description: AuthenticationDescription | None = None,
    ):
        super().__init__(
            authentication_type,
            caption=caption if caption is not None else self.default_caption,
            description=description,
        )
        self.client_id = client_id
        self.client_secret = client_secret
        if isinstance(callback_path, PathString):
            self.callback_path = callback_path
        else:
            self.callback_path = PathString(callback_path or self.default_callback_path)
        if scope is None:
            self.scope = list(self.default_scope)
        elif isinstance(scope, str):
            self.scope = scope.split()
        else:
            self.scope = list(scope)

    def build_callback_url(self, base_url: str) -> str:
        """Absolute redirect URI to register with the provider."""
        return f"{base_url.rstrip('/')}/{str(self.callback_path).lstrip('/')}"
