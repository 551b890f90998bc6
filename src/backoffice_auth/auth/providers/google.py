"""Google OAuth provider options."""

from __future__ import annotations

from .base import OAuthAuthenticationOptions


class GoogleAuthenticationOptions(OAuthAuthenticationOptions):
    default_authentication_type = "Google"
    default_caption = "Google"
    default_callback_path = "/signin-google"
    default_scope = ("openid", "profile", "email")
    authorization_endpoint = "https://accounts.google.com/o/oauth2/v2/auth"
    token_endpoint = "https://oauth2.googleapis.com/token"
