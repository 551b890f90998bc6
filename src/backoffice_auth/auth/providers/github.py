"""GitHub OAuth provider options."""

from __future__ import annotations

from .base import OAuthAuthenticationOptions


class GitHubAuthenticationOptions(OAuthAuthenticationOptions):
    default_authentication_type = "GitHub"
    default_caption = "GitHub"
    default_callback_path = "/signin-github"
    default_scope = ("user:email",)
    authorization_endpoint = "https://github.com/login/oauth/authorize"
    token_endpoint = "https://github.com/login/oauth/access_token"
