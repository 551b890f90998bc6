"""Atlassian (Jira / Confluence Cloud) OAuth provider options."""

from __future__ import annotations

from .base import OAuthAuthenticationOptions


class AtlassianAuthenticationOptions(OAuthAuthenticationOptions):
    default_authentication_type = "Atlassian"
    default_caption = "Atlassian"
    default_callback_path = "/signin-atlassian"
    default_scope = ("read:me",)
    authorization_endpoint = "https://auth.atlassian.com/authorize"
    token_endpoint = "https://auth.atlassian.com/oauth/token"
