"""Pydantic models for the provider registration config file.

Example ``backoffice-auth.yml``:

    providers:
      - type: google
        client_id: "..."
        client_secret: "..."
        style: btn-google
        icon: fa-google
        auto_link:
          auto_link_external_account: true
          default_user_groups: [editor]
      - type: oidc
        authentication_type: AzureADB2C
        caption: Company login
        authority: https://login.example.com/tenant/v2.0
        client_id: "..."
        client_secret: "..."
        deny_local_login: true
        auto_login_redirect: true

    logging:
      level: INFO

Security-relevant fields: ``callback_path`` decides which path bypasses installer
redirects, ``deny_local_login`` disables username/password login system-wide.
"""

from typing import Any, Literal

from pydantic import ConfigDict, Field, field_validator, model_validator

from backoffice_auth.models import SdkBaseModel

ProviderType = Literal["google", "github", "atlassian", "salesforce", "keycloak", "oidc"]


class AutoLinkConfigModel(SdkBaseModel):
    """Auto-link behaviour for external logins without a matching back-office user."""

    auto_link_external_account: bool = False
    default_user_groups: list[str] = Field(default_factory=lambda: ["editor"])
    default_culture: str | None = None

    @field_validator("default_user_groups", mode="before")
    @classmethod
    def _ensure_str_list(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, list):
            return value
        return [str(value)]


class ProviderConfigModel(SdkBaseModel):
    """One external identity provider registered for the back office."""

    type: ProviderType
    client_id: str
    client_secret: str
    authentication_type: str | None = None
    caption: str | None = None
    scope: str | None = None
    callback_path: str | None = None
    style: str | None = None
    icon: str | None = None
    deny_local_login: bool = False
    auto_login_redirect: bool = False
    auto_link: AutoLinkConfigModel | None = None

    # Provider specific
    server_url: str | None = None  # keycloak
    realm: str | None = None  # keycloak
    authority: str | None = None  # oidc
    login_url: str | None = None  # salesforce

    @field_validator("callback_path")
    @classmethod
    def _check_callback_path(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        if not value.startswith("/"):
            raise ValueError("callback_path must start with '/'")
        return value

    @model_validator(mode="after")
    def _check_provider_fields(self) -> "ProviderConfigModel":
        if self.type == "keycloak" and not (self.server_url and self.realm):
            raise ValueError("keycloak providers require server_url and realm")
        if self.type == "oidc" and not self.authority:
            raise ValueError("oidc providers require authority")
        return self


class LoggingConfigModel(SdkBaseModel):
    """Application logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] | None = None
    path: str | None = None
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5


class BackOfficeAuthConfigModel(SdkBaseModel):
    """Root of the provider registration config file."""

    # Override frozen=True since this is a config object
    model_config = ConfigDict(extra="forbid", frozen=False)

    providers: list[ProviderConfigModel] = Field(default_factory=list)
    logging: LoggingConfigModel = Field(default_factory=LoggingConfigModel)
