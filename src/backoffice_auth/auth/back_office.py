"""Typed back-office view over a provider's options.

``BackOfficeProviderOptions`` wraps a provider's ``AuthenticationOptions`` together
with the reserved path registry it registers into, so registration code works with
one object instead of a set of free functions and a global registry:

    provider = BackOfficeProviderOptions(options, reserved_paths=registry)
    provider.configure("btn-google", "fa-google").deny_local_login()

``BackOfficeProviderSettings`` is the read-only, typed snapshot of what has been
written into the description's property bag.
"""

from __future__ import annotations

from pydantic import ConfigDict, InstanceOf
from starlette.requests import Request

from backoffice_auth.models import SdkBaseModel

from . import annotator
from .constants import (
    AUTO_LOGIN_REDIRECT_KEY,
    BACK_OFFICE_KEY,
    CHALLENGE_RESULT_CALLBACK_KEY,
    DENY_LOCAL_LOGIN_KEY,
    SOCIAL_ICON_KEY,
    SOCIAL_STYLE_KEY,
)
from .contracts import ChallengeResultCallback
from .reserved_paths import ReservedPathRegistry, default_reserved_paths
from .types import (
    AuthenticationDescription,
    AuthenticationOptions,
    AuthenticationProperties,
    ExternalSignInAutoLinkOptions,
)


def _flag(description: AuthenticationDescription, key: str) -> bool:
    return description.properties.get(key) is True


def _text(description: AuthenticationDescription, key: str) -> str | None:
    value = description.properties.get(key)
    return value if isinstance(value, str) else None


class BackOfficeProviderSettings(SdkBaseModel):
    """Back-office settings of one provider, read from its description."""

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    authentication_type: str | None = None
    caption: str | None = None
    style: str | None = None
    icon: str | None = None
    callback_path: str | None = None
    back_office: bool = False
    deny_local_login: bool = False
    auto_login_redirect: bool = False
    auto_link_options: InstanceOf[ExternalSignInAutoLinkOptions] | None = None
    challenge_callback: ChallengeResultCallback | None = None

    @classmethod
    def from_description(
        cls,
        description: AuthenticationDescription,
        callback_path: str | None = None,
    ) -> BackOfficeProviderSettings:
        """Build settings from a description; absent or mistyped entries are left unset."""
        callback = description.properties.get(CHALLENGE_RESULT_CALLBACK_KEY)
        return cls(
            authentication_type=description.authentication_type,
            caption=description.caption,
            style=_text(description, SOCIAL_STYLE_KEY),
            icon=_text(description, SOCIAL_ICON_KEY),
            callback_path=callback_path,
            back_office=_flag(description, BACK_OFFICE_KEY),
            deny_local_login=_flag(description, DENY_LOCAL_LOGIN_KEY),
            auto_login_redirect=_flag(description, AUTO_LOGIN_REDIRECT_KEY),
            auto_link_options=annotator.get_auto_link_options(description),
            challenge_callback=callback if callable(callback) else None,
        )


class BackOfficeProviderOptions:
    """Adapter composing a provider's options with its back-office behaviour."""

    def __init__(
        self,
        options: AuthenticationOptions,
        *,
        reserved_paths: ReservedPathRegistry | None = None,
    ):
        self.options = options
        self.reserved_paths = (
            reserved_paths if reserved_paths is not None else default_reserved_paths
        )
        self._callback_path: str | None = None

    @property
    def description(self) -> AuthenticationDescription:
        return self.options.description

    @property
    def authentication_type(self) -> str | None:
        return self.options.authentication_type

    @property
    def callback_path(self) -> str | None:
        """Callback path reserved by ``configure``, or the one the options expose."""
        if self._callback_path:
            return self._callback_path
        return annotator.discover_callback_path(self.options)

    def configure(
        self, style: str | None, icon: str | None, callback_path: str | None = None
    ) -> BackOfficeProviderOptions:
        self._callback_path = annotator.configure_for_back_office(
            self.options,
            style,
            icon,
            callback_path,
            reserved_paths=self.reserved_paths,
        )
        return self

    def deny_local_login(self) -> BackOfficeProviderOptions:
        annotator.deny_local_login(self.options)
        return self

    def auto_login_redirect(self) -> BackOfficeProviderOptions:
        annotator.auto_login_redirect(self.options)
        return self

    def set_auto_link_options(
        self, link_options: ExternalSignInAutoLinkOptions
    ) -> BackOfficeProviderOptions:
        annotator.set_auto_link_options(self.options, link_options)
        return self

    def set_challenge_result_callback(
        self, callback: ChallengeResultCallback
    ) -> BackOfficeProviderOptions:
        annotator.set_challenge_result_callback(self.options, callback)
        return self

    def get_challenge_result(self, request: Request) -> AuthenticationProperties | None:
        return annotator.get_challenge_result(self.description, request)

    def get_auto_link_options(self) -> ExternalSignInAutoLinkOptions | None:
        return annotator.get_auto_link_options(self.description)

    @property
    def settings(self) -> BackOfficeProviderSettings:
        return BackOfficeProviderSettings.from_description(
            self.description, callback_path=self.callback_path
        )

    def __repr__(self) -> str:
        return f"BackOfficeProviderOptions({self.options!r})"
