"""Authentication middleware entities the back-office helpers operate on.

These types model the objects owned by the authentication middleware: the options
object configured per identity provider, the description it exposes to the login
screen, and the properties returned from a sign-in challenge. The back-office
helpers never construct the options for a provider themselves; they annotate what
registration code hands them.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar

AUTHENTICATION_TYPE_PROPERTY = "AuthenticationType"
CAPTION_PROPERTY = "Caption"


@dataclass(frozen=True)
class PathString:
    """Escaped request path wrapper.

    An empty value means "no path". A non-empty value must start with ``/``.
    """

    value: str | None = None

    def __post_init__(self) -> None:
        if self.value and not self.value.startswith("/"):
            raise ValueError(f"The path must start with '/': {self.value!r}")

    @property
    def has_value(self) -> bool:
        return bool(self.value)

    def __str__(self) -> str:
        return self.value or ""


class AuthenticationDescription:
    """Describes a configured provider to the login screen and the sign-in pipeline.

    All data lives in the ``properties`` bag, including the authentication type and
    caption, so any reader holding the description sees every annotation.
    """

    def __init__(self, properties: dict[str, Any] | None = None):
        self.properties: dict[str, Any] = properties if properties is not None else {}

    @property
    def authentication_type(self) -> str | None:
        value = self.properties.get(AUTHENTICATION_TYPE_PROPERTY)
        return value if isinstance(value, str) else None

    @authentication_type.setter
    def authentication_type(self, value: str | None) -> None:
        self.properties[AUTHENTICATION_TYPE_PROPERTY] = value

    @property
    def caption(self) -> str | None:
        value = self.properties.get(CAPTION_PROPERTY)
        return value if isinstance(value, str) else None

    @caption.setter
    def caption(self, value: str | None) -> None:
        self.properties[CAPTION_PROPERTY] = value

    def __repr__(self) -> str:
        return (
            f"AuthenticationDescription(authentication_type={self.authentication_type!r}, "
            f"caption={self.caption!r})"
        )


class AuthenticationOptions:
    """Base options object for one configured identity provider.

    Assigning ``authentication_type`` keeps the description in sync.
    """

    default_authentication_type: ClassVar[str | None] = None

    def __init__(
        self,
        authentication_type: str | None = None,
        *,
        caption: str | None = None,
        description: AuthenticationDescription | None = None,
    ):
        self.description = description if description is not None else AuthenticationDescription()
        self._authentication_type: str | None = None
        self.authentication_type = (
            authentication_type
            if authentication_type is not None
            else self.default_authentication_type
        )
        if caption is not None:
            self.description.caption = caption

    @property
    def authentication_type(self) -> str | None:
        return self._authentication_type

    @authentication_type.setter
    def authentication_type(self, value: str | None) -> None:
        self._authentication_type = value
        self.description.authentication_type = value

    @property
    def caption(self) -> str | None:
        return self.description.caption

    @caption.setter
    def caption(self, value: str | None) -> None:
        self.description.caption = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(authentication_type={self.authentication_type!r})"


@dataclass
class AuthenticationProperties:
    """Properties handed to the middleware when issuing a sign-in challenge."""

    items: dict[str, str] = field(default_factory=dict)
    redirect_uri: str | None = None
    is_persistent: bool = False
    allow_refresh: bool | None = None


@dataclass
class ExternalSignInAutoLinkOptions:
    """Options controlling automatic linking of external logins to back-office users.

    Attributes:
        auto_link_external_account: Create and link a local user on first external login.
        default_user_groups: Group aliases assigned to auto-created users.
        default_culture: Culture assigned to auto-created users (None = system default).
        on_auto_linking: Called with (user, login_info) before an auto-created user is saved.
        on_external_login: Called with (user, login_info) on every external login;
            returning False rejects the login.
    """

    auto_link_external_account: bool = False
    default_user_groups: Sequence[str] = ("editor",)
    default_culture: str | None = None
    on_auto_linking: Callable[[Any, Any], None] | None = None
    on_external_login: Callable[[Any, Any], bool] | None = None

    def get_default_user_groups(self) -> list[str]:
        return list(self.default_user_groups)
