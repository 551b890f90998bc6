"""Login screen view of the registered external providers.

The login screen receives every provider description known to the middleware and
needs to know which ones to render, whether the username/password form is shown
at all, and whether to redirect straight to one provider.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from .constants import AUTO_LOGIN_REDIRECT_KEY, BACK_OFFICE_KEY, DENY_LOCAL_LOGIN_KEY
from .types import AuthenticationDescription

logger = logging.getLogger(__name__)

_JSON_SCALARS = (str, int, float, bool, type(None))


def get_back_office_providers(
    descriptions: Iterable[AuthenticationDescription],
) -> list[AuthenticationDescription]:
    """Return descriptions flagged for back-office use, in registration order."""
    return [d for d in descriptions if d.properties.get(BACK_OFFICE_KEY) is True]


def has_deny_local_login(descriptions: Iterable[AuthenticationDescription]) -> bool:
    """True if any back-office provider disables local login."""
    return any(
        d.properties.get(DENY_LOCAL_LOGIN_KEY) is True
        for d in get_back_office_providers(descriptions)
    )


def get_auto_login_provider(descriptions: Iterable[AuthenticationDescription]) -> str | None:
    """Return the authentication type to redirect to automatically.

    The last registered back-office provider requesting the redirect wins.
    """
    selected: str | None = None
    for description in get_back_office_providers(descriptions):
        if description.properties.get(AUTO_LOGIN_REDIRECT_KEY) is True:
            if selected is not None:
                logger.debug(
                    f"Auto login redirect of {selected} overridden by "
                    f"{description.authentication_type}"
                )
            selected = description.authentication_type
    return selected


def to_login_provider_payload(description: AuthenticationDescription) -> dict[str, Any]:
    """Serialize a description for the login screen.

    Callbacks, auto-link options and other non-JSON values stay server side.
    """
    properties = {
        key: value
        for key, value in description.properties.items()
        if isinstance(value, _JSON_SCALARS)
    }
    return {
        "authType": description.authentication_type,
        "caption": description.caption,
        "properties": properties,
    }
