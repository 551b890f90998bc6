"""Back-office annotations for external authentication provider options.

Identity providers (Google, Azure AD B2C, Keycloak, ...) are registered with the
authentication middleware through their own options objects. The functions in this
module attach back-office metadata to those options through the description's
property bag, and read it back during the challenge and login phases, without
depending on any provider's concrete options class.

Registration side:
    - ``configure_for_back_office``: prefix, style, icon, back-office flag and
      reserved callback path
    - ``deny_local_login`` / ``auto_login_redirect``: login screen behaviour flags
    - ``set_auto_link_options`` / ``set_challenge_result_callback``

Request side:
    - ``get_challenge_result`` / ``get_auto_link_options``

Example:
    >>> options = GoogleAuthenticationOptions(client_id="...", client_secret="...")
    >>> configure_for_back_office(options, "btn-google", "fa-google")
    >>> options.authentication_type
    'Umbraco.Google'
"""

from __future__ import annotations

import logging

from starlette.requests import Request

from .constants import (
    AUTO_LINK_OPTIONS_KEY,
    AUTO_LOGIN_REDIRECT_KEY,
    BACK_OFFICE_AUTH_TYPE_PREFIX,
    BACK_OFFICE_KEY,
    CHALLENGE_RESULT_CALLBACK_KEY,
    DENY_LOCAL_LOGIN_KEY,
    SOCIAL_ICON_KEY,
    SOCIAL_STYLE_KEY,
)
from .contracts import (
    ChallengeResultCallback,
    InvalidAuthenticationTypeError,
    MissingOptionsError,
    ProvidesCallbackPath,
)
from .reserved_paths import ReservedPathRegistry, default_reserved_paths
from .types import (
    AuthenticationDescription,
    AuthenticationOptions,
    AuthenticationProperties,
    ExternalSignInAutoLinkOptions,
    PathString,
)

logger = logging.getLogger(__name__)


def set_challenge_result_callback(
    options: AuthenticationOptions, callback: ChallengeResultCallback
) -> None:
    """Store the callback that builds a customized challenge for the provider.

    Providers such as Azure AD B2C need extra challenge properties (a policy, a
    prompt) that only the registration code knows how to build.
    """
    options.description.properties[CHALLENGE_RESULT_CALLBACK_KEY] = callback


def get_challenge_result(
    description: AuthenticationDescription, request: Request
) -> AuthenticationProperties | None:
    """Invoke the stored challenge callback for ``request``.

    Returns None when no callback was stored or the stored value is not callable.
    """
    callback = description.properties.get(CHALLENGE_RESULT_CALLBACK_KEY)
    if not callable(callback):
        return None
    return callback(request)


def set_auto_link_options(
    options: AuthenticationOptions, link_options: ExternalSignInAutoLinkOptions
) -> None:
    """Store the auto-link options used when an external login has no local user."""
    options.description.properties[AUTO_LINK_OPTIONS_KEY] = link_options


def get_auto_link_options(
    description: AuthenticationDescription,
) -> ExternalSignInAutoLinkOptions | None:
    """Return the stored auto-link options, or None if absent or of another type."""
    link_options = description.properties.get(AUTO_LINK_OPTIONS_KEY)
    if isinstance(link_options, ExternalSignInAutoLinkOptions):
        return link_options
    return None


def deny_local_login(options: AuthenticationOptions) -> None:
    """Disable username/password login for the whole back office.

    If any registered provider sets this flag, local login is disabled even when
    other providers are installed.
    """
    options.description.properties[DENY_LOCAL_LOGIN_KEY] = True


def auto_login_redirect(options: AuthenticationOptions) -> None:
    """Redirect straight to this provider instead of showing the login buttons.

    Usually combined with ``deny_local_login``. When several providers set it, the
    provider registered last wins.
    """
    options.description.properties[AUTO_LOGIN_REDIRECT_KEY] = True


def configure_for_back_office(
    options: AuthenticationOptions | None,
    style: str | None,
    icon: str | None,
    callback_path: str | None = None,
    *,
    reserved_paths: ReservedPathRegistry | None = None,
) -> str | None:
    """Configure a provider's options for use with the back office.

    Args:
        options: The provider's authentication options
        style: CSS class of the provider's login button
        icon: Icon class of the provider's login button
        callback_path: Path the provider redirects back to. When blank, the path is
            read from options implementing ``ProvidesCallbackPath``. A path found
            either way is reserved so the provider can authenticate while the site
            is being installed or upgraded.
        reserved_paths: Registry receiving the callback path (defaults to the
            process-wide registry)

    Returns:
        The callback path that was reserved, or None

    Raises:
        MissingOptionsError: If options is None
        InvalidAuthenticationTypeError: If the options carry no authentication type
    """
    if options is None:
        raise MissingOptionsError("options")
    if not options.authentication_type:
        raise InvalidAuthenticationTypeError()

    if not options.authentication_type.startswith(BACK_OFFICE_AUTH_TYPE_PREFIX):
        options.authentication_type = BACK_OFFICE_AUTH_TYPE_PREFIX + options.authentication_type

    properties = options.description.properties
    properties[SOCIAL_STYLE_KEY] = style
    properties[SOCIAL_ICON_KEY] = icon
    properties[BACK_OFFICE_KEY] = True

    registry = reserved_paths if reserved_paths is not None else default_reserved_paths

    if callback_path is not None and callback_path.strip():
        registry.try_add(callback_path)
        return callback_path

    discovered = discover_callback_path(options)
    if discovered is None:
        return None
    registry.try_add(discovered)
    return discovered


def discover_callback_path(options: AuthenticationOptions) -> str | None:
    """Read the callback path from options that expose one."""
    try:
        if not isinstance(options, ProvidesCallbackPath):
            return None
        path = options.callback_path
    except Exception as exc:
        logger.error("Could not read AuthenticationOptions properties", exc_info=exc)
        return None

    if isinstance(path, PathString) and path.has_value:
        return str(path)
    return None
