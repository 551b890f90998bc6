"""Back-office annotations for external authentication providers.

This package attaches back-office login behaviour to the options of third-party
identity providers and reads it back during sign-in:

- Provider annotation: `configure_for_back_office`, `deny_local_login`,
  `auto_login_redirect`, `set_auto_link_options`, `set_challenge_result_callback`
- Request-time lookups: `get_challenge_result`, `get_auto_link_options`
- Typed adapter: `BackOfficeProviderOptions` and `BackOfficeProviderSettings`
- Login screen aggregation: `get_back_office_providers`, `has_deny_local_login`,
  `get_auto_login_provider`
- Reserved callback paths: `ReservedPathRegistry`

## Quick Example

```python
from backoffice_auth.auth import BackOfficeProviderOptions, ReservedPathRegistry
from backoffice_auth.auth.providers import GoogleAuthenticationOptions

registry = ReservedPathRegistry()
google = GoogleAuthenticationOptions(client_id="your-client-id", client_secret="your-secret")

provider = BackOfficeProviderOptions(google, reserved_paths=registry)
provider.configure("btn-google", "fa-google").deny_local_login()

assert google.authentication_type == "Umbraco.Google"
assert registry.is_reserved("/signin-google")
```
"""

from .annotator import (
    auto_login_redirect,
    configure_for_back_office,
    deny_local_login,
    get_auto_link_options,
    get_challenge_result,
    set_auto_link_options,
    set_challenge_result_callback,
)
from .back_office import BackOfficeProviderOptions, BackOfficeProviderSettings
from .constants import BACK_OFFICE_AUTH_TYPE_PREFIX
from .contracts import (
    BackOfficeAuthError,
    ChallengeResultCallback,
    InvalidAuthenticationTypeError,
    MissingOptionsError,
    ProvidesCallbackPath,
)
from .login_providers import (
    get_auto_login_provider,
    get_back_office_providers,
    has_deny_local_login,
    to_login_provider_payload,
)
from .reserved_paths import ReservedPathRegistry, default_reserved_paths
from .types import (
    AuthenticationDescription,
    AuthenticationOptions,
    AuthenticationProperties,
    ExternalSignInAutoLinkOptions,
    PathString,
)

__all__ = [
    # Types
    "AuthenticationDescription",
    "AuthenticationOptions",
    "AuthenticationProperties",
    "ExternalSignInAutoLinkOptions",
    "PathString",
    "BACK_OFFICE_AUTH_TYPE_PREFIX",
    # Annotation
    "auto_login_redirect",
    "configure_for_back_office",
    "deny_local_login",
    "get_auto_link_options",
    "get_challenge_result",
    "set_auto_link_options",
    "set_challenge_result_callback",
    # Adapter
    "BackOfficeProviderOptions",
    "BackOfficeProviderSettings",
    # Contracts
    "BackOfficeAuthError",
    "ChallengeResultCallback",
    "InvalidAuthenticationTypeError",
    "MissingOptionsError",
    "ProvidesCallbackPath",
    # Login screen
    "get_auto_login_provider",
    "get_back_office_providers",
    "has_deny_local_login",
    "to_login_provider_payload",
    # Reserved paths
    "ReservedPathRegistry",
    "default_reserved_paths",
]
