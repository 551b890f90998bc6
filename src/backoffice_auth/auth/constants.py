"""Well-known property bag keys shared with every reader of a provider description.

The key strings are part of the interoperability contract with the login screen
and the sign-in pipeline and must not change.
"""

# Prefix applied to every provider authentication type registered for the back office
BACK_OFFICE_AUTH_TYPE_PREFIX = "Umbraco."

CHALLENGE_RESULT_CALLBACK_KEY = "ChallengeResultCallback"
AUTO_LINK_OPTIONS_KEY = "ExternalSignInAutoLinkOptions"
DENY_LOCAL_LOGIN_KEY = "UmbracoBackOffice_DenyLocalLogin"
AUTO_LOGIN_REDIRECT_KEY = "UmbracoBackOffice_AutoLoginRedirect"
SOCIAL_STYLE_KEY = "SocialStyle"
SOCIAL_ICON_KEY = "SocialIcon"
BACK_OFFICE_KEY = "UmbracoBackOffice"

__all__ = [
    "AUTO_LINK_OPTIONS_KEY",
    "AUTO_LOGIN_REDIRECT_KEY",
    "BACK_OFFICE_AUTH_TYPE_PREFIX",
    "BACK_OFFICE_KEY",
    "CHALLENGE_RESULT_CALLBACK_KEY",
    "DENY_LOCAL_LOGIN_KEY",
    "SOCIAL_ICON_KEY",
    "SOCIAL_STYLE_KEY",
]
