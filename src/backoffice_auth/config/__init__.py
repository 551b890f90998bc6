"""Provider registration configuration."""

from .loader import load_auth_config
from .models import (
    AutoLinkConfigModel,
    BackOfficeAuthConfigModel,
    LoggingConfigModel,
    ProviderConfigModel,
)
from .registration import create_authentication_options, register_provider, register_providers

__all__ = [
    "AutoLinkConfigModel",
    "BackOfficeAuthConfigModel",
    "LoggingConfigModel",
    "ProviderConfigModel",
    "create_authentication_options",
    "load_auth_config",
    "register_provider",
    "register_providers",
]
