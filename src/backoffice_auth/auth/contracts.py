"""Contracts and shared types for the back-office authentication helpers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from starlette.requests import Request

from .types import AuthenticationProperties, PathString

ChallengeResultCallback = Callable[[Request], AuthenticationProperties | None]


class BackOfficeAuthError(Exception):
    """Base class for errors raised by the back-office authentication helpers."""


class MissingOptionsError(BackOfficeAuthError, ValueError):
    """A required authentication options object was not supplied."""

    def __init__(self, name: str = "options"):
        super().__init__(f"Value cannot be None: {name}")
        self.name = name


class InvalidAuthenticationTypeError(BackOfficeAuthError, RuntimeError):
    """The provider being registered has no authentication type."""

    def __init__(self, message: str = "The authentication type can't be None or empty."):
        super().__init__(message)


@runtime_checkable
class ProvidesCallbackPath(Protocol):
    """Capability of options objects that know the path their provider calls back to."""

    @property
    def callback_path(self) -> PathString | None:
        """Path the identity provider redirects to after sign-in."""
        ...


__all__ = [
    "BackOfficeAuthError",
    "ChallengeResultCallback",
    "InvalidAuthenticationTypeError",
    "MissingOptionsError",
    "ProvidesCallbackPath",
]
