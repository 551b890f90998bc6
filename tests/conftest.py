"""
Global pytest configuration and fixtures.
"""

import pytest
from starlette.requests import Request

from backoffice_auth.auth.reserved_paths import ReservedPathRegistry


@pytest.fixture
def reserved_paths() -> ReservedPathRegistry:
    """Fresh registry per test so the process-wide default is never touched."""
    return ReservedPathRegistry()


@pytest.fixture
def make_request():
    """Factory for in-process starlette requests (no server needed)."""

    def _make(path: str = "/umbraco/backoffice/ExternalLogin", query: str = "") -> Request:
        scope = {
            "type": "http",
            "method": "GET",
            "scheme": "https",
            "server": ("cms.example.com", 443),
            "path": path,
            "query_string": query.encode(),
            "headers": [(b"host", b"cms.example.com")],
        }
        return Request(scope)

    return _make
