"""Registry of request paths that bypass first-run and installer redirects.

Provider callback paths are added here at registration time so the request
router lets the identity provider's redirect complete even while the site is
still being installed or upgraded.
"""

import logging
import threading
from collections.abc import Iterator

logger = logging.getLogger(__name__)


def _normalize(path: str) -> str:
    normalized = path.strip().rstrip("/").lower()
    return normalized or "/"


class ReservedPathRegistry:
    """Thread-safe, append-only set of reserved paths.

    Entries are stored as given. Lookups through ``is_reserved`` ignore case and
    trailing slashes and treat every entry as a ``/``-bounded prefix.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._paths: set[str] = set()

    def try_add(self, path: str | None) -> bool:
        """Add a path if absent.

        Returns:
            True if the path was added, False if it was blank or already present.
        """
        if path is None or not path.strip():
            return False

        with self._lock:
            if path in self._paths:
                return False
            self._paths.add(path)

        logger.debug(f"Reserved path registered: {path}")
        return True

    def is_reserved(self, request_path: str) -> bool:
        """Return True if the request path equals or sits below a reserved path."""
        candidate = _normalize(request_path)
        for reserved in self.snapshot():
            prefix = _normalize(reserved)
            if candidate == prefix:
                return True
            if prefix == "/" or candidate.startswith(prefix + "/"):
                return True
        return False

    def snapshot(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._paths)

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._paths

    def __len__(self) -> int:
        with self._lock:
            return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.snapshot()))


# Process-wide registry used when registration code does not inject its own
default_reserved_paths = ReservedPathRegistry()
