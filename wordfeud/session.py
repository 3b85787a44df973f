from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class CredentialStore(Protocol):
    """Holds the session id attached to outgoing requests."""

    def get(self) -> str | None:  # pragma: no cover
        ...

    def set(self, credential: object) -> bool:  # pragma: no cover
        ...

    def clear(self) -> None:  # pragma: no cover
        ...


def _is_valid(credential: object) -> bool:
    return isinstance(credential, str) and len(credential) > 0


class MemoryCredentialStore:
    """In-memory session id, optionally seeded at construction.

    An invalid seed (non-string or empty) is ignored, leaving the store empty.
    """

    def __init__(self, credential: str | None = None) -> None:
        self._lock = threading.Lock()
        self._credential: str | None = credential if _is_valid(credential) else None

    def get(self) -> str | None:
        with self._lock:
            return self._credential

    def set(self, credential: object) -> bool:
        if not _is_valid(credential):
            return False
        with self._lock:
            self._credential = credential  # type: ignore[assignment]
        return True

    def clear(self) -> None:
        with self._lock:
            self._credential = None


class FileCredentialStore:
    """Session id persisted as a single line of text.

    Lets a session survive between processes (e.g. successive CLI runs).
    A missing or blank file reads as "no credential".
    """

    def __init__(self, path: Path | str) -> None:
        self._lock = threading.Lock()
        self.path = Path(path)

    def get(self) -> str | None:
        with self._lock:
            if not self.path.exists():
                return None
            value = self.path.read_text(encoding="utf-8").strip()
            return value or None

    def set(self, credential: object) -> bool:
        # Stored as it will read back; blank after stripping is rejected.
        if not isinstance(credential, str) or not credential.strip():
            return False
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(f"{credential.strip()}\n", encoding="utf-8")
        logger.debug("Session id written to %s", self.path)
        return True

    def clear(self) -> None:
        with self._lock:
            self.path.unlink(missing_ok=True)
