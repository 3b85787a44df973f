from __future__ import annotations

import hashlib

# Fixed by the service; every client must salt the same way for logins to match.
PASSWORD_SALT = "JarJarBinks9"


def hash_password(password: str) -> str:
    """Hash a plain-text password the way the service expects it on the wire."""

    return hashlib.sha1((password + PASSWORD_SALT).encode("utf-8")).hexdigest()
