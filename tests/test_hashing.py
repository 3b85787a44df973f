from __future__ import annotations

import hashlib

from wordfeud.hashing import PASSWORD_SALT, hash_password


def test_hash_matches_salted_sha1() -> None:
    expected = hashlib.sha1(b"secretJarJarBinks9").hexdigest()
    assert hash_password("secret") == expected


def test_hash_is_stable_and_salt_is_fixed() -> None:
    assert PASSWORD_SALT == "JarJarBinks9"
    assert hash_password("secret") == hash_password("secret")
    assert hash_password("secret") != hash_password("Secret")


def test_hash_encodes_utf8() -> None:
    expected = hashlib.sha1(("pässwörd" + "JarJarBinks9").encode("utf-8")).hexdigest()
    assert hash_password("pässwörd") == expected
