"""Client binding for the Wordfeud HTTP API."""

from __future__ import annotations

__version__ = "0.2.0"

from wordfeud.api.models import BoardType, RemoteErrorCode, ResponseEnvelope, RuleSet
from wordfeud.client import WordfeudClient
from wordfeud.errors import (
    ClientError,
    DecodeError,
    LoginError,
    RemoteError,
    TransportError,
    WordfeudError,
)
from wordfeud.hashing import hash_password

__all__ = [
    "BoardType",
    "ClientError",
    "DecodeError",
    "LoginError",
    "RemoteError",
    "RemoteErrorCode",
    "ResponseEnvelope",
    "RuleSet",
    "TransportError",
    "WordfeudClient",
    "WordfeudError",
    "hash_password",
    "__version__",
]
