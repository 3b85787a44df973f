from __future__ import annotations


class WordfeudError(Exception):
    """Base class for every error raised by this package.

    Catch this to handle any failure coming out of a client call.
    """


class ClientError(WordfeudError):
    """Something went wrong with the HTTP request or the response we got."""


class TransportError(ClientError):
    """The request never completed, or the service answered with a non-200 status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ClientError):
    """The response body was not a JSON envelope object."""


class RemoteError(WordfeudError):
    """The service answered with `status: "error"`.

    `type` is the machine-readable error code from `content.type`
    (e.g. "not_your_turn"); it is also the exception message.
    """

    def __init__(self, type: str) -> None:  # noqa: A002 - matches the wire field name
        super().__init__(type)
        self.type = type

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RemoteError):
            return NotImplemented
        return self.type == other.type

    def __hash__(self) -> int:
        return hash((RemoteError, self.type))


class LoginError(RemoteError):
    """`login_by_email` or `login_by_id` was rejected by the service."""
