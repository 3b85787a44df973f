from __future__ import annotations

from enum import IntEnum, StrEnum
from typing import Any

from pydantic import BaseModel, Field

from wordfeud.core.result import Err, Ok, Result
from wordfeud.errors import DecodeError, RemoteError


class RuleSet(IntEnum):
    american = 0
    norwegian = 1
    dutch = 2
    danish = 3
    swedish = 4
    english = 5
    spanish = 6
    french = 7


class BoardType(StrEnum):
    normal = "normal"
    random = "random"

    @classmethod
    def coerce(cls, value: BoardType | str | int) -> BoardType:
        """Accept the enum, its wire string, or the legacy integer codes (0=normal, 1=random)."""

        if isinstance(value, BoardType):
            return value
        if isinstance(value, int):
            if value not in (0, 1):
                raise ValueError(f"Unknown board type code: {value}")
            return (cls.normal, cls.random)[value]
        return cls(value)


class ResponseStatus(StrEnum):
    success = "success"
    error = "error"


class RemoteErrorCode(StrEnum):
    """Error codes the service is known to send in `content.type`.

    The list is not exhaustive; unknown codes are passed through as plain strings.
    """

    wrong_password = "wrong_password"
    unknown_email = "unknown_email"
    not_your_turn = "not_your_turn"
    game_over = "game_over"
    duplicate_invite = "duplicate_invite"
    invalid_ruleset = "invalid_ruleset"
    invalid_board_type = "invalid_board_type"
    user_not_found = "user_not_found"
    access_denied = "access_denied"
    illegal_word = "illegal_word"
    illegal_tiles = "illegal_tiles"


# Used when an error envelope carries no usable `content.type`.
UNKNOWN_ERROR_TYPE = "unknown_error"


class ResponseEnvelope(BaseModel):
    """The `{status, content}` wrapper the service puts around every response."""

    status: str
    content: dict[str, Any] | list[Any] = Field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.status == ResponseStatus.success

    @property
    def error_type(self) -> str | None:
        if self.is_success:
            return None
        if isinstance(self.content, dict):
            t = self.content.get("type")
            if isinstance(t, str) and t:
                return t
        return UNKNOWN_ERROR_TYPE

    def field(self, name: str) -> Any:
        """Return `content[name]` from a success envelope."""

        if not isinstance(self.content, dict) or name not in self.content:
            raise DecodeError(f"Response content has no '{name}' field")
        return self.content[name]

    def to_result(self) -> Result[dict[str, Any] | list[Any]]:
        if self.is_success:
            return Ok(self.content)
        return Err(RemoteError(self.error_type or UNKNOWN_ERROR_TYPE))
