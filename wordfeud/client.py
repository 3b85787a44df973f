from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import httpx

from wordfeud.api.models import BoardType, ResponseEnvelope, RuleSet
from wordfeud.config import Settings
from wordfeud.core.result import Err
from wordfeud.errors import LoginError, RemoteError
from wordfeud.executor import RequestExecutor
from wordfeud.hashing import hash_password
from wordfeud.infra.http_client import create_http_client
from wordfeud.session import CredentialStore, FileCredentialStore, MemoryCredentialStore

logger = logging.getLogger(__name__)


def _raise_for_error(envelope: ResponseEnvelope, *, error_cls: type[RemoteError] = RemoteError) -> None:
    result = envelope.to_result()
    if isinstance(result, Err):
        raise error_cls(result.type)


class WordfeudClient:
    """One authenticated (or anonymous) session against the Wordfeud API.

    Every operation is a single blocking POST. Operations differ in how they
    report a `status: "error"` envelope, and callers rely on that:

    - most raise `RemoteError` (`LoginError` for the two logins);
    - `resign` returns the error code string instead of raising;
    - `place_move`, `pass_turn` and `invite` return the envelope untouched.

    Independent instances do not share credentials unless given the same store.
    """

    def __init__(
        self,
        session_id: str | None = None,
        *,
        settings: Settings | None = None,
        credentials: CredentialStore | None = None,
        http: httpx.Client | None = None,
    ) -> None:
        self.settings = settings or Settings()

        if credentials is None:
            if self.settings.session_file is not None:
                credentials = FileCredentialStore(self.settings.session_file)
            else:
                credentials = MemoryCredentialStore()
        seed = session_id if session_id is not None else self.settings.session_id
        if seed is not None:
            credentials.set(seed)
        self.credentials = credentials

        self._owns_http = http is None
        self._http = http if http is not None else create_http_client(self.settings)
        self.executor = RequestExecutor(http=self._http, credentials=self.credentials, settings=self.settings)

    def __enter__(self) -> WordfeudClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def execute(self, path: str, payload: Mapping[str, Any] | None = None) -> ResponseEnvelope:
        return self.executor.execute(path, payload)

    def _content(self, path: str, payload: Mapping[str, Any] | None = None) -> Any:
        envelope = self.execute(path, payload)
        _raise_for_error(envelope)
        return envelope.content

    def _field(self, path: str, name: str, payload: Mapping[str, Any] | None = None) -> Any:
        envelope = self.execute(path, payload)
        _raise_for_error(envelope)
        return envelope.field(name)

    # ------------------------- Session -------------------------

    @property
    def session_id(self) -> str | None:
        return self.credentials.get()

    def get_session_id(self) -> str | None:
        return self.credentials.get()

    def set_session_id(self, session_id: object) -> bool:
        """Switch to another user's session.

        Returns False (and keeps the current session) unless given a non-empty string.
        """

        return self.credentials.set(session_id)

    def logout(self) -> None:
        """Forget the session id; authenticated calls fail until the next login."""

        self.credentials.clear()

    def login_by_email(self, email: str, password: str) -> None:
        envelope = self.execute("user/login/email", {"email": email, "password": hash_password(password)})
        _raise_for_error(envelope, error_cls=LoginError)
        logger.debug("Logged in as %s", email)

    def login_by_id(self, user_id: int, password: str) -> None:
        envelope = self.execute("user/login/id", {"id": int(user_id), "password": hash_password(password)})
        _raise_for_error(envelope, error_cls=LoginError)
        logger.debug("Logged in as user %s", user_id)

    def create_account(self, username: str, email: str, password: str) -> int:
        """Create an account and return the new user id."""

        return self._field(
            "user/create",
            "id",
            {"username": username, "email": email, "password": hash_password(password)},
        )

    def change_password(self, password: str) -> None:
        _raise_for_error(self.execute("user/password/set", {"password": hash_password(password)}))

    def upload_avatar(self, image_data: str) -> None:
        _raise_for_error(self.execute("user/avatar/upload", {"image_data": image_data}))

    def avatar_url(self, user_id: int, size: int) -> str:
        """URL of a user's avatar; sizes known to work are 40 and 60. No network call."""

        return f"https://{self.settings.avatar_host}/{int(size)}/{int(user_id)}"

    # ------------------------- Users & friends -------------------------

    def search_user(self, query: str) -> list[Any]:
        """Search by username or email address."""

        return self._field("user/search", "result", {"username_or_email": query})

    def get_friends(self) -> list[Any]:
        return self._field("user/relationships", "relationships")

    def add_friend(self, user_id: int, type: int = 0) -> Any:  # noqa: A002 - wire field name
        return self._content("relationship/create", {"id": int(user_id), "type": int(type)})

    def delete_friend(self, user_id: int) -> None:
        _raise_for_error(self.execute(f"relationship/{int(user_id)}/delete"))

    def get_notifications(self) -> list[Any]:
        return self._field("user/notifications", "entries")

    def get_status(self) -> Any:
        """Pending invites, current games and the like."""

        return self._content("user/status")

    # ------------------------- Games -------------------------

    def get_games(self) -> list[Any]:
        return self._field("user/games", "games")

    def get_game(self, game_id: int) -> dict[str, Any]:
        return self._field(f"game/{int(game_id)}", "game")

    def get_board(self, board_id: int) -> dict[str, Any]:
        return self._field(f"board/{int(board_id)}", "board")

    def place_move(
        self,
        game_id: int,
        ruleset: RuleSet | int,
        tiles: Sequence[Any],
        words: str | Sequence[str],
    ) -> ResponseEnvelope:
        """Submit a move. Returns the envelope; callers check `is_success` / `error_type`.

        `words` may be a single word, which is sent as a one-element list, or a
        sequence of words, which is sent as a flat list (not nested).

        Known error codes: illegal_word, illegal_tiles, not_your_turn.
        """

        payload = {
            "move": list(tiles),
            "ruleset": int(ruleset),
            "words": [words] if isinstance(words, str) else list(words),
        }
        return self.execute(f"game/{int(game_id)}/move", payload)

    def pass_turn(self, game_id: int) -> ResponseEnvelope:
        return self.execute(f"game/{int(game_id)}/pass")

    def resign(self, game_id: int) -> bool | str:
        """Resign a game: True on success, otherwise the error code (e.g. "game_over")."""

        envelope = self.execute(f"game/{int(game_id)}/resign")
        if envelope.is_success:
            return True
        return envelope.error_type or ""

    # ------------------------- Invites -------------------------

    def invite(
        self,
        invitee: str,
        ruleset: RuleSet | int = RuleSet.american,
        board_type: BoardType | str | int = BoardType.random,
    ) -> ResponseEnvelope:
        """Invite a user by name.

        Known error codes: duplicate_invite, invalid_ruleset, invalid_board_type, user_not_found.
        """

        payload = {
            "invitee": invitee,
            "ruleset": int(ruleset),
            "board_type": str(BoardType.coerce(board_type)),
        }
        return self.execute("invite/new", payload)

    def invite_random_opponent(
        self,
        ruleset: RuleSet | int,
        board_type: BoardType | str | int = BoardType.random,
    ) -> Any:
        payload = {"ruleset": int(ruleset), "board_type": str(BoardType.coerce(board_type))}
        return self._content("random_request/create", payload)

    def accept_invite(self, invite_id: int) -> None:
        _raise_for_error(self.execute(f"invite/{int(invite_id)}/accept"))

    def reject_invite(self, invite_id: int) -> None:
        _raise_for_error(self.execute(f"invite/{int(invite_id)}/reject"))

    # ------------------------- Chat -------------------------

    def send_chat_message(self, game_id: int, message: str) -> Any:
        return self._content(f"game/{int(game_id)}/chat/send", {"message": message.strip()})

    def get_chat_messages(self, game_id: int) -> list[Any]:
        return self._field(f"game/{int(game_id)}/chat", "messages")
