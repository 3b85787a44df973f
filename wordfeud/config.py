from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from wordfeud import __version__

DEFAULT_HOST = "game06.wordfeud.com"
DEFAULT_AVATAR_HOST = "avatars.wordfeud.com"
DEFAULT_TIMEOUT_S = 30.0
DEFAULT_USER_AGENT = f"Python Wordfeud API {__version__}"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class Settings:
    host: str = DEFAULT_HOST
    avatar_host: str = DEFAULT_AVATAR_HOST
    user_agent: str = DEFAULT_USER_AGENT
    timeout_s: float = DEFAULT_TIMEOUT_S

    # When False, ask the server for an uncompressed body.
    accept_encoding: bool = True

    # Seed credential and optional file to persist it in.
    session_id: str | None = None
    session_file: Path | None = None

    @property
    def base_url(self) -> str:
        return f"https://{self.host}/wf/"


def load_env(path: Path | None = None) -> None:
    """Load a `.env` file (default: nearest one above the working directory).

    Variables already set in the environment win.
    """

    from dotenv import find_dotenv, load_dotenv

    load_dotenv(dotenv_path=path or find_dotenv(usecwd=True), override=False)


def _flag(value: str | None, *, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().casefold() in _TRUTHY


def settings_from_env() -> Settings:
    session_file = os.environ.get("WORDFEUD_SESSION_FILE")
    return Settings(
        host=os.environ.get("WORDFEUD_HOST", DEFAULT_HOST),
        avatar_host=os.environ.get("WORDFEUD_AVATAR_HOST", DEFAULT_AVATAR_HOST),
        user_agent=os.environ.get("WORDFEUD_USER_AGENT", DEFAULT_USER_AGENT),
        timeout_s=float(os.environ.get("WORDFEUD_TIMEOUT_S", DEFAULT_TIMEOUT_S)),
        accept_encoding=_flag(os.environ.get("WORDFEUD_ACCEPT_ENCODING"), default=True),
        session_id=os.environ.get("WORDFEUD_SESSION_ID") or None,
        session_file=Path(session_file) if session_file else None,
    )
