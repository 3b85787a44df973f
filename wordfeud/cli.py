"""Command line access to a few read-mostly Wordfeud calls.

Usage:
    wordfeud login-email you@example.com secret
    wordfeud games

Configuration comes from `WORDFEUD_*` environment variables (a `.env` file in
the working directory is honoured). Set WORDFEUD_SESSION_FILE so a login
survives between invocations.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from wordfeud.client import WordfeudClient
from wordfeud.config import load_env, settings_from_env
from wordfeud.errors import WordfeudError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordfeud", description="Wordfeud API client")
    parser.add_argument("--debug", action="store_true", help="Trace requests and responses")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("login-email", help="Log in with an email address")
    p.add_argument("email")
    p.add_argument("password")

    p = sub.add_parser("login-id", help="Log in with a user id")
    p.add_argument("user_id", type=int)
    p.add_argument("password")

    sub.add_parser("logout", help="Forget the stored session")
    sub.add_parser("games", help="List your games")
    sub.add_parser("status", help="Show pending invites and current games")
    sub.add_parser("notifications", help="List notifications")

    p = sub.add_parser("chat", help="Show the chat messages of a game")
    p.add_argument("game_id", type=int)

    p = sub.add_parser("avatar-url", help="Print the avatar URL of a user")
    p.add_argument("user_id", type=int)
    p.add_argument("--size", type=int, default=60)

    return parser


def run_command(client: WordfeudClient, args: argparse.Namespace) -> Any:
    match args.command:
        case "login-email":
            client.login_by_email(args.email, args.password)
            return {"session_id": client.session_id}
        case "login-id":
            client.login_by_id(args.user_id, args.password)
            return {"session_id": client.session_id}
        case "logout":
            client.logout()
            return {"session_id": None}
        case "games":
            return client.get_games()
        case "status":
            return client.get_status()
        case "notifications":
            return client.get_notifications()
        case "chat":
            return client.get_chat_messages(args.game_id)
        case "avatar-url":
            return client.avatar_url(args.user_id, args.size)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    load_env()
    settings = settings_from_env()

    try:
        with WordfeudClient(settings=settings) as client:
            result = run_command(client, args)
    except WordfeudError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0
