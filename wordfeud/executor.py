from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx
from pydantic import ValidationError

from wordfeud.api.models import ResponseEnvelope
from wordfeud.config import Settings
from wordfeud.errors import DecodeError, TransportError
from wordfeud.session import CredentialStore

logger = logging.getLogger(__name__)

SESSION_COOKIE = "sessionid"
_SESSION_COOKIE_RE = re.compile(rf"\b{SESSION_COOKIE}=([^;]*)")


def _mask(credential: str) -> str:
    return credential[:4] + "..." if len(credential) > 4 else "..."


def session_id_from_headers(headers: httpx.Headers) -> str | None:
    """Return the session id set by a response, if any `Set-Cookie` header carries one."""

    for value in headers.get_list("set-cookie"):
        m = _SESSION_COOKIE_RE.search(value)
        if m and m.group(1):
            return m.group(1)
    return None


def session_id_from_response(response: httpx.Response) -> str | None:
    """Session id set anywhere along a redirect chain; the latest response wins."""

    session_id = None
    for hop in (*response.history, response):
        found = session_id_from_headers(hop.headers)
        if found is not None:
            session_id = found
    return session_id


@dataclass(slots=True)
class RequestExecutor:
    """Performs one POST round trip and decodes the `{status, content}` envelope.

    The executor does not interpret `status`: an error envelope is returned like
    any other. Only transport and decoding failures raise.
    """

    http: httpx.Client
    credentials: CredentialStore
    settings: Settings = field(default_factory=Settings)

    def url_for(self, path: str) -> str:
        # The service routes on the trailing slash.
        return f"{self.settings.base_url}{path.strip('/')}/"

    def headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": self.settings.user_agent,
        }
        if not self.settings.accept_encoding:
            headers["Accept-Encoding"] = "identity"

        credential = self.credentials.get()
        if credential:
            headers["Cookie"] = f"{SESSION_COOKIE}={credential}"
        return headers

    def execute(self, path: str, payload: Mapping[str, Any] | None = None) -> ResponseEnvelope:
        url = self.url_for(path)
        body = json.dumps(dict(payload) if payload is not None else {})

        # The store is the only source of credentials; never let httpx's jar add one.
        self.http.cookies.clear()

        logger.debug("POST %s payload_keys=%s", url, sorted(payload or {}))
        try:
            response = self.http.post(url, content=body.encode("utf-8"), headers=self.headers())
        except httpx.HTTPError as exc:
            raise TransportError(f"POST {url} failed: {exc}") from exc

        if response.status_code != 200:
            logger.debug("POST %s -> HTTP %s", url, response.status_code)
            raise TransportError(
                f"POST {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        session_id = session_id_from_response(response)
        if session_id is not None:
            self.credentials.set(session_id)
            logger.debug("Stored new session id %s", _mask(session_id))

        try:
            data = response.json()
        except ValueError as exc:
            raise DecodeError(f"Could not decode JSON from {url}") from exc

        if not isinstance(data, dict):
            raise DecodeError(f"Expected a JSON object from {url}, got {type(data).__name__}")

        try:
            envelope = ResponseEnvelope.model_validate(data)
        except ValidationError as exc:
            raise DecodeError(f"Malformed response envelope from {url}: {exc}") from exc

        logger.debug("POST %s -> HTTP 200 status=%s", url, envelope.status)
        return envelope
