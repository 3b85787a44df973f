from __future__ import annotations

import httpx

from wordfeud.config import Settings


def create_http_client(settings: Settings, *, transport: httpx.BaseTransport | None = None) -> httpx.Client:
    # `transport` lets tests swap in httpx.MockTransport.
    return httpx.Client(
        timeout=settings.timeout_s,
        follow_redirects=True,
        transport=transport,
    )
