"""httpx wrapper for talking to remote transform servers.

Why a wrapper:
- Standardises timeouts and headers for every outbound call.
- Makes testing easy: a client backed by `httpx.MockTransport` can be passed in.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.models import Entity, MaltegoMessage
from core.errors import MessageDecodeError, RemoteTransformError
from core.wire.decoder import decode
from core.wire.encoder import render

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the project defaults."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/xml, text/xml;q=0.9, */*;q=0.1",
        "Content-Type": "application/xml; charset=utf-8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def build_request(
    entity_type: str,
    value: str,
    *,
    settings: AppSettings | None = None,
    fields: dict[str, str] | None = None,
    properties: dict[str, str] | None = None,
) -> MaltegoMessage:
    """Build the single-entity request the client would send for `value`."""

    settings = settings or AppSettings()
    entity = Entity.new(entity_type, value, "0")
    for name, text in (properties or {}).items():
        entity.add_prop(name, text)
    return MaltegoMessage.new_request(
        [entity],
        soft_limit=settings.default_soft_limit,
        hard_limit=settings.default_hard_limit,
        fields=fields,
    )


async def run_remote_transform(
    url: str,
    message: MaltegoMessage,
    *,
    client: httpx.AsyncClient | None = None,
    settings: AppSettings | None = None,
) -> MaltegoMessage:
    """POST `message` to a transform endpoint and decode the reply.

    Raises:
        RemoteTransformError: non-2xx status or a body that is not a message.
        httpx.HTTPError: transport failures (connection, timeout).
    """

    body = render(message).encode("utf-8")
    owns_client = client is None
    client = client or build_async_client(settings)
    try:
        logger.debug("POST %s (%d bytes)", url, len(body))
        response = await client.post(url, content=body)
    finally:
        if owns_client:
            await client.aclose()

    if response.status_code >= 300:
        raise RemoteTransformError(
            f"{url} answered HTTP {response.status_code}: {response.text.strip()[:200]}",
            status_code=response.status_code,
        )

    try:
        return decode(response.content)
    except MessageDecodeError as exc:
        raise RemoteTransformError(f"{url} returned an invalid message: {exc}") from exc
