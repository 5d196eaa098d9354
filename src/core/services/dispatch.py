"""Request dispatch at the transport boundary.

Takes a raw request body, validates it the way the client expects, runs a
handler on the decoded envelope and produces the status/body pair the
transport writes back. The transport itself (HTTP server, TLS) is not part of
this package.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.domain.constants import UIMessageType
from core.errors import MessageDecodeError, TransformError
from core.interfaces.transform import TransformHandler
from core.wire.decoder import decode
from core.wire.encoder import render, render_as_exception

logger = logging.getLogger(__name__)

MALFORMED_REQUEST = "malformed RequestMessage"
POST_REQUIRED = "please send a POST request to this endpoint"
EMPTY_BODY = "empty body received. please add data"
COMPLETE = "complete"


@dataclass
class DispatchResult:
    status: int
    body: str
    content_type: str = "text/plain; charset=utf-8"

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def _xml(body: str) -> DispatchResult:
    return DispatchResult(status=200, body=body, content_type="application/xml; charset=utf-8")


def dispatch(
    body: bytes | str,
    handler: TransformHandler,
    *,
    method: str = "POST",
    dump_messages: bool = False,
) -> DispatchResult:
    """Run `handler` for one request body.

    Rules:
    - Only POST carries a transform request; anything else gets a notice.
    - The request must decode and carry exactly one entity, otherwise 400.
    - A `TransformError` from the handler becomes an exception envelope.
    - Successful runs get a final "complete" Inform message.
    """

    if method.upper() != "POST":
        return DispatchResult(status=200, body=POST_REQUIRED)

    if not body:
        return DispatchResult(status=200, body=EMPTY_BODY)

    if dump_messages:
        logger.debug("REQUEST\n%s", body.decode("utf-8", "replace") if isinstance(body, bytes) else body)

    try:
        message = decode(body)
    except MessageDecodeError as exc:
        logger.warning("Failed to decode request: %s", exc)
        return DispatchResult(status=400, body=str(exc))

    request = message.request
    if request is None or len(request.entities) != 1:
        if request is None:
            logger.warning("No request payload provided")
        else:
            logger.warning("Invalid number of entities: %d", len(request.entities))
        return DispatchResult(status=400, body=MALFORMED_REQUEST)

    try:
        handler(message)
    except TransformError as exc:
        logger.info("Transform failed: %s", exc.message)
        message.add_exception(exc.message, exc.code)

    if message.exception is not None:
        output = render_as_exception(message)
    else:
        message.add_ui_message(COMPLETE, UIMessageType.INFORM)
        output = render(message)

    if dump_messages:
        logger.debug("RESPONSE\n%s", output)

    return _xml(output)
