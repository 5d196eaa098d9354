"""Output helpers for transforms invoked as local processes.

The client reads the rendered envelope from stdout and treats a non-zero exit
code as a crash of the program, so failures of the transform itself still exit
with 0.
"""

from __future__ import annotations

import logging
import sys
from typing import NoReturn, TextIO

from core.domain.constants import UIMessageType
from core.domain.models import MaltegoMessage
from core.wire.encoder import render

logger = logging.getLogger(__name__)


def emit(message: MaltegoMessage, *, stream: TextIO | None = None) -> None:
    """Write the rendered envelope followed by a newline."""

    stream = stream or sys.stdout
    stream.write(render(message) + "\n")
    stream.flush()


def die(err: str, msg: str, *, stream: TextIO | None = None) -> NoReturn:
    """Report a fatal error to the client and terminate with exit code 0."""

    message = MaltegoMessage()
    message.add_ui_message(f"{msg}: {err}", UIMessageType.FATAL)
    emit(message, stream=stream)
    logger.error("%s %s", msg, err)
    raise SystemExit(0)
