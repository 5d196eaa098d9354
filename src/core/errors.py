"""Exception hierarchy.

Rules:
- Decode problems are raised to the boundary (dispatch / CLI).
- Marshal and escape problems never raise; they are logged where they happen.
- Domain failures of a transform are raised as `TransformError` and turned into
  an exception envelope by the dispatcher.
"""

from __future__ import annotations


class TrxWireError(Exception):
    """Base class for every error raised by trxwire."""


class MessageDecodeError(TrxWireError, ValueError):
    """The inbound payload is not a well-formed `MaltegoMessage`."""


class RegistryError(TrxWireError):
    """Invalid use of the transform registry (duplicate or unknown route)."""


class RemoteTransformError(TrxWireError):
    """A remote transform server answered with something other than a message."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransformError(TrxWireError):
    """Raised by transform handlers to report a failure to the client.

    The dispatcher renders it as a `MaltegoTransformExceptionMessage` carrying
    `code`.
    """

    def __init__(self, message: str, code: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.code = code
