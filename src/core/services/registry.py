"""Registry of transform routes.

Built once at start-up, then handed to whatever serves requests. Reads are
safe from concurrent workers as long as registration finished before serving
started.
"""

from __future__ import annotations

import logging

from core.errors import RegistryError
from core.interfaces.transform import TransformHandler
from core.services.dispatch import DispatchResult, dispatch

logger = logging.getLogger(__name__)

ROUTE_PREFIX = "/run/"


class TransformRegistry:
    """Named transform handlers, in registration order."""

    def __init__(self, *, dump_messages: bool = False) -> None:
        self._handlers: dict[str, TransformHandler] = {}
        self._dump_messages = dump_messages

    def register(self, name: str, handler: TransformHandler) -> None:
        if not name or "/" in name:
            raise RegistryError(f"invalid transform name: {name!r}")
        if name in self._handlers:
            raise RegistryError(f"transform already registered: {name}")
        self._handlers[name] = handler
        logger.debug("Registered transform %s", name)

    def get(self, name: str) -> TransformHandler:
        try:
            return self._handlers[name]
        except KeyError:
            raise RegistryError(f"unknown transform: {name}") from None

    def names(self) -> list[str]:
        return list(self._handlers)

    def routes(self) -> list[str]:
        return [ROUTE_PREFIX + name for name in self._handlers]

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def home_page(self) -> str:
        """HTML greeting listing every route."""

        routes = "".join(route + "<br>" for route in self.routes())
        return "Hi there! You've reached a Maltego transform server.<br><br>routes:<br>" + routes

    def dispatch(self, name: str, body: bytes | str, *, method: str = "POST") -> DispatchResult:
        """Dispatch `body` to the transform registered as `name` (404 if unknown)."""

        if name not in self._handlers:
            return DispatchResult(status=404, body=f"unknown transform: {name}")
        return dispatch(body, self._handlers[name], method=method, dump_messages=self._dump_messages)
