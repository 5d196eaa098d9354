"""Contract for transform handlers.

Why Protocol:
- Any callable taking the decoded envelope qualifies (plain functions,
  bound methods, callable objects) without inheriting from a base class.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import MaltegoMessage


@runtime_checkable
class TransformHandler(Protocol):
    """Transform entry point.

    Design rules:
    - Reads the inbound entity from `message.request`.
    - Populates the same envelope (`add_entity`, `add_ui_message`,
      `add_exception`) instead of returning a new one.
    - Raises `core.errors.TransformError` for failures the user should see.
    """

    def __call__(self, message: MaltegoMessage) -> None:
        ...
