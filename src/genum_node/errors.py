"""Exception types raised by the Genum node."""

from __future__ import annotations

from typing import Any


class GenumNodeError(Exception):
    """Base exception for all Genum node errors."""


class NodeOperationError(GenumNodeError):
    """Error attributed to the node, with structured context such as ``item_index``."""

    def __init__(
        self,
        error: BaseException | str,
        *,
        item_index: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(str(error))
        self.context: dict[str, Any] = dict(context or {})
        if item_index is not None:
            self.context["item_index"] = item_index
        if isinstance(error, BaseException):
            self.__cause__ = error

    @property
    def item_index(self) -> int | None:
        return self.context.get("item_index")


class UnsupportedOperationError(NodeOperationError):
    """Raised for a resource/operation pair the node does not implement."""


class InvalidPromptIdError(NodeOperationError):
    """Raised when a prompt reference does not parse as an integer ID."""


class CredentialsNotFoundError(GenumNodeError):
    """Raised when a credential cannot be supplied for a credential name."""
