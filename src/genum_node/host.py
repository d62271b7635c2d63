"""Host runtime surface consumed by the node."""

from __future__ import annotations

from typing import Any, Callable

from genum_node.credentials import CredentialProvider
from genum_node.models.credential import GenumCredential
from genum_node.models.execution_item import ExecutionItem

# A parameter may be a constant or an expression evaluated against (item, index).
ParameterExpression = Callable[[ExecutionItem, int], Any]

_MISSING: Any = object()


class ExecutionHost:
    def get_input_data(self) -> list[ExecutionItem]:
        raise NotImplementedError("ExecutionHost.get_input_data must be implemented by subclasses.")

    def get_node_parameter(self, name: str, item_index: int, default: Any = _MISSING) -> Any:
        raise NotImplementedError("ExecutionHost.get_node_parameter must be implemented by subclasses.")

    def continue_on_fail(self) -> bool:
        raise NotImplementedError("ExecutionHost.continue_on_fail must be implemented by subclasses.")

    async def get_credentials(self, name: str) -> GenumCredential:
        raise NotImplementedError("ExecutionHost.get_credentials must be implemented by subclasses.")


class StaticHost(ExecutionHost):
    """In-memory host used by the command line and by tests."""

    def __init__(
        self,
        *,
        items: list[ExecutionItem],
        parameters: dict[str, ParameterExpression | Any],
        credentials: CredentialProvider,
        continue_on_fail: bool = False,
    ) -> None:
        self._items = items
        self._parameters = parameters
        self._credentials = credentials
        self._continue_on_fail = continue_on_fail

    def get_input_data(self) -> list[ExecutionItem]:
        return self._items

    def get_node_parameter(self, name: str, item_index: int, default: Any = _MISSING) -> Any:
        if name not in self._parameters:
            if default is not _MISSING:
                return default
            raise KeyError(f"Parameter {name!r} is not set.")
        value = self._parameters[name]
        if callable(value):
            return value(self._items[item_index], item_index)
        return value

    def continue_on_fail(self) -> bool:
        return self._continue_on_fail

    async def get_credentials(self, name: str) -> GenumCredential:
        return await self._credentials.get_credentials(name)
