"""Per-item execution of the Genum node over an input batch."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, TypeAlias

from genum_node.errors import NodeOperationError, UnsupportedOperationError
from genum_node.host import ExecutionHost
from genum_node.models.execution_item import ExecutionItem
from genum_node.models.node_enums import CREDENTIAL_NAME, Operation, Resource
from genum_node.models.run_request_body import RunRequestBody
from genum_node.prompt_client import GenumClient
from genum_node.reference_resolver import parse_prompt_id, resolve_reference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ItemSuccess:
    index: int
    items: list[ExecutionItem]


@dataclass(frozen=True)
class ItemFailure:
    index: int
    item: ExecutionItem
    error: Exception


ItemResult: TypeAlias = ItemSuccess | ItemFailure


def build_run_body(prompt_id: Any, question: str, memory_key: str | None, productive: bool) -> RunRequestBody:
    identifier = resolve_reference(prompt_id)
    return RunRequestBody(
        id=parse_prompt_id(identifier),
        question=question,
        productive=productive,
        memory_key=memory_key or None,
    )


def flatten_response(response: Any) -> list[ExecutionItem]:
    if isinstance(response, list):
        return [ExecutionItem(json=element) for element in response]
    return [ExecutionItem(json=response)]


def attach_item_index(error: Exception, index: int) -> Exception:
    context = getattr(error, "context", None)
    if isinstance(context, dict):
        context["item_index"] = index
        return error
    return NodeOperationError(error, item_index=index)


class BatchExecutor:
    def __init__(self, host: ExecutionHost, client: GenumClient) -> None:
        self._host: ExecutionHost = host
        self._client: GenumClient = client

    async def execute(self) -> list[ExecutionItem]:
        items = self._host.get_input_data()
        if not items:
            return []
        resource = self._host.get_node_parameter("resource", 0, Resource.PROMPT.value)
        operation = self._host.get_node_parameter("operation", 0, Operation.GET_ALL.value)
        continue_on_fail = self._host.continue_on_fail()
        logger.debug("Executing %s:%s over %d item(s)", resource, operation, len(items))

        output: list[ExecutionItem] = []
        for index, item in enumerate(items):
            result = await self._run_item(index, item, resource, operation)
            if isinstance(result, ItemSuccess):
                output.extend(result.items)
                continue
            if not continue_on_fail:
                raise attach_item_index(result.error, result.index)
            logger.warning("Item %d failed, continuing: %s", result.index, result.error)
            output.append(ExecutionItem(json=result.item.json, error=result.error, paired_item=result.index))
        return output

    async def _run_item(self, index: int, item: ExecutionItem, resource: str, operation: str) -> ItemResult:
        try:
            response = await self._dispatch(index, resource, operation)
        except Exception as e:
            return ItemFailure(index=index, item=item, error=e)
        return ItemSuccess(index=index, items=flatten_response(response))

    async def _dispatch(self, index: int, resource: str, operation: str) -> Any:
        if resource != Resource.PROMPT.value:
            raise UnsupportedOperationError(f"The resource {resource!r} is not supported.")
        if operation == Operation.GET_ALL.value:
            credential = await self._host.get_credentials(CREDENTIAL_NAME)
            return await self._client.list_prompts(credential.api_token)
        if operation == Operation.RUN.value:
            credential = await self._host.get_credentials(CREDENTIAL_NAME)
            body = build_run_body(
                self._host.get_node_parameter("promptId", index),
                self._host.get_node_parameter("question", index, ""),
                self._host.get_node_parameter("memoryKey", index, ""),
                self._host.get_node_parameter("productive", index, True),
            )
            return await self._client.run_prompt(credential.api_token, body)
        raise UnsupportedOperationError(f"The operation {operation!r} is not supported for resource {resource!r}.")
