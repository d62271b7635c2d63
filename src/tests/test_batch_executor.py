import json
from typing import Any

import httpx
import pytest

from conftest import HttpxRequestRecorder
from genum_node.batch_executor import BatchExecutor
from genum_node.credentials import StaticCredentialProvider
from genum_node.errors import InvalidPromptIdError, NodeOperationError, UnsupportedOperationError
from genum_node.host import StaticHost
from genum_node.models.client_spec import ClientSpec
from genum_node.models.execution_item import ExecutionItem
from genum_node.prompt_client import GenumClient

SPEC = ClientSpec(base_url="https://genum.test")


class RunResponder:
    """Answers run requests from a table keyed by the question text."""

    def __init__(self, answers: dict[str, Any]) -> None:
        self.answers = answers
        self.questions: list[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content.decode("utf-8"))
        self.questions.append(body["question"])
        answer = self.answers[body["question"]]
        if isinstance(answer, int):
            return httpx.Response(answer, json={"error": "failed"})
        return httpx.Response(200, json=answer)


def _run_host(
    items: list[dict[str, Any]],
    credentials: StaticCredentialProvider,
    *,
    continue_on_fail: bool,
    prompt_id: Any = "150",
) -> StaticHost:
    return StaticHost(
        items=[ExecutionItem(json=item) for item in items],
        parameters={
            "resource": "prompt",
            "operation": "run",
            "promptId": prompt_id,
            "question": lambda item, _index: item.json["q"],
            "memoryKey": "",
            "productive": True,
        },
        credentials=credentials,
        continue_on_fail=continue_on_fail,
    )


async def _execute(host: StaticHost, handler: Any) -> list[ExecutionItem]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        client = GenumClient(SPEC, http_client=http)
        return await BatchExecutor(host, client).execute()


@pytest.mark.anyio
async def test_array_responses_are_flattened(credentials: StaticCredentialProvider) -> None:
    responder = RunResponder({"a": [{"n": 1}, {"n": 2}], "b": {"n": 3}, "c": [{"n": 4}, {"n": 5}, {"n": 6}]})
    host = _run_host([{"q": "a"}, {"q": "b"}, {"q": "c"}], credentials, continue_on_fail=False)

    output = await _execute(host, responder)

    assert [item.json for item in output] == [{"n": 1}, {"n": 2}, {"n": 3}, {"n": 4}, {"n": 5}, {"n": 6}]
    assert all(item.error is None for item in output)
    assert responder.questions == ["a", "b", "c"]


@pytest.mark.anyio
async def test_continue_on_fail_isolates_failing_item(credentials: StaticCredentialProvider) -> None:
    responder = RunResponder({"a": {"n": 1}, "bad": 500, "c": {"n": 3}})
    host = _run_host([{"q": "a"}, {"q": "bad"}, {"q": "c"}], credentials, continue_on_fail=True)

    output = await _execute(host, responder)

    assert len(output) == 3
    assert output[0].json == {"n": 1}
    assert output[1].json == {"q": "bad"}
    assert isinstance(output[1].error, httpx.HTTPStatusError)
    assert output[1].paired_item == 1
    assert output[2].json == {"n": 3}


@pytest.mark.anyio
async def test_fail_fast_stops_at_failing_item(credentials: StaticCredentialProvider) -> None:
    responder = RunResponder({"a": {"n": 1}, "bad": 401, "c": {"n": 3}})
    host = _run_host([{"q": "a"}, {"q": "bad"}, {"q": "c"}], credentials, continue_on_fail=False)

    with pytest.raises(NodeOperationError) as excinfo:
        await _execute(host, responder)

    assert excinfo.value.item_index == 1
    assert isinstance(excinfo.value.__cause__, httpx.HTTPStatusError)
    assert responder.questions == ["a", "bad"]


@pytest.mark.anyio
async def test_existing_error_context_gets_item_index(credentials: StaticCredentialProvider) -> None:
    responder = RunResponder({"a": {"n": 1}})
    host = _run_host([{"q": "a"}], credentials, continue_on_fail=False, prompt_id={"__rl": True, "value": "abc"})

    with pytest.raises(InvalidPromptIdError) as excinfo:
        await _execute(host, responder)

    assert excinfo.value.context == {"item_index": 0}
    assert responder.questions == []


@pytest.mark.anyio
async def test_get_all_passes_raw_body_through_per_item(credentials: StaticCredentialProvider) -> None:
    body = {"prompts": [{"id": 1, "name": "A"}, {"id": 2, "name": "B"}]}
    recorder = HttpxRequestRecorder({("GET", "/api/v1/prompts"): body})
    host = StaticHost(
        items=[ExecutionItem(json={}), ExecutionItem(json={})],
        parameters={"resource": "prompt", "operation": "getAll"},
        credentials=credentials,
    )

    output = await _execute(host, recorder)

    assert [item.json for item in output] == [body, body]
    assert len(recorder.requests) == 2


@pytest.mark.anyio
async def test_get_all_bare_array_is_flattened(credentials: StaticCredentialProvider) -> None:
    recorder = HttpxRequestRecorder({("GET", "/api/v1/prompts"): [{"id": 1, "name": "A"}, {"id": 2, "name": "B"}]})
    host = StaticHost(
        items=[ExecutionItem(json={})],
        parameters={"resource": "prompt", "operation": "getAll"},
        credentials=credentials,
    )

    output = await _execute(host, recorder)

    assert [item.json["id"] for item in output] == [1, 2]


@pytest.mark.anyio
async def test_unsupported_operation_is_an_error(credentials: StaticCredentialProvider) -> None:
    recorder = HttpxRequestRecorder({})
    host = StaticHost(
        items=[ExecutionItem(json={"k": 1})],
        parameters={"resource": "prompt", "operation": "delete"},
        credentials=credentials,
        continue_on_fail=True,
    )

    output = await _execute(host, recorder)

    assert isinstance(output[0].error, UnsupportedOperationError)
    assert output[0].json == {"k": 1}
    assert output[0].to_dict()["pairedItem"] == 0
    assert recorder.requests == []


@pytest.mark.anyio
async def test_empty_batch_produces_no_output(credentials: StaticCredentialProvider) -> None:
    host = StaticHost(items=[], parameters={}, credentials=credentials)
    assert await _execute(host, HttpxRequestRecorder({})) == []
