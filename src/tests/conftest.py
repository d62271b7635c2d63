import json
from typing import Any

import httpx
import pytest

from genum_node.credentials import StaticCredentialProvider
from genum_node.models.credential import GenumCredential
from genum_node.models.node_enums import CREDENTIAL_NAME


class HttpxRequestRecorder:
    def __init__(self, responses: dict[tuple[str, str], Any], status_code: int = 200) -> None:
        self.responses = responses
        self.status_code = status_code
        self.requests: list[httpx.Request] = []
        self.bodies: list[dict[str, Any] | None] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        self.bodies.append(json.loads(request.content.decode("utf-8")) if request.content else None)
        payload = self.responses[(request.method, request.url.path)]
        if isinstance(payload, Exception):
            raise payload
        return httpx.Response(self.status_code, json=payload)


@pytest.fixture
def credentials() -> StaticCredentialProvider:
    return StaticCredentialProvider({CREDENTIAL_NAME: GenumCredential(api_token="test-token")})
