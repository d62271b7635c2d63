"""HTTP client for the Genum prompts API."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from genum_node.models.client_spec import ClientSpec
from genum_node.models.run_request_body import RunRequestBody

logger = logging.getLogger(__name__)

PROMPTS_PATH = "/api/v1/prompts"
RUN_PATH = "/api/v1/prompts/run"


def build_headers(token: str) -> dict[str, str]:
    return {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "Authorization": f"Bearer {token}",
    }


class GenumClient:
    """
    Thin pass-through over httpx. Non-2xx responses raise httpx.HTTPStatusError
    and transport failures propagate as raised by httpx; nothing is retried.
    """

    def __init__(self, spec: ClientSpec | None = None, http_client: httpx.AsyncClient | None = None) -> None:
        self.spec: ClientSpec = spec or ClientSpec()
        self._owns_client: bool = http_client is None
        self._http: httpx.AsyncClient = http_client or httpx.AsyncClient(timeout=self.spec.timeout)

    def _url(self, path: str) -> str:
        return self.spec.base_url.rstrip("/") + path

    async def list_prompts(self, token: str) -> Any:
        url = self._url(PROMPTS_PATH)
        logger.debug("GET %s", url)
        response = await self._http.get(url, headers=build_headers(token))
        response.raise_for_status()
        return response.json()

    async def run_prompt(self, token: str, body: RunRequestBody) -> Any:
        url = self._url(RUN_PATH)
        logger.debug("POST %s for prompt %s", url, body.id)
        response = await self._http.post(url, headers=build_headers(token), json=body.to_payload())
        response.raise_for_status()
        return response.json()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "GenumClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
