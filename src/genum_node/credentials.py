"""Credential providers for the Genum API."""

from __future__ import annotations

import logging
import os
from typing import Any

from genum_node.errors import CredentialsNotFoundError
from genum_node.models.client_spec import ClientSpec
from genum_node.models.credential import GenumCredential
from genum_node.models.node_enums import CREDENTIAL_NAME
from genum_node.prompt_client import GenumClient

logger = logging.getLogger(__name__)


class CredentialProvider:
    async def get_credentials(self, name: str) -> GenumCredential:
        raise NotImplementedError("CredentialProvider.get_credentials must be implemented by subclasses.")


class StaticCredentialProvider(CredentialProvider):
    def __init__(self, credentials: dict[str, GenumCredential]) -> None:
        self._credentials = credentials

    async def get_credentials(self, name: str) -> GenumCredential:
        credential = self._credentials.get(name)
        if credential is None:
            raise CredentialsNotFoundError(f"No credentials configured for {name!r}.")
        return credential


class EnvCredentialProvider(CredentialProvider):
    def __init__(self, spec: ClientSpec | None = None) -> None:
        self._spec = spec or ClientSpec()

    async def get_credentials(self, name: str) -> GenumCredential:
        if name != CREDENTIAL_NAME:
            raise CredentialsNotFoundError(f"No credentials configured for {name!r}.")
        token = os.environ.get(self._spec.api_token_env)
        if not token:
            raise CredentialsNotFoundError(f"Environment variable {self._spec.api_token_env} is not set.")
        return GenumCredential(api_token=token)


async def verify_credentials(client: GenumClient, credential: GenumCredential) -> Any:
    """Issues the prompt listing request to check that the token is accepted."""
    result = await client.list_prompts(credential.api_token)
    logger.info("Genum credentials verified against %s", client.spec.base_url)
    return result
