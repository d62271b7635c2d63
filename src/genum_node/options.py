"""Prompt option lists for the host's parameter pickers."""

from __future__ import annotations

import logging

from genum_node.credentials import CredentialProvider
from genum_node.models.node_enums import CREDENTIAL_NAME
from genum_node.models.prompt_record import PromptRecord
from genum_node.models.property_option import ListSearchResult, PropertyOption
from genum_node.prompt_client import GenumClient
from genum_node.response_normalizer import normalize_prompts

logger = logging.getLogger(__name__)


def to_option(record: PromptRecord) -> PropertyOption:
    return PropertyOption(name=record.option_label, value=str(record.id))


async def load_prompt_options(credentials: CredentialProvider, client: GenumClient) -> list[PropertyOption]:
    credential = await credentials.get_credentials(CREDENTIAL_NAME)
    raw = await client.list_prompts(credential.api_token)
    return [to_option(record) for record in normalize_prompts(raw)]


async def search_prompts(
    credentials: CredentialProvider,
    client: GenumClient,
    filter: str | None = None,
) -> ListSearchResult:
    credential = await credentials.get_credentials(CREDENTIAL_NAME)
    raw = await client.list_prompts(credential.api_token)
    records = normalize_prompts(raw, filter)
    logger.debug("Prompt search %r matched %d prompt(s)", filter, len(records))
    return ListSearchResult(results=[to_option(record) for record in records])
