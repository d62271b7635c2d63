"""Public package exports."""

from genum_node.batch_executor import BatchExecutor
from genum_node.credentials import CredentialProvider, EnvCredentialProvider, StaticCredentialProvider
from genum_node.host import ExecutionHost, StaticHost
from genum_node.options import load_prompt_options, search_prompts
from genum_node.prompt_client import GenumClient
from genum_node.reference_resolver import resolve_reference
from genum_node.response_normalizer import normalize_prompts

__all__ = [
    "BatchExecutor",
    "CredentialProvider",
    "EnvCredentialProvider",
    "ExecutionHost",
    "GenumClient",
    "StaticCredentialProvider",
    "StaticHost",
    "load_prompt_options",
    "normalize_prompts",
    "resolve_reference",
    "search_prompts",
]
