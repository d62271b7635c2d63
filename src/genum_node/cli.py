"""CLI entrypoint."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from genum_node.batch_executor import BatchExecutor
from genum_node.credentials import EnvCredentialProvider, verify_credentials
from genum_node.io_utils import build_host, dump_items, load_batch
from genum_node.models.batch_spec import BatchSpec
from genum_node.models.client_spec import ClientSpec
from genum_node.models.node_enums import CREDENTIAL_NAME, Operation
from genum_node.options import search_prompts
from genum_node.prompt_client import GenumClient


def _client_spec(args: argparse.Namespace, base: ClientSpec | None = None) -> ClientSpec:
    spec = base or ClientSpec()
    updates: dict[str, Any] = {}
    if args.base_url:
        updates["base_url"] = args.base_url
    if args.token_env:
        updates["api_token_env"] = args.token_env
    return spec.model_copy(update=updates)


async def run_batch(spec: BatchSpec) -> str:
    credentials = EnvCredentialProvider(spec.client)
    async with GenumClient(spec.client) as client:
        items = await BatchExecutor(build_host(spec, credentials), client).execute()
    return dump_items(items)


async def run_search(spec: ClientSpec, term: str | None) -> str:
    async with GenumClient(spec) as client:
        result = await search_prompts(EnvCredentialProvider(spec), client, term)
    return result.model_dump_json(indent=2)


async def run_verify(spec: ClientSpec) -> str:
    credential = await EnvCredentialProvider(spec).get_credentials(CREDENTIAL_NAME)
    async with GenumClient(spec) as client:
        await verify_credentials(client, credential)
    return json.dumps({"verified": True, "base_url": spec.base_url})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="genum-node")
    parser.add_argument("--base-url", type=str, default=None)
    parser.add_argument("--token-env", type=str, default=None, help="Environment variable holding the API token")
    parser.add_argument("--log-level", type=str, default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List prompts")
    list_cmd.add_argument("--search", type=str, default=None)

    run_cmd = sub.add_parser("run", help="Run a prompt")
    run_cmd.add_argument("--prompt-id", type=str, required=True)
    run_cmd.add_argument("--question", type=str, required=True)
    run_cmd.add_argument("--memory-key", type=str, default="")
    run_cmd.add_argument("--no-productive", action="store_true")
    run_cmd.add_argument("--continue-on-fail", action="store_true")

    exec_cmd = sub.add_parser("execute", help="Execute a YAML batch file")
    exec_cmd.add_argument("batch", type=str)

    sub.add_parser("verify", help="Check that the API token is accepted")
    return parser


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    # Async entrypoint
    import anyio

    if args.command == "list":
        out = anyio.run(run_search, _client_spec(args), args.search)
    elif args.command == "run":
        spec = BatchSpec(
            operation=Operation.RUN.value,
            continue_on_fail=args.continue_on_fail,
            parameters={
                "promptId": args.prompt_id,
                "question": args.question,
                "memoryKey": args.memory_key,
                "productive": not args.no_productive,
            },
            client=_client_spec(args),
        )
        out = anyio.run(run_batch, spec)
    elif args.command == "execute":
        spec = load_batch(Path(args.batch))
        out = anyio.run(run_batch, spec.model_copy(update={"client": _client_spec(args, spec.client)}))
    else:
        out = anyio.run(run_verify, _client_spec(args))
    print(out)
