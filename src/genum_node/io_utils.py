"""Batch file loading and output helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from genum_node.credentials import CredentialProvider
from genum_node.host import StaticHost
from genum_node.models.batch_spec import BatchSpec
from genum_node.models.execution_item import ExecutionItem


def load_batch(path: Path) -> BatchSpec:
    if not path.exists():
        raise FileNotFoundError(path)
    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Batch file {path} must contain a mapping.")
    return BatchSpec.model_validate(raw)


def build_host(spec: BatchSpec, credentials: CredentialProvider) -> StaticHost:
    parameters: dict[str, Any] = dict(spec.parameters)
    parameters["resource"] = spec.resource
    parameters["operation"] = spec.operation
    return StaticHost(
        items=[ExecutionItem(json=item) for item in spec.items],
        parameters=parameters,
        credentials=credentials,
        continue_on_fail=spec.continue_on_fail,
    )


def dump_items(items: list[ExecutionItem]) -> str:
    return json.dumps([item.to_dict() for item in items], indent=2, default=str)
