"""Normalization of prompt list responses."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from genum_node.models.prompt_record import PromptRecord


class ResponseShape(str, Enum):
    WRAPPED = "wrapped"
    ARRAY = "array"
    UNKNOWN = "unknown"


def classify_response(raw: Any) -> ResponseShape:
    if isinstance(raw, Mapping) and raw.get("prompts") is not None:
        return ResponseShape.WRAPPED
    if isinstance(raw, list):
        return ResponseShape.ARRAY
    return ResponseShape.UNKNOWN


def _matches(record: PromptRecord, needle: str) -> bool:
    return needle in record.name.lower() or needle in str(record.id).lower()


def normalize_prompts(raw: Any, filter: str | None = None) -> list[PromptRecord]:
    """
    Turns a bare array or a {"prompts": [...]} envelope into prompt records,
    keeping the API order. A non-empty filter keeps records whose name or id
    contains it, case-insensitively.
    """
    shape = classify_response(raw)
    if shape is ResponseShape.WRAPPED:
        entries = raw["prompts"]
    elif shape is ResponseShape.ARRAY:
        entries = raw
    else:
        return []

    records = [PromptRecord.model_validate(entry) for entry in entries]
    if filter:
        needle = filter.lower()
        records = [record for record in records if _matches(record, needle)]
    return records
