"""Resolution of the prompt resource locator into an identifier."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from genum_node.errors import InvalidPromptIdError
from genum_node.models.resource_reference import PlainValue, ResourceReference, SelectedValue

DISCRIMINATOR = "__rl"
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_reference(raw: Any) -> ResourceReference:
    if isinstance(raw, (PlainValue, SelectedValue)):
        return raw
    if isinstance(raw, Mapping) and DISCRIMINATOR in raw:
        return SelectedValue.model_validate(dict(raw))
    return PlainValue(value=raw)


def resolve_reference(raw: Any) -> str:
    """
    Returns the identifier carried by a plain value or a list selection.
    Empty or missing values resolve to "". Numeric-ness is not checked here.
    """
    reference = parse_reference(raw)
    if reference.value is None:
        return ""
    return str(reference.value)


def parse_prompt_id(identifier: str) -> int:
    """
    Parses a base-10 integer from the leading digits of an identifier,
    so "150" and "150abc" both give 150.
    """
    match = _LEADING_INT_RE.match(identifier)
    if match is None:
        raise InvalidPromptIdError(f"Prompt ID {identifier!r} is not a number.")
    return int(match.group(1))
