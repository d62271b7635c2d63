"""Tagged union for the prompt resource locator parameter."""

from __future__ import annotations

from typing import Any, Optional, TypeAlias

from pydantic import BaseModel, ConfigDict, Field


class PlainValue(BaseModel):
    """A literal identifier typed by the user."""

    value: Any = None


class SelectedValue(BaseModel):
    """A value picked from the searchable prompt list."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    rl: bool = Field(default=True, alias="__rl")
    value: Any = None
    mode: Optional[str] = None


ResourceReference: TypeAlias = PlainValue | SelectedValue
