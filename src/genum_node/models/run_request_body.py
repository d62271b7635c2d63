"""Pydantic model for the prompt run request body."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class RunRequestBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    question: str
    productive: bool
    memory_key: Optional[str] = Field(default=None, alias="memoryKey")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
