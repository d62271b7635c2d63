"""Pydantic model for a prompt returned by the remote API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PromptRecord(BaseModel):
    # Fields beyond id and name are opaque and kept as-is.
    model_config = ConfigDict(extra="allow")

    id: str | int
    name: str

    @property
    def option_label(self) -> str:
        return f"{self.name} (ID: {self.id})"
