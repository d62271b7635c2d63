"""Pydantic models for host option lists."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PropertyOption(BaseModel):
    name: str
    value: str


class ListSearchResult(BaseModel):
    results: list[PropertyOption] = Field(default_factory=list)
