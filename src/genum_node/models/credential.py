"""Pydantic model for Genum API credentials."""

from __future__ import annotations

from pydantic import BaseModel, Field


class GenumCredential(BaseModel):
    api_token: str = Field(default="", repr=False)
