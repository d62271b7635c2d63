"""Item container shared by the host and the node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ExecutionItem:
    json: Any
    error: BaseException | None = None
    paired_item: int | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"json": self.json}
        if self.error is not None:
            out["error"] = {"type": type(self.error).__name__, "message": str(self.error)}
        if self.paired_item is not None:
            out["pairedItem"] = self.paired_item
        return out
