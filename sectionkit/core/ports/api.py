from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of a DELETE request against the content API."""

    ok: bool
    status_code: int | None = None
    error: str | None = None


class ApiClientPort(Protocol):
    async def delete(self, path: str, item_id: str) -> DeleteResult:
        """Issue DELETE <path>/<item_id>. May raise on transport errors."""
        ...
