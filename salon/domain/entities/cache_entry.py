from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    key: str
    data: Any = None
    loading: bool = False
    error: bool = False
    fetched_at: float | None = None  # monotonic seconds of the last successful fetch

    @property
    def has_data(self) -> bool:
        return self.data is not None
