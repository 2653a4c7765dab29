from __future__ import annotations

from abc import ABC, abstractmethod


class NotifierPort(ABC):
    """Transient user-facing notices (the toast area of a view)."""

    @abstractmethod
    def success(self, text: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def error(self, text: str) -> None:
        raise NotImplementedError
