from __future__ import annotations

import logging
from dataclasses import dataclass

from salon.application.ports.notifier import NotifierPort


@dataclass(frozen=True)
class Notice:
    level: str  # "success" | "error"
    text: str


class MemoryNotifier(NotifierPort):
    """Keeps the most recent notices for a view to render."""

    def __init__(self, limit: int = 20) -> None:
        self._notices: list[Notice] = []
        self._limit = limit
        self._logger = logging.getLogger(__name__)

    @property
    def notices(self) -> list[Notice]:
        return list(self._notices)

    @property
    def last(self) -> Notice | None:
        return self._notices[-1] if self._notices else None

    def success(self, text: str) -> None:
        self._push(Notice(level="success", text=text))

    def error(self, text: str) -> None:
        self._push(Notice(level="error", text=text))

    def dismiss_all(self) -> None:
        self._notices.clear()

    def _push(self, notice: Notice) -> None:
        self._notices.append(notice)
        if len(self._notices) > self._limit:
            self._notices = self._notices[-self._limit :]
        self._logger.debug("Notice", extra={"status": notice.level, "reason": notice.text})
