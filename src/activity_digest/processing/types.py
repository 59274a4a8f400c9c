from __future__ import annotations

from typing import Callable, Protocol, Sequence

from activity_digest.models import ActivityEvent

LogFunc = Callable[[str], None]


class EventSource(Protocol):
    def list_recent_events(self, username: str, page_size: int) -> list[ActivityEvent]:
        ...


class SnippetStore(Protocol):
    def update(self, gist_id: str, content: str) -> None:
        ...


EventSequence = Sequence[ActivityEvent]
