from __future__ import annotations

import datetime
from typing import Any, Mapping

from activity_digest.core.constants import COMMIT_MARKER, COMMIT_WINDOW_DAYS_DEFAULT
from activity_digest.models import EventKind
from activity_digest.processing.types import EventSequence


def push_size(payload: Mapping[str, Any]) -> int:
    # size가 없거나 잘못된 값이면 commits 길이, 그것도 없으면 0
    size = payload.get("size")
    if isinstance(size, int) and not isinstance(size, bool) and size >= 0:
        return size
    commits = payload.get("commits")
    if isinstance(commits, list):
        return len(commits)
    return 0


class CommitAggregator:
    def __init__(self, *, window_days: int = COMMIT_WINDOW_DAYS_DEFAULT) -> None:
        self._window = datetime.timedelta(days=window_days)

    def count_commits(self, events: EventSequence, now: datetime.datetime) -> int:
        """now 기준 최근 window 안의 PushEvent 커밋 수 합계 (정확히 window 경과분은 제외)."""
        total = 0
        for event in events:
            if event.event_kind is not EventKind.PUSH:
                continue
            if now - event.timestamp < self._window:
                total += push_size(event.payload)
        return total

    @staticmethod
    def format_line(count: int) -> str:
        if count <= 0:
            return f"{COMMIT_MARKER} No commits in the last week"
        if count == 1:
            return f"{COMMIT_MARKER} Pushed 1 commit in the last week"
        return f"{COMMIT_MARKER} Pushed {count} commits in the last week"

    def summarize(self, events: EventSequence, now: datetime.datetime) -> str:
        return self.format_line(self.count_commits(events, now))
