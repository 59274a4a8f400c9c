from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from activity_digest.core.errors import MalformedEventError
from activity_digest.utils import parse_datetime_utc


class EventKind(str, Enum):
    PUSH = "PushEvent"
    WATCH = "WatchEvent"
    ISSUE_COMMENT = "IssueCommentEvent"
    CREATE = "CreateEvent"
    FORK = "ForkEvent"
    ISSUES = "IssuesEvent"
    PULL_REQUEST = "PullRequestEvent"

    @classmethod
    def parse(cls, value: str) -> EventKind | None:
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class ActivityEvent:
    """이벤트 API 항목 하나. 수신 후 변경하지 않는다."""

    kind: str
    timestamp: datetime.datetime
    repository_name: str
    payload: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # payload는 읽기 전용 뷰로 고정
        if not isinstance(self.payload, MappingProxyType):
            object.__setattr__(self, "payload", MappingProxyType(dict(self.payload or {})))

    @property
    def event_kind(self) -> EventKind | None:
        return EventKind.parse(self.kind)

    @classmethod
    def from_api(cls, raw: Any) -> ActivityEvent:
        """GitHub 이벤트 JSON 객체 하나를 ActivityEvent로 변환.

        type / created_at / repo.name 중 하나라도 없거나 해석할 수 없으면
        MalformedEventError를 던진다.
        """
        if not isinstance(raw, dict):
            raise MalformedEventError(f"이벤트 형식 아님: {type(raw).__name__}")
        kind = raw.get("type")
        if not isinstance(kind, str) or not kind:
            raise MalformedEventError("type 누락")
        timestamp = parse_datetime_utc(raw.get("created_at") or "")
        if timestamp is None:
            raise MalformedEventError(f"created_at 해석 실패: {raw.get('created_at')!r}")
        repo = raw.get("repo")
        repo_name = repo.get("name") if isinstance(repo, dict) else None
        if not isinstance(repo_name, str) or not repo_name:
            raise MalformedEventError("repo.name 누락")
        payload = raw.get("payload")
        return cls(
            kind=kind,
            timestamp=timestamp,
            repository_name=repo_name,
            payload=payload if isinstance(payload, dict) else {},
        )
