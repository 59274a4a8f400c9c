from __future__ import annotations

from typing import Any, Callable, Mapping

from activity_digest.core.constants import EVENT_MARKERS
from activity_digest.core.errors import MalformedEventError
from activity_digest.models import ActivityEvent, EventKind
from activity_digest.utils import capitalize_first


def _require(payload: Mapping[str, Any], *path: str) -> Any:
    # payload에서 중첩 키를 꺼낸다. 없으면 MalformedEventError
    node: Any = payload
    for key in path:
        if not isinstance(node, Mapping) or node.get(key) is None:
            raise MalformedEventError(f"payload.{'.'.join(path)} 누락")
        node = node[key]
    return node


class EventFormatter:
    """이벤트 종류별 한 줄 요약 규칙.

    지원 종류는 EventKind 기준으로 고정되어 있으며, 여기에 없는 종류
    (PushEvent 포함)는 다이제스트 본문에서 제외된다.
    """

    def __init__(self) -> None:
        self._renderers: dict[EventKind, Callable[[ActivityEvent], str]] = {
            EventKind.WATCH: self.format_watch,
            EventKind.ISSUE_COMMENT: self.format_issue_comment,
            EventKind.CREATE: self.format_create,
            EventKind.FORK: self.format_fork,
            EventKind.ISSUES: self.format_issues,
            EventKind.PULL_REQUEST: self.format_pull_request,
        }

    @property
    def kinds(self) -> frozenset[EventKind]:
        return frozenset(self._renderers)

    def supports(self, event: ActivityEvent) -> bool:
        return event.event_kind in self._renderers

    def render(self, event: ActivityEvent) -> str:
        kind = event.event_kind
        if kind not in self._renderers:
            raise MalformedEventError(f"지원하지 않는 이벤트: {event.kind}")
        return self._renderers[kind](event)

    def format_watch(self, event: ActivityEvent) -> str:
        return f"{EVENT_MARKERS['WatchEvent']} Starred repo: {event.repository_name}"

    def format_issue_comment(self, event: ActivityEvent) -> str:
        number = _require(event.payload, "issue", "number")
        return f"{EVENT_MARKERS['IssueCommentEvent']} Commented on #{number} in {event.repository_name}"

    def format_create(self, event: ActivityEvent) -> str:
        if event.payload.get("ref_type") == "repository":
            return f"{EVENT_MARKERS['CreateEventRepository']} Created new repo: {event.repository_name}"
        ref = _require(event.payload, "ref")
        return f"{EVENT_MARKERS['CreateEventRef']} Created branch {ref} in repo: {event.repository_name}"

    def format_fork(self, event: ActivityEvent) -> str:
        return f"{EVENT_MARKERS['ForkEvent']} Forked repo: {event.repository_name}"

    def format_issues(self, event: ActivityEvent) -> str:
        action = _require(event.payload, "action")
        number = _require(event.payload, "issue", "number")
        return (
            f"{EVENT_MARKERS['IssuesEvent']} {capitalize_first(str(action))} issue "
            f"#{number} in {event.repository_name}"
        )

    def format_pull_request(self, event: ActivityEvent) -> str:
        number = _require(event.payload, "pull_request", "number")
        if event.payload["pull_request"].get("merged"):
            return f"{EVENT_MARKERS['PullRequestMerged']} Merged PR #{number} in {event.repository_name}"
        action = str(_require(event.payload, "action"))
        marker = EVENT_MARKERS["PullRequestOpened"] if action == "opened" else EVENT_MARKERS["PullRequestOther"]
        return f"{marker} {capitalize_first(action)} PR #{number} in {event.repository_name}"
