from __future__ import annotations

import datetime

import pytest

from activity_digest.core.config import RunConfig
from activity_digest.core.errors import FetchError
from activity_digest.models import ActivityEvent
from activity_digest.processing.pipeline import build_default_pipeline

NOW = datetime.datetime(2024, 1, 10, 12, 0, tzinfo=datetime.timezone.utc)


class _Source:
    def __init__(self, events: list[ActivityEvent] | None = None, error: Exception | None = None) -> None:
        self.events = events or []
        self.error = error
        self.calls: list[tuple[str, int]] = []

    def list_recent_events(self, username: str, page_size: int) -> list[ActivityEvent]:
        self.calls.append((username, page_size))
        if self.error:
            raise self.error
        return self.events


def _config(**overrides: object) -> RunConfig:
    values = {"username": "octo", "gist_id": "g1", "gist_token": "pat", "events_token": "tok"}
    values.update(overrides)
    return RunConfig(**values)


def _event(kind: str, payload: dict, *, hours_ago: int = 1) -> ActivityEvent:
    return ActivityEvent(
        kind=kind,
        timestamp=NOW - datetime.timedelta(hours=hours_ago),
        repository_name="octo/repo",
        payload=payload,
    )


def test_end_to_end_star_pr_and_push() -> None:
    source = _Source(
        [
            _event("WatchEvent", {"action": "started"}, hours_ago=1),
            _event("PullRequestEvent", {"action": "closed", "pull_request": {"number": 42, "merged": True}}, hours_ago=2),
            _event("PushEvent", {"size": 4}, hours_ago=3),
        ]
    )
    pipeline = build_default_pipeline(_config(), event_source=source, logger=lambda _msg: None, now_provider=lambda: NOW)
    digest = pipeline.fetch_and_build("octo")
    assert digest.content == (
        "💻 Pushed 4 commits in the last week\n"
        "🌟 Starred repo: octo/repo\n"
        "🎉 Merged PR #42 in octo/repo"
    )
    assert digest.commit_count == 4
    assert digest.event_lines == 2
    assert source.calls == [("octo", 100)]


def test_gollum_event_does_not_use_line_budget() -> None:
    events = [_event("GollumEvent", {"pages": []})] + [_event("ForkEvent", {}) for _ in range(25)]
    pipeline = build_default_pipeline(
        _config(max_lines=5), event_source=_Source(events), logger=lambda _msg: None, now_provider=lambda: NOW
    )
    digest = pipeline.fetch_and_build("octo")
    assert digest.lines == ["💻 No commits in the last week"] + ["ᛘ Forked repo: octo/repo"] * 4


def test_fetch_error_propagates() -> None:
    pipeline = build_default_pipeline(
        _config(), event_source=_Source(error=FetchError("boom")), logger=lambda _msg: None
    )
    with pytest.raises(FetchError):
        pipeline.fetch_and_build("octo")
