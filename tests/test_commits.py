from __future__ import annotations

import datetime

from activity_digest.models import ActivityEvent
from activity_digest.processing.commits import CommitAggregator, push_size

NOW = datetime.datetime(2024, 1, 10, 12, 0, tzinfo=datetime.timezone.utc)


def _push(size: object, *, days_ago: float = 0, **extra: object) -> ActivityEvent:
    payload = {"size": size, **extra}
    return ActivityEvent(
        kind="PushEvent",
        timestamp=NOW - datetime.timedelta(days=days_ago),
        repository_name="octo/repo",
        payload=payload,
    )


def test_no_commits_line_for_empty_input() -> None:
    assert CommitAggregator().summarize([], NOW) == "💻 No commits in the last week"


def test_singular_and_plural_phrasing() -> None:
    agg = CommitAggregator()
    assert agg.summarize([_push(1)], NOW) == "💻 Pushed 1 commit in the last week"
    assert agg.summarize([_push(2)], NOW) == "💻 Pushed 2 commits in the last week"


def test_sum_only_counts_events_inside_window() -> None:
    events = [_push(3, days_ago=1), _push(5, days_ago=6), _push(2, days_ago=8)]
    assert CommitAggregator().summarize(events, NOW) == "💻 Pushed 8 commits in the last week"


def test_exactly_seven_days_old_is_excluded() -> None:
    events = [_push(4, days_ago=7)]
    assert CommitAggregator().count_commits(events, NOW) == 0


def test_non_push_events_are_ignored() -> None:
    star = ActivityEvent(kind="WatchEvent", timestamp=NOW, repository_name="octo/repo", payload={"size": 9})
    assert CommitAggregator().count_commits([star, _push(1)], NOW) == 1


def test_invalid_size_counts_as_zero() -> None:
    events = [_push(None), _push("7"), _push(True), _push(-3)]
    assert CommitAggregator().count_commits(events, NOW) == 0


def test_push_size_falls_back_to_commit_list() -> None:
    assert push_size({"commits": [{"sha": "a"}, {"sha": "b"}]}) == 2
    assert push_size({"size": 0, "commits": [{"sha": "a"}]}) == 0
    assert push_size({}) == 0
