from __future__ import annotations

import datetime
from typing import Callable

from activity_digest.core.config import RunConfig
from activity_digest.models import DigestResult
from activity_digest.processing.assembler import DigestAssembler
from activity_digest.processing.commits import CommitAggregator
from activity_digest.processing.formatters import EventFormatter
from activity_digest.processing.types import EventSequence, EventSource, LogFunc


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class DigestPipeline:
    def __init__(
        self,
        *,
        event_source: EventSource,
        aggregator: CommitAggregator,
        assembler: DigestAssembler,
        logger: LogFunc,
        page_size: int,
        now_provider: Callable[[], datetime.datetime] | None = None,
    ) -> None:
        self._event_source = event_source
        self._aggregator = aggregator
        self._assembler = assembler
        self._log = logger
        self._page_size = page_size
        self._now = now_provider or _utcnow

    def build_digest(self, events: EventSequence) -> DigestResult:
        # 네트워크 없이 이벤트 목록만으로 다이제스트 생성
        commit_count = self._aggregator.count_commits(events, self._now())
        commit_line = self._aggregator.format_line(commit_count)
        content = self._assembler.assemble(commit_line, events)
        return DigestResult(content=content, commit_count=commit_count, event_lines=content.count("\n"))

    def fetch_and_build(self, username: str) -> DigestResult:
        self._log(f"{username} 활동 이벤트 조회")
        events = self._event_source.list_recent_events(username, self._page_size)
        self._log(f"{username} 이벤트 {len(events)}개 수신")
        digest = self.build_digest(events)
        self._log(f"다이제스트 생성: 커밋 {digest.commit_count}개, 이벤트 {digest.event_lines}줄")
        return digest


def build_default_pipeline(
    config: RunConfig,
    *,
    event_source: EventSource,
    logger: LogFunc,
    now_provider: Callable[[], datetime.datetime] | None = None,
) -> DigestPipeline:
    assembler = DigestAssembler(
        formatter=EventFormatter(),
        max_lines=config.max_lines,
        line_width=config.line_width,
        logger=logger,
    )
    return DigestPipeline(
        event_source=event_source,
        aggregator=CommitAggregator(),
        assembler=assembler,
        logger=logger,
        page_size=config.events_page_size,
        now_provider=now_provider,
    )
