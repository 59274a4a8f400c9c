from __future__ import annotations

from activity_digest.core.constants import DIGEST_MAX_LINES_DEFAULT, GIST_LINE_WIDTH_DEFAULT
from activity_digest.core.errors import MalformedEventError
from activity_digest.processing.formatters import EventFormatter
from activity_digest.processing.types import EventSequence, LogFunc
from activity_digest.utils import truncate_line


class DigestAssembler:
    def __init__(
        self,
        *,
        formatter: EventFormatter,
        max_lines: int = DIGEST_MAX_LINES_DEFAULT,
        line_width: int = GIST_LINE_WIDTH_DEFAULT,
        logger: LogFunc | None = None,
    ) -> None:
        self._formatter = formatter
        self._max_lines = max_lines
        self._line_width = line_width
        self._log = logger or (lambda _msg: None)

    def render_event_lines(self, events: EventSequence) -> list[str]:
        """지원 이벤트만 원래 순서대로 렌더링해 최대 max_lines-1 줄을 만든다."""
        budget = max(0, self._max_lines - 1)
        lines: list[str] = []
        for event in events:
            if len(lines) >= budget:
                break
            if not self._formatter.supports(event):
                continue
            try:
                line = self._formatter.render(event)
            except MalformedEventError as e:
                # 깨진 이벤트는 건너뛰고 줄 수에도 포함하지 않는다
                self._log(f"⚠️ 이벤트 건너뜀 ({event.kind} {event.repository_name}): {e}")
                continue
            lines.append(truncate_line(line, self._line_width))
        return lines

    def assemble(self, commit_line: str, events: EventSequence) -> str:
        lines = [truncate_line(commit_line, self._line_width)]
        lines += self.render_event_lines(events)
        return "\n".join(lines)
