from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DigestResult:
    content: str
    commit_count: int
    event_lines: int

    @property
    def lines(self) -> list[str]:
        return self.content.split("\n")


@dataclass(frozen=True)
class RunResult:
    """run()의 결과. ok=False이면 reason에 실패 사유가 담긴다."""

    ok: bool
    reason: str = ""
    digest: DigestResult | None = None
    published: bool = False

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1
