from __future__ import annotations


class ActivityDigestError(Exception):
    """실행 실패 사유를 담는 기본 예외."""


class ConfigurationError(ActivityDigestError):
    """필수 설정(환경변수)이 없을 때. 네트워크 호출 전에 발생한다."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"필수 설정 누락: {', '.join(self.missing)}")


class FetchError(ActivityDigestError):
    """이벤트 API 호출 실패 (네트워크/인증/응답 형식)."""


class PublishError(ActivityDigestError):
    """Gist 업데이트 실패. 기존 Gist 내용은 그대로 남는다."""


class MalformedEventError(ActivityDigestError):
    # 개별 이벤트 데이터 오류: 해당 이벤트만 건너뛴다
    pass
