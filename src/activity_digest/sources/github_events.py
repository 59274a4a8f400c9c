from __future__ import annotations

import logging
from typing import Any

import requests

from activity_digest.core.constants import (
    GITHUB_ACCEPT_HEADER,
    GITHUB_API_BASE_DEFAULT,
    GITHUB_API_VERSION,
    USER_AGENT,
)
from activity_digest.core.errors import FetchError, MalformedEventError
from activity_digest.models import ActivityEvent

logger = logging.getLogger(__name__)


def github_headers(token: str) -> dict[str, str]:
    headers = {
        "Accept": GITHUB_ACCEPT_HEADER,
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
        "User-Agent": USER_AGENT,
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def describe_http_error(resp: requests.Response) -> str:
    # GitHub 오류 응답의 message 필드를 우선 사용
    try:
        body = resp.json()
    except ValueError:
        body = None
    message = body.get("message") if isinstance(body, dict) else None
    return f"HTTP {resp.status_code}: {message or resp.reason or resp.text[:200]}"


class GitHubEventSource:
    """사용자의 공개 이벤트를 최신순으로 한 페이지 가져온다."""

    def __init__(
        self,
        *,
        token: str,
        api_base: str = GITHUB_API_BASE_DEFAULT,
        timeout_sec: int = 15,
        session: requests.Session | None = None,
    ) -> None:
        self._api_base = api_base.rstrip("/")
        self._timeout = timeout_sec
        self._session = session or requests.Session()
        self._session.headers.update(github_headers(token))

    def close(self) -> None:
        self._session.close()

    def _get_json(self, url: str, params: dict[str, Any]) -> Any:
        try:
            resp = self._session.get(url, params=params, timeout=self._timeout)
        except requests.RequestException as e:
            raise FetchError(f"이벤트 조회 실패: {type(e).__name__}: {e}") from e
        if not resp.ok:
            raise FetchError(f"이벤트 조회 실패: {describe_http_error(resp)}")
        try:
            return resp.json()
        except ValueError as e:
            raise FetchError("이벤트 응답 JSON 파싱 실패") from e

    def list_recent_events(self, username: str, page_size: int) -> list[ActivityEvent]:
        url = f"{self._api_base}/users/{username}/events/public"
        logger.debug("Getting activity for %s", username)
        data = self._get_json(url, {"per_page": page_size})
        if not isinstance(data, list):
            raise FetchError(f"이벤트 응답이 목록이 아님: {type(data).__name__}")

        events: list[ActivityEvent] = []
        for raw in data[:page_size]:
            try:
                events.append(ActivityEvent.from_api(raw))
            except MalformedEventError as e:
                logger.warning("malformed event skipped: %s", e)
        logger.debug("Activity for %s, %d events found.", username, len(events))
        return events
