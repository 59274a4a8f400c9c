from __future__ import annotations

import logging
from typing import Any

import requests

from activity_digest.core.constants import GITHUB_API_BASE_DEFAULT
from activity_digest.core.errors import PublishError
from activity_digest.sources.github_events import describe_http_error, github_headers

logger = logging.getLogger(__name__)


class GistStore:
    """Gist 파일 하나의 내용을 통째로 교체한다.

    대상 파일은 생성자에 filename을 주면 그 파일, 아니면 Gist의 첫 번째 파일.
    """

    def __init__(
        self,
        *,
        token: str,
        api_base: str = GITHUB_API_BASE_DEFAULT,
        timeout_sec: int = 15,
        filename: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._api_base = api_base.rstrip("/")
        self._timeout = timeout_sec
        self._filename = filename
        self._session = session or requests.Session()
        self._session.headers.update(github_headers(token))

    def close(self) -> None:
        self._session.close()

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            resp = self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.RequestException as e:
            raise PublishError(f"Gist {method} 실패: {type(e).__name__}: {e}") from e
        if not resp.ok:
            raise PublishError(f"Gist {method} 실패: {describe_http_error(resp)}")
        try:
            return resp.json()
        except ValueError as e:
            raise PublishError(f"Gist {method} 응답 JSON 파싱 실패") from e

    def resolve_filename(self, gist_id: str) -> str:
        if self._filename:
            return self._filename
        gist = self._request("GET", f"{self._api_base}/gists/{gist_id}")
        files = gist.get("files") if isinstance(gist, dict) else None
        if not isinstance(files, dict) or not files:
            raise PublishError(f"Gist {gist_id}에 파일이 없음")
        return next(iter(files))

    def update(self, gist_id: str, content: str) -> None:
        filename = self.resolve_filename(gist_id)
        logger.debug("Updating Gist %s (%s)", gist_id, filename)
        self._request(
            "PATCH",
            f"{self._api_base}/gists/{gist_id}",
            json={"files": {filename: {"content": content}}},
        )
