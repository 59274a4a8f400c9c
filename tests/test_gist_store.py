from __future__ import annotations

import pytest
import requests

from activity_digest.core.errors import PublishError
from activity_digest.export.gist_store import GistStore


class _FakeResponse:
    def __init__(self, status_code: int = 200, body: object = None) -> None:
        self.status_code = status_code
        self._body = body if body is not None else {}
        self.text = ""
        self.reason = "Unauthorized" if status_code == 401 else ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> object:
        return self._body


class _FakeSession:
    def __init__(self, responses: list[_FakeResponse] | None = None, error: Exception | None = None) -> None:
        self.headers: dict[str, str] = {}
        self.responses = list(responses or [])
        self.error = error
        self.calls: list[tuple[str, str, dict]] = []

    def request(self, method: str, url: str, **kwargs: object) -> _FakeResponse:
        self.calls.append((method, url, kwargs))
        if self.error:
            raise self.error
        return self.responses.pop(0)

    def close(self) -> None:
        pass


def test_update_targets_first_gist_file() -> None:
    gist = {"files": {"activity.md": {"content": "old"}, "other.txt": {}}}
    session = _FakeSession([_FakeResponse(body=gist), _FakeResponse(body={"id": "g1"})])
    GistStore(token="pat", session=session).update("g1", "new digest")

    assert [c[0] for c in session.calls] == ["GET", "PATCH"]
    method, url, kwargs = session.calls[1]
    assert url == "https://api.github.com/gists/g1"
    assert kwargs["json"] == {"files": {"activity.md": {"content": "new digest"}}}
    assert session.headers["Authorization"] == "Bearer pat"


def test_configured_filename_skips_lookup() -> None:
    session = _FakeSession([_FakeResponse(body={"id": "g1"})])
    GistStore(token="pat", filename="digest.txt", session=session).update("g1", "x")
    assert [c[0] for c in session.calls] == ["PATCH"]
    assert session.calls[0][2]["json"] == {"files": {"digest.txt": {"content": "x"}}}


def test_auth_failure_raises_publish_error() -> None:
    session = _FakeSession([_FakeResponse(status_code=401, body={"message": "Bad credentials"})])
    with pytest.raises(PublishError, match="Bad credentials"):
        GistStore(token="bad", session=session).update("g1", "x")


def test_empty_gist_raises_publish_error() -> None:
    session = _FakeSession([_FakeResponse(body={"files": {}})])
    with pytest.raises(PublishError):
        GistStore(token="pat", session=session).update("g1", "x")


def test_network_error_raises_publish_error() -> None:
    session = _FakeSession(error=requests.Timeout("slow"))
    with pytest.raises(PublishError):
        GistStore(token="pat", filename="a.md", session=session).update("g1", "x")
