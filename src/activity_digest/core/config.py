from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

from activity_digest.core.constants import (
    DIGEST_MAX_LINES_DEFAULT,
    EVENTS_PAGE_SIZE_DEFAULT,
    GIST_LINE_WIDTH_DEFAULT,
    GITHUB_API_BASE_DEFAULT,
)
from activity_digest.core.errors import ConfigurationError

_repo_root = Path(__file__).resolve().parents[3]
load_dotenv(dotenv_path=_repo_root / ".env")


def _env_int(name: str, default: int, environ: Mapping[str, str] | None = None) -> int:
    """정수형 환경변수를 안전하게 파싱 (실패 시 기본값)."""
    env = os.environ if environ is None else environ
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool, environ: Mapping[str, str] | None = None) -> bool:
    env = os.environ if environ is None else environ
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    return raw in {"1", "true", "True", "yes", "YES"}


def _env_str(name: str, environ: Mapping[str, str] | None = None) -> str:
    env = os.environ if environ is None else environ
    return (env.get(name) or "").strip()


# ==========================================
# 환경변수 기반 설정
# ==========================================

LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
HTTP_TIMEOUT_SEC_DEFAULT = 15

# 실행에 반드시 필요한 값
REQUIRED_SETTINGS = ("GH_USERNAME", "GIST_ID", "GH_PAT")


@dataclass(frozen=True)
class RunConfig:
    """한 번의 실행에 필요한 설정 묶음. 로드 후 변경되지 않는다."""

    username: str
    gist_id: str
    gist_token: str
    events_token: str
    gist_filename: str | None = None
    api_base: str = GITHUB_API_BASE_DEFAULT
    timeout_sec: int = HTTP_TIMEOUT_SEC_DEFAULT
    events_page_size: int = EVENTS_PAGE_SIZE_DEFAULT
    max_lines: int = DIGEST_MAX_LINES_DEFAULT
    line_width: int = GIST_LINE_WIDTH_DEFAULT
    dry_run: bool = False


def load_run_config(environ: Mapping[str, str] | None = None) -> RunConfig:
    """환경변수에서 RunConfig를 만든다. 필수 값이 없으면 ConfigurationError."""
    missing = [name for name in REQUIRED_SETTINGS if not _env_str(name, environ)]
    if missing:
        raise ConfigurationError(missing)

    gist_token = _env_str("GH_PAT", environ)
    # 이벤트 API 토큰이 따로 없으면 Gist 토큰을 같이 사용
    events_token = _env_str("GITHUB_TOKEN", environ) or gist_token
    api_base = (_env_str("GITHUB_API_BASE", environ) or GITHUB_API_BASE_DEFAULT).rstrip("/")

    return RunConfig(
        username=_env_str("GH_USERNAME", environ),
        gist_id=_env_str("GIST_ID", environ),
        gist_token=gist_token,
        events_token=events_token,
        gist_filename=_env_str("GIST_FILENAME", environ) or None,
        api_base=api_base,
        timeout_sec=max(1, _env_int("HTTP_TIMEOUT_SEC", HTTP_TIMEOUT_SEC_DEFAULT, environ)),
        events_page_size=min(100, max(1, _env_int("EVENTS_PAGE_SIZE", EVENTS_PAGE_SIZE_DEFAULT, environ))),
        max_lines=max(1, _env_int("DIGEST_MAX_LINES", DIGEST_MAX_LINES_DEFAULT, environ)),
        line_width=max(4, _env_int("GIST_LINE_WIDTH", GIST_LINE_WIDTH_DEFAULT, environ)),
        dry_run=_env_bool("DRY_RUN", False, environ),
    )
