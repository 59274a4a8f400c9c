from __future__ import annotations

import datetime

ELLIPSIS = "..."  # 잘린 줄 끝에 붙는 표시


def parse_datetime_utc(value: str, *, default_tz: datetime.tzinfo | None = None) -> datetime.datetime | None:
    """ISO-8601 문자열을 UTC datetime으로 변환. 실패 시 None."""
    if not value or not isinstance(value, str):
        return None
    raw = value.strip()
    # GitHub API는 "2024-01-01T00:00:00Z" 형식을 사용
    if raw.endswith("Z") or raw.endswith("z"):
        raw = raw[:-1] + "+00:00"
    try:
        dt = datetime.datetime.fromisoformat(raw)
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=default_tz or datetime.timezone.utc)
    return dt.astimezone(datetime.timezone.utc)


def capitalize_first(text: str) -> str:
    # 첫 글자만 대문자로, 나머지는 그대로 유지 ("" -> "")
    if not text:
        return ""
    return text[:1].upper() + text[1:]


def truncate_line(text: str, width: int) -> str:
    """width를 넘는 줄은 width-3 글자 + '...'로 잘라 정확히 width 길이로 맞춘다."""
    if len(text) <= width:
        return text
    if width <= len(ELLIPSIS):
        return ELLIPSIS[:width]
    return text[: width - len(ELLIPSIS)] + ELLIPSIS
