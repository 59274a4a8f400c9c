from __future__ import annotations

GITHUB_API_BASE_DEFAULT = "https://api.github.com"
GITHUB_ACCEPT_HEADER = "application/vnd.github+json"
GITHUB_API_VERSION = "2022-11-28"
USER_AGENT = "activity-digest"

EVENTS_PAGE_SIZE_DEFAULT = 100  # 이벤트 API 한 페이지 최대치

DIGEST_MAX_LINES_DEFAULT = 20  # 커밋 요약 1줄 + 이벤트 19줄
GIST_LINE_WIDTH_DEFAULT = 54  # pinned Gist 한 줄 최대 표시 폭
COMMIT_WINDOW_DAYS_DEFAULT = 7

COMMIT_MARKER = "💻"

# 이벤트 종류별 표시 아이콘
EVENT_MARKERS = {
    "WatchEvent": "🌟",
    "IssueCommentEvent": "🗣",
    "CreateEventRepository": "🆕",
    "CreateEventRef": "⑂",
    "ForkEvent": "ᛘ",
    "IssuesEvent": "❗️",
    "PullRequestMerged": "🎉",
    "PullRequestOpened": "🆒",
    "PullRequestOther": "❌",
}
