"""GitHub 활동 피드를 요약해 pinned Gist에 게시하는 패키지."""

__version__ = "0.1.0"
