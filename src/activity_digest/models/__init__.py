"""Typed models for activity events and digest results."""

from .digest import DigestResult, RunResult
from .events import ActivityEvent, EventKind

__all__ = ["ActivityEvent", "DigestResult", "EventKind", "RunResult"]
