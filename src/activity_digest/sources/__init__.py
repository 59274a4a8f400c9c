"""Activity event sources."""

__all__ = ["github_events"]
