"""Digest publishing and the scheduled entry point."""

__all__ = ["activity_digest_exporter", "gist_store"]
