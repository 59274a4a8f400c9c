"""Core configuration, constants and error types.

Import what you need from `activity_digest.core.config`,
`activity_digest.core.constants` and `activity_digest.core.errors`.
"""

__all__ = ["config", "constants", "errors"]
