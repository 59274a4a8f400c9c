"""Event aggregation, formatting and digest assembly."""

__all__ = [
    "assembler",
    "commits",
    "formatters",
    "pipeline",
    "types",
]
