from .common import capitalize_first, parse_datetime_utc, truncate_line

__all__ = ["capitalize_first", "parse_datetime_utc", "truncate_line"]
