from internal.logging import LogLevel, StructuredLogger, get_logger, parse_level

__all__ = [
    "LogLevel",
    "StructuredLogger",
    "get_logger",
    "parse_level",
]
