from __future__ import annotations

from typing import TypedDict

from typed_json import _test_hooks
from typed_json.logging import LogFormat, LogLevel


class LoggingConfig(TypedDict, total=True):
    """Logging configuration."""

    level: LogLevel
    format: LogFormat


class TypedJsonSettings(TypedDict, total=True):
    """Configuration for typed-json entrypoints."""

    service_name: str
    logging: LoggingConfig


def _optional_env_str(key: str) -> str | None:
    value = _test_hooks.get_env(key)
    if value is None:
        return None
    trimmed = value.strip()
    if trimmed == "":
        return None
    return trimmed


def _parse_str(key: str, default: str) -> str:
    val = _optional_env_str(key)
    return val if val is not None else default


def _parse_log_level(key: str, default: LogLevel) -> LogLevel:
    val = _optional_env_str(key)
    if val is None:
        return default
    upper_val = val.upper()
    if upper_val == "DEBUG":
        return "DEBUG"
    if upper_val == "INFO":
        return "INFO"
    if upper_val == "WARNING":
        return "WARNING"
    if upper_val == "ERROR":
        return "ERROR"
    if upper_val == "CRITICAL":
        return "CRITICAL"
    return default


def _parse_log_format(key: str, default: LogFormat) -> LogFormat:
    val = _optional_env_str(key)
    if val is None:
        return default
    lower_val = val.lower()
    if lower_val == "json":
        return "json"
    if lower_val == "text":
        return "text"
    raise ValueError(f"Invalid log format for {key}: {val!r}")


def load_settings() -> TypedJsonSettings:
    """Load settings from environment variables.

    Environment variables:
        TYPED_JSON__SERVICE_NAME: Service name in log records (default: typed-json)
        TYPED_JSON__LOG_LEVEL: Log level (default: INFO)
        TYPED_JSON__LOG_FORMAT: Log format, text or json (default: text)
    """
    logging_cfg: LoggingConfig = {
        "level": _parse_log_level("TYPED_JSON__LOG_LEVEL", "INFO"),
        "format": _parse_log_format("TYPED_JSON__LOG_FORMAT", "text"),
    }
    return {
        "service_name": _parse_str("TYPED_JSON__SERVICE_NAME", "typed-json"),
        "logging": logging_cfg,
    }


__all__ = [
    "LoggingConfig",
    "TypedJsonSettings",
    "_optional_env_str",
    "_parse_log_format",
    "_parse_log_level",
    "_parse_str",
    "load_settings",
]
