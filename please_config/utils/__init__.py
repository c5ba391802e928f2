"""Utility helpers for please-config."""

from please_config.utils.logging_config import configure_logging, resolve_log_level

__all__ = ["configure_logging", "resolve_log_level"]
