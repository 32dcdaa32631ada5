"""Stable API surface for shared helpers."""

from eg_common.config import GridSettings, load_settings, parse_bool_env, parse_int_env
from eg_common.errors import (
    ConfigurationError,
    DatasetError,
    EGError,
    error_to_payload,
    wrap_error,
)
from eg_common.logging import configure_logging

__all__ = [
    "ConfigurationError",
    "DatasetError",
    "EGError",
    "GridSettings",
    "configure_logging",
    "error_to_payload",
    "load_settings",
    "parse_bool_env",
    "parse_int_env",
    "wrap_error",
]
