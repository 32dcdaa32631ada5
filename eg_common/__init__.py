"""Shared helpers for examgrid."""

from eg_common.api import (
    ConfigurationError,
    DatasetError,
    EGError,
    GridSettings,
    configure_logging,
    load_settings,
)

__all__ = [
    "ConfigurationError",
    "DatasetError",
    "EGError",
    "GridSettings",
    "configure_logging",
    "load_settings",
]
