"""Shared error taxonomy for examgrid.

The grid engine itself never raises these: it normalizes malformed input.
They cover the surfaces around it (settings files, datasets fed to the CLI).
"""

from __future__ import annotations

from typing import Any, Mapping, TypeVar


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class EGError(Exception):
    """Base error type for typed failure handling."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class ConfigurationError(EGError):
    """Failure due to invalid grid settings."""


class DatasetError(EGError):
    """Failure reading or decoding a row dataset."""


T = TypeVar("T", bound=EGError)


def wrap_error(
    error_cls: type[T],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: Exception | None = None,
) -> T:
    """Create a typed EGError with optional context and cause."""
    return error_cls(message, context=context, cause=cause)


def error_to_payload(error: EGError) -> dict[str, Any]:
    """Convert an EGError to a JSON payload for ``--json`` output."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
