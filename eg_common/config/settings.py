"""Grid settings loaded from YAML with environment overrides."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from eg_common.config.env import parse_bool_env, parse_int_env
from eg_common.errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "EG_GRID_CONFIG"
DEFAULT_PAGE_SIZE_OPTIONS = (10, 25, 50, 100)


class GridSettings(BaseModel):
    """Deployment-wide defaults for every grid instance."""

    page_size: int = Field(default=10, gt=0, description="Rows per page")
    page_size_options: tuple[int, ...] = Field(
        default=DEFAULT_PAGE_SIZE_OPTIONS,
        description="Choices offered by the rows-per-page selector",
    )
    sortable: bool = Field(default=True, description="Allow header-click sorting")
    paginated: bool = Field(default=True, description="Split rows into pages")
    selectable: bool = Field(default=False, description="Show selection checkboxes")
    row_key: str = Field(default="id", min_length=1, description="Row identity field")

    model_config = {"extra": "ignore"}

    @field_validator("page_size_options")
    @classmethod
    def _validate_options(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if not value:
            raise ValueError("page_size_options must not be empty")
        if any(option <= 0 for option in value):
            raise ValueError("page_size_options must contain positive integers")
        return tuple(sorted(set(value)))


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(
            f"Grid settings file not found: {path}", context={"path": path}
        )
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Grid settings file is not valid YAML: {path}",
            context={"path": path},
            cause=exc,
        ) from exc
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Grid settings must contain a mapping at the top level.",
            context={"path": path},
        )
    section = data.get("grid", data)
    if not isinstance(section, dict):
        raise ConfigurationError(
            "Config section 'grid' must be a mapping.", context={"path": path}
        )
    return dict(section)


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    page_size = parse_int_env(os.environ.get("EG_PAGE_SIZE"))
    if page_size is not None:
        overrides["page_size"] = page_size
    row_key = os.environ.get("EG_ROW_KEY")
    if row_key:
        overrides["row_key"] = row_key
    selectable = parse_bool_env(os.environ.get("EG_SELECTABLE"))
    if selectable is not None:
        overrides["selectable"] = selectable
    return overrides


def load_settings(path: Path | None = None) -> GridSettings:
    """Load grid settings from ``path`` or ``$EG_GRID_CONFIG``.

    Without either, defaults are used. Environment overrides are applied on
    top of the file values.
    """
    data: dict[str, Any] = {}
    resolved = path
    if resolved is None and os.environ.get(CONFIG_ENV_VAR):
        resolved = Path(os.environ[CONFIG_ENV_VAR])
    if resolved is not None:
        data = _read_yaml(resolved)
        logger.debug("Loaded grid settings from %s", resolved)
    data.update(_env_overrides())
    try:
        return GridSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid grid settings: {exc.error_count()} error(s)",
            context={"path": resolved, "errors": [err["msg"] for err in exc.errors()]},
            cause=exc,
        ) from exc
