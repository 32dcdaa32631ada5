from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from eg_common.api import GridSettings, configure_logging, load_settings
from eg_grid.api import GridOptions
from eg_ui.facade import TUI
from eg_ui.protocols import UI

__all__ = ["UIContext", "configure_logging", "options_from_settings"]


def options_from_settings(settings: GridSettings, **overrides: Any) -> GridOptions:
    """Grid options seeded from deployment settings, then per-command flags."""
    data = settings.model_dump()
    data.update({key: value for key, value in overrides.items() if value is not None})
    return GridOptions.model_validate(data)


@dataclass
class UIContext:
    """Container for UI services and state, initialized lazily."""

    headless: bool = False
    config_path: Optional[Path] = None

    _ui: Optional[UI] = None
    _settings: Optional[GridSettings] = None

    @property
    def ui(self) -> UI:
        if self._ui is None:
            if self.headless:
                from eg_ui.headless import HeadlessUI

                self._ui = HeadlessUI()
            else:
                self._ui = TUI()
        return self._ui

    @ui.setter
    def ui(self, value: UI):
        self._ui = value

    @property
    def settings(self) -> GridSettings:
        if self._settings is None:
            self._settings = load_settings(self.config_path)
        return self._settings

    @settings.setter
    def settings(self, value: GridSettings):
        self._settings = value

    def reset(self) -> None:
        self._ui = None
        self._settings = None
