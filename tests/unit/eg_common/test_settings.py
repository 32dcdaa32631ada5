"""Unit tests for grid settings and environment parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from eg_common.config import GridSettings, load_settings, parse_bool_env, parse_int_env
from eg_common.errors import ConfigurationError

pytestmark = pytest.mark.unit_common


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("EG_GRID_CONFIG", "EG_PAGE_SIZE", "EG_ROW_KEY", "EG_SELECTABLE"):
        monkeypatch.delenv(name, raising=False)


def test_parse_env_helpers() -> None:
    assert parse_bool_env(None) is None
    assert parse_bool_env(" Yes ") is True
    assert parse_bool_env("0") is False
    assert parse_int_env("25") == 25
    assert parse_int_env("many") is None
    assert parse_int_env(None) is None


class TestLoadSettings:
    def test_defaults_without_file(self) -> None:
        settings = load_settings()
        assert settings == GridSettings()
        assert settings.page_size_options == (10, 25, 50, 100)

    def test_grid_section(self, tmp_path: Path) -> None:
        path = tmp_path / "grid.yaml"
        path.write_text("grid:\n  page_size: 25\n  row_key: user_id\n  selectable: true\n")
        settings = load_settings(path)
        assert settings.page_size == 25
        assert settings.row_key == "user_id"
        assert settings.selectable is True

    def test_top_level_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "grid.yaml"
        path.write_text("page_size_options: [50, 10, 10]\nunknown: 1\n")
        assert load_settings(path).page_size_options == (10, 50)

    def test_env_config_path_and_overrides(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "grid.yaml"
        path.write_text("page_size: 25\n")
        monkeypatch.setenv("EG_GRID_CONFIG", str(path))
        monkeypatch.setenv("EG_PAGE_SIZE", "50")
        monkeypatch.setenv("EG_SELECTABLE", "true")
        settings = load_settings()
        assert settings.page_size == 50
        assert settings.selectable is True

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            load_settings(tmp_path / "absent.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "grid.yaml"
        path.write_text("grid: [unclosed\n")
        with pytest.raises(ConfigurationError, match="not valid YAML"):
            load_settings(path)

    def test_non_mapping_top_level(self, tmp_path: Path) -> None:
        path = tmp_path / "grid.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError, match="top level"):
            load_settings(path)

    def test_non_mapping_grid_section(self, tmp_path: Path) -> None:
        path = tmp_path / "grid.yaml"
        path.write_text("grid: 5\n")
        with pytest.raises(ConfigurationError, match="'grid'"):
            load_settings(path)

    def test_validation_errors(self, tmp_path: Path) -> None:
        path = tmp_path / "grid.yaml"
        path.write_text("page_size: 0\npage_size_options: []\n")
        with pytest.raises(ConfigurationError) as excinfo:
            load_settings(path)
        assert excinfo.value.context["path"] == str(path)
        assert len(excinfo.value.context["errors"]) == 2
