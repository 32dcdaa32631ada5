"""Unit tests for the DataGrid engine."""

from __future__ import annotations

from typing import Any

import pytest

from eg_grid.engine import DataGrid, coerce_sort, normalize_rows
from eg_grid.empty_state import EmptyStateTemplate
from eg_grid.models import Column, GridMode, HeaderCheckState, SortDirection, SortState
from eg_grid.options import GridOptions

pytestmark = pytest.mark.unit_grid


def _rows(count: int) -> list[dict[str, Any]]:
    return [{"id": n, "name": f"row-{n:02d}"} for n in range(1, count + 1)]


def _ids(grid: DataGrid) -> list[Any]:
    return [row["id"] for row in grid.derive().window]


@pytest.fixture
def columns() -> list[Column]:
    return [Column("id", "ID"), Column("name", "Name"), Column("score", "Score")]


class TestScenarios:
    def test_sort_by_score_then_reverse(self, columns: list[Column]) -> None:
        rows = [{"id": 1, "score": 50}, {"id": 2, "score": 90}, {"id": 3, "score": 70}]
        grid = DataGrid(columns, rows)
        assert grid.click_header("score") is True
        assert _ids(grid) == [1, 3, 2]
        grid.click_header("score")
        assert grid.sort_state == SortState("score", SortDirection.DESC)
        assert _ids(grid) == [2, 3, 1]

    def test_last_page_holds_remainder(self, columns: list[Column]) -> None:
        grid = DataGrid(columns, _rows(25), page_size=10)
        assert grid.total_pages == 3
        grid.go_to_page(3)
        view = grid.derive()
        assert view.window == _rows(25)[20:]
        assert view.page is not None
        assert (view.page.start, view.page.end, view.page.total_rows) == (21, 25, 25)

    def test_header_checkbox_cycle(self, columns: list[Column]) -> None:
        grid = DataGrid(columns, _rows(3), selectable=True, selected_rows=[2, 3])
        assert grid.derive().header_check is HeaderCheckState.SOME
        assert grid.toggle_all() == [2, 3, 1]
        assert grid.header_check_state is HeaderCheckState.ALL
        assert grid.toggle_all() == []
        assert grid.header_check_state is HeaderCheckState.NONE

    @pytest.mark.parametrize("rows", [None, [], ()])
    def test_missing_rows_render_empty_state(self, columns: list[Column], rows: Any) -> None:
        view = DataGrid(columns, rows).derive()
        assert view.mode is GridMode.EMPTY
        assert view.empty is not None
        assert view.empty.title == "No data available"
        assert view.rows == ()
        assert view.page is None

    def test_loading_renders_skeleton(self, columns: list[Column]) -> None:
        view = DataGrid(columns, _rows(3), loading=True).derive()
        assert view.mode is GridMode.LOADING
        assert view.rows == ()
        assert view.skeleton is not None
        assert view.skeleton.columns == len(columns)
        assert view.skeleton.rows == 5
        assert view.skeleton.labels == ("ID", "Name", "Score")

    def test_loading_skeleton_counts_checkbox_column(self, columns: list[Column]) -> None:
        view = DataGrid(columns, None, loading=True, selectable=True).derive()
        assert view.skeleton is not None
        assert view.skeleton.columns == len(columns) + 1


class TestPagination:
    def test_pages_cover_sorted_rows(self, columns: list[Column]) -> None:
        rows = _rows(23)
        grid = DataGrid(columns, list(reversed(rows)), page_size=5, sort="id")
        seen: list[Any] = []
        for page in range(1, grid.total_pages + 1):
            grid.go_to_page(page)
            seen.extend(grid.derive().window)
        assert seen == rows

    def test_go_to_page_clamps(self, columns: list[Column]) -> None:
        grid = DataGrid(columns, _rows(25))
        assert grid.go_to_page(99) == 3
        assert grid.go_to_page(-2) == 1
        assert grid.go_to_page("2") == 2
        assert grid.go_to_page("nope") == 2

    def test_shrinking_rows_reclamps_on_derive(self, columns: list[Column]) -> None:
        grid = DataGrid(columns, _rows(30))
        grid.go_to_page(3)
        grid.update(rows=_rows(12))
        view = grid.derive()
        assert view.page is not None
        assert view.page.current_page == 2
        assert view.window == _rows(12)[10:]
        assert grid.next_page() == 2
        assert grid.previous_page() == 1

    def test_reclamp_does_not_notify(self, columns: list[Column]) -> None:
        pages: list[int] = []
        grid = DataGrid(columns, _rows(30), on_page_change=pages.append)
        grid.go_to_page(3)
        grid.update(rows=_rows(5))
        grid.derive()
        assert pages == [3]

    def test_controlled_page_hears_reclamped_move(self, columns: list[Column]) -> None:
        pages: list[int] = []
        grid = DataGrid(columns, _rows(30), current_page=3, on_page_change=pages.append)
        grid.update(rows=_rows(12))
        assert grid.derive().page.current_page == 2
        assert pages == []
        assert grid.next_page() == 2
        assert pages == [2]

    def test_first_and_last_page(self, columns: list[Column]) -> None:
        grid = DataGrid(columns, _rows(41))
        assert grid.last_page() == 5
        assert grid.first_page() == 1

    def test_set_page_size_returns_to_first_page(self, columns: list[Column]) -> None:
        grid = DataGrid(columns, _rows(60))
        grid.go_to_page(4)
        assert grid.set_page_size(25) == 25
        assert grid.current_page == 1
        assert grid.total_pages == 3
        assert grid.set_page_size("junk") == 25

    def test_unpaginated_grid_is_one_page(self, columns: list[Column]) -> None:
        grid = DataGrid(columns, _rows(30), paginated=False)
        view = grid.derive()
        assert len(view.window) == 30
        assert view.page is not None
        assert (view.page.current_page, view.page.total_pages) == (1, 1)
        assert view.page.show_controls is False
        assert view.page.summary == "Showing 1 to 30 of 30 results"


class TestSelection:
    def test_selection_persists_across_pages(self, columns: list[Column]) -> None:
        grid = DataGrid(columns, _rows(25), selectable=True)
        grid.toggle_row(_rows(25)[0])
        grid.next_page()
        assert grid.derive().header_check is HeaderCheckState.NONE
        grid.previous_page()
        view = grid.derive()
        assert view.rows[0].selected is True
        assert view.header_check is HeaderCheckState.SOME

    def test_toggle_all_keeps_other_pages(self, columns: list[Column]) -> None:
        grid = DataGrid(columns, _rows(25), selectable=True, page_size=10)
        grid.toggle_key(25)
        grid.toggle_all()
        assert grid.header_check_state is HeaderCheckState.ALL
        grid.toggle_all()
        assert grid.selected_keys == [25]

    def test_controlled_selection_forwards_copies(self, columns: list[Column]) -> None:
        external = [1]
        seen: list[list[Any]] = []
        grid = DataGrid(
            columns,
            _rows(3),
            selectable=True,
            selected_rows=external,
            on_selection_change=seen.append,
        )
        grid.toggle_key(2)
        assert seen == [[1, 2]]
        assert external == [1]
        seen[0].append(99)
        assert grid.selected_keys == [1, 2]

    def test_controller_push_overwrites_cache(self, columns: list[Column]) -> None:
        grid = DataGrid(columns, _rows(3), selectable=True, selected_rows=[1])
        grid.toggle_key(2)
        grid.update(selected_rows=[3])
        assert grid.selected_keys == [3]
        assert grid.is_selected({"id": 3})

    def test_unkeyed_rows_are_not_selectable(self, columns: list[Column]) -> None:
        rows = [{"id": 1}, {"name": "no key"}, {"id": None}]
        grid = DataGrid(columns, rows, selectable=True)
        view = grid.derive()
        assert [row.selectable for row in view.rows] == [True, False, False]
        grid.toggle_all()
        assert grid.selected_keys == [1]
        assert grid.header_check_state is HeaderCheckState.ALL

    def test_selection_ignored_when_not_selectable(self, columns: list[Column]) -> None:
        grid = DataGrid(columns, _rows(3))
        assert grid.toggle_key(1) == []
        assert grid.toggle_all() == []
        assert grid.derive().header_check is HeaderCheckState.NONE

    def test_custom_row_key(self, columns: list[Column]) -> None:
        rows = [{"user_id": "a"}, {"user_id": "b"}]
        grid = DataGrid(columns, rows, selectable=True, row_key="user_id")
        grid.toggle_row(rows[1])
        assert grid.selected_keys == ["b"]

    def test_row_toggle_does_not_click_row(self, columns: list[Column]) -> None:
        clicked: list[Any] = []
        rows = _rows(2)
        grid = DataGrid(columns, rows, selectable=True, on_row_click=clicked.append)
        grid.toggle_row(rows[0])
        assert clicked == []
        grid.click_row(rows[1])
        assert clicked == [rows[1]]

    def test_clear_selection(self, columns: list[Column]) -> None:
        grid = DataGrid(columns, _rows(3), selectable=True, selected_rows=[1, 2])
        grid.clear_selection()
        assert grid.selected_keys == []


class TestSorting:
    def test_non_sortable_header_click_is_noop(self) -> None:
        grid = DataGrid([Column("id"), Column("name", sortable=False)], _rows(3))
        assert grid.click_header("name") is False
        assert grid.click_header("missing") is False
        assert grid.sort_state == SortState()

    def test_sorting_disabled(self, columns: list[Column]) -> None:
        grid = DataGrid(columns, _rows(3), sortable=False)
        assert grid.click_header("id") is False
        view = grid.derive()
        assert all(header.sortable is False for header in view.headers)
        assert all(header.sort_indicator == "none" for header in view.headers)

    def test_controlled_sort_notifies(self, columns: list[Column]) -> None:
        seen: list[SortState] = []
        grid = DataGrid(columns, _rows(3), sort=("id", "desc"), on_sort_change=seen.append)
        assert _ids(grid) == [3, 2, 1]
        grid.click_header("id")
        assert seen == [SortState("id", SortDirection.ASC)]

    def test_header_indicators(self, columns: list[Column]) -> None:
        grid = DataGrid(columns, _rows(3))
        grid.click_header("name")
        indicators = {header.key: header.sort_indicator for header in grid.derive().headers}
        assert indicators == {"id": "none", "name": "asc", "score": "none"}

    def test_rows_are_not_mutated(self, columns: list[Column]) -> None:
        rows = _rows(5)
        grid = DataGrid(columns, rows)
        grid.click_header("id")
        grid.click_header("id")
        grid.derive()
        assert rows == _rows(5)


class TestRendering:
    def test_default_cells_and_custom_renderer(self) -> None:
        columns = [
            Column("id"),
            Column("score", render=lambda value, row: f"{value}%"),
            Column("extra"),
        ]
        view = DataGrid(columns, [{"id": 1, "score": 80}]).derive()
        cells = view.rows[0].cells
        assert [cell.rendered for cell in cells] == ["1", "80%", ""]
        assert cells[2].value is None

    def test_renderer_errors_propagate(self) -> None:
        def boom(value: Any, row: Any) -> str:
            raise RuntimeError("render failed")

        grid = DataGrid([Column("id", render=boom)], _rows(1))
        with pytest.raises(RuntimeError, match="render failed"):
            grid.derive()

    def test_duplicate_columns_later_wins(self) -> None:
        grid = DataGrid([Column("id", "First"), Column("name"), Column("id", "Second")], _rows(1))
        assert [header.label for header in grid.derive().headers] == ["Second", "name"]

    def test_callable_header(self) -> None:
        view = DataGrid([Column("id", header=lambda: "Identifier")], _rows(1)).derive()
        assert view.headers[0].label == "Identifier"


class TestEmptyState:
    def test_options_drive_empty_view(self, columns: list[Column]) -> None:
        grid = DataGrid(
            columns,
            [],
            empty_message="No users found",
            empty_description=None,
            empty_action_label="Add User",
        )
        empty = grid.derive().empty
        assert empty is not None
        assert empty.title == "No users found"
        assert empty.description is None
        assert empty.action_label == "Add User"

    def test_template_by_key(self, columns: list[Column]) -> None:
        empty = DataGrid(columns, [], empty_template="no_matches").derive().empty
        assert empty is not None
        assert empty.title == "No matching results"

    def test_template_instance(self, columns: list[Column]) -> None:
        template = EmptyStateTemplate(key="custom", title="Nothing", icon="search")
        empty = DataGrid(columns, [], empty_template=template).derive().empty
        assert empty is not None
        assert (empty.title, empty.icon) == ("Nothing", "search")

    def test_empty_action_only_when_empty(self, columns: list[Column]) -> None:
        calls: list[str] = []
        grid = DataGrid(columns, [], on_empty_action=lambda: calls.append("add"))
        assert grid.trigger_empty_action() is True
        grid.update(rows=_rows(1))
        assert grid.trigger_empty_action() is False
        assert calls == ["add"]


class TestProps:
    def test_options_object_and_mapping(self, columns: list[Column]) -> None:
        grid = DataGrid(columns, _rows(3), options=GridOptions(page_size=2))
        assert grid.total_pages == 2
        grid.update(options={"page_size": 3})
        assert grid.total_pages == 1

    def test_unknown_prop_is_ignored(self, columns: list[Column], caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING", logger="eg_grid.engine"):
            grid = DataGrid(columns, _rows(1), colour="red")
        assert grid.derive().mode is GridMode.TABLE
        assert "colour" in caplog.text

    def test_non_column_descriptor_is_logged(self, columns: list[Column], caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING", logger="eg_grid.models"):
            grid = DataGrid([*columns, {"key": "email"}], _rows(1))
        assert [header.key for header in grid.derive().headers] == [column.key for column in columns]
        assert "expected Column" in caplog.text

    def test_missing_callbacks_are_noops(self, columns: list[Column]) -> None:
        grid = DataGrid(columns, _rows(2), on_row_click=None, on_selection_change="nope")
        grid.click_row(_rows(2)[0])
        grid.update(selectable=True)
        assert grid.toggle_key(1) == [1]


def test_normalize_rows() -> None:
    assert normalize_rows(None) == []
    assert normalize_rows("abc") == []
    assert normalize_rows(iter([1, 2])) == [1, 2]
    assert normalize_rows(({"id": 1},)) == [{"id": 1}]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, None),
        ("name", SortState("name")),
        (("name", "desc"), SortState("name", SortDirection.DESC)),
        ({"column": "name", "direction": "desc"}, SortState("name", SortDirection.DESC)),
        (SortState("id"), SortState("id")),
    ],
)
def test_coerce_sort(value: Any, expected: SortState | None) -> None:
    assert coerce_sort(value) == expected
