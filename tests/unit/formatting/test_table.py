"""
Tests for EventTable construction, sorting and rendering.
"""
import pytest

from synclens.core.exceptions.custom_exceptions import TableShapeError
from synclens.formatting.table import (
    INDENT,
    MAX_CELL_WIDTH,
    MAX_LINE_WIDTH,
    MAX_ROWS,
    EventTable,
)


def build(**columns):
    table = EventTable()
    for name, cells in columns.items():
        for cell in cells:
            table.append(name, cell)
    return table


class TestEventTableShape:
    """Test cases for column bookkeeping."""

    def test_empty_table(self):
        table = EventTable()
        assert table.included_columns() == []
        assert table.row_count == 0
        assert len(table) == 0
        assert table.is_consistent

    def test_only_populated_columns_are_included(self):
        table = build(action=["✅ Modified"], zoneName=["Notes"])
        names = [name for name, _ in table.included_columns()]
        assert names == ["action", "zoneName"]

    def test_columns_keep_display_order(self):
        table = build(reason=["purged"], action=["🗑️ Deleted"], ownerName=["_o"])
        names = [name for name, _ in table.included_columns()]
        assert names == ["action", "ownerName", "reason"]

    def test_inconsistent_shape_is_reported(self):
        table = build(action=["a", "b"], zoneName=["z"])
        assert not table.is_consistent
        assert table.row_count == 2

    def test_unknown_column_raises(self):
        table = EventTable()
        with pytest.raises(TableShapeError) as exc_info:
            table.append("size", "1")
        assert exc_info.value.error_code == "TABLE_UNKNOWN_COLUMN"
        assert exc_info.value.details["column"] == "size"


class TestEventTableSorting:
    """Test cases for sort_by and the default render order."""

    def test_sort_by_record_type_then_name(self):
        table = build(
            action=["✅ Modified", "✅ Modified"],
            recordType=["b", "a"],
            recordName=["y", "x"],
        )
        table.render()
        assert table.rows() == [
            ("✅ Modified", "a", "x"),
            ("✅ Modified", "b", "y"),
        ]

    def test_action_sorts_before_record_type(self):
        table = build(
            action=["🗑️ Deleted", "✅ Modified"],
            recordType=["Note", "Note"],
            recordName=["N2", "N1"],
        )
        table.render()
        assert [row[0] for row in table.rows()] == ["✅ Modified", "🗑️ Deleted"]

    def test_action_only_sort(self):
        table = build(
            action=["🛑 Failed save", "✅ Saved", "🗑️ Deleted"],
            zoneName=["c", "a", "b"],
        )
        table.render()
        assert table.rows() == [
            ("✅ Saved", "a"),
            ("🗑️ Deleted", "b"),
            ("🛑 Failed save", "c"),
        ]

    def test_action_only_sort_is_stable(self):
        table = build(action=["x", "x", "x"], zoneName=["3", "1", "2"])
        table.render()
        assert [row[1] for row in table.rows()] == ["3", "1", "2"]

    def test_insertion_order_without_action(self):
        table = build(zoneName=["b", "a"])
        table.render()
        assert table.rows() == [("b",), ("a",)]

    def test_sort_by_ignores_missing_columns(self):
        table = build(zoneName=["b", "a"])
        table.sort_by("action", "recordType")
        assert table.rows() == [("b",), ("a",)]

    def test_sort_keeps_columns_aligned(self):
        table = build(
            action=["b", "a"],
            zoneName=["zone-b", "zone-a"],
            ownerName=["owner-b", "owner-a"],
        )
        table.sort_by("action")
        assert table.rows() == [
            ("a", "zone-a", "owner-a"),
            ("b", "zone-b", "owner-b"),
        ]


class TestEventTableRender:
    """Test cases for rendered text."""

    def test_empty_table_renders_empty_string(self):
        assert EventTable().render() == ""

    def test_header_and_cells_are_rendered(self):
        text = build(
            action=["✅ Modified"], recordType=["Note"], recordName=["N1"]
        ).render()
        header = text.splitlines()[0]
        assert "action" in header
        assert "recordType" in header
        assert "recordName" in header
        assert "Note" in text
        assert "N1" in text

    def test_no_row_indices_or_footers(self):
        text = build(action=["a", "b"], zoneName=["z1", "z2"]).render()
        assert "rows" not in text
        assert "String" not in text
        assert len(text.splitlines()) == 4  # header, rule, two rows

    def test_continuation_lines_are_indented(self):
        text = build(action=["a", "b"], zoneName=["z1", "z2"]).render()
        first, *rest = text.splitlines()
        assert not first.startswith(" ")
        assert rest
        assert all(line.startswith(INDENT) for line in rest)

    def test_no_trailing_whitespace(self):
        text = build(action=["a", "bbbbbbbbbb"], zoneName=["", "z"]).render()
        assert all(line == line.rstrip() for line in text.splitlines())

    def test_markup_is_not_interpreted(self):
        text = build(recordName=["[bold]N1[/bold]"]).render()
        assert "[bold]N1[/bold]" in text

    def test_long_cells_are_elided(self):
        long_name = "n" * 200
        text = build(action=["✅ Saved"], recordName=[long_name]).render()
        assert "…" in text
        assert "n" * (MAX_CELL_WIDTH + 1) not in text

    def test_lines_fit_maximum_width(self):
        table = build(
            action=["✅ Saved"],
            recordType=["t" * 70],
            recordName=["r" * 70],
            error=["e" * 70],
        )
        lines = (INDENT + table.render()).splitlines()
        assert all(len(line) <= MAX_LINE_WIDTH for line in lines)

    def test_row_cap_with_overflow_marker(self):
        count = MAX_ROWS + 10
        table = build(
            action=["✅ Saved"] * count,
            recordType=["Note"] * count,
            recordName=[f"rec-{index:03d}" for index in range(count)],
        )
        text = table.render()
        shown = [line for line in text.splitlines() if "rec-" in line]
        assert len(shown) == MAX_ROWS
        assert "rec-000" in text
        assert "rec-059" not in text
        assert text.splitlines()[-1] == f"{INDENT}… 10 more rows"

    def test_no_overflow_marker_at_cap(self):
        table = build(
            action=["✅ Saved"] * MAX_ROWS,
            recordName=[f"rec-{index:03d}" for index in range(MAX_ROWS)],
        )
        assert "more rows" not in table.render()

    def test_render_is_idempotent(self):
        table = build(
            action=["🗑️ Deleted", "✅ Modified"],
            recordType=["Note", "Tag"],
            recordName=["N2", "T1"],
        )
        assert table.render() == table.render()
