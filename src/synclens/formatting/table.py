"""
Column-oriented tables for rendering sync change sets.

An ``EventTable`` is filled one column at a time while a change-set event is
walked, then rendered once into aligned plain text with rich. The rendered
text is embedded, indented, inside a single log record.

Layout bounds:
    - MAX_LINE_WIDTH: widest line the table may produce, indentation included
    - MAX_CELL_WIDTH: widest a single cell may be before it is elided
    - MAX_ROWS: rows shown; the rest are summarized as "… N more rows"

Example:
    >>> table = EventTable()
    >>> table.append("action", "✅ Modified")
    >>> table.append("recordType", "Note")
    >>> table.append("recordName", "N1")
    >>> print(table.render())
"""

import io
from typing import Dict, List, Tuple

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from synclens.core.exceptions.custom_exceptions import TableShapeError

MAX_LINE_WIDTH = 120
MAX_CELL_WIDTH = 80
MAX_ROWS = 50

INDENT = "  "

COLUMNS = (
    "action",
    "recordType",
    "recordName",
    "zoneName",
    "ownerName",
    "error",
    "reason",
)


class EventTable:
    """
    Builder owning one ordered list of cells per column.

    Columns that never receive a cell are left out of the rendered table.
    Callers keep every populated column at the same length, padding with
    ``""`` where a row has no value.
    """

    def __init__(self) -> None:
        self._cells: Dict[str, List[str]] = {name: [] for name in COLUMNS}

    def append(self, column: str, value: str) -> None:
        """Append one cell to ``column``."""
        if column not in self._cells:
            raise TableShapeError(
                f"Unknown event table column: {column}",
                error_code="TABLE_UNKNOWN_COLUMN",
                details={"column": column, "columns": list(COLUMNS)},
            )
        self._cells[column].append(value)

    def included_columns(self) -> List[Tuple[str, List[str]]]:
        """Columns holding at least one cell, in display order."""
        return [(name, cells) for name, cells in self._cells.items() if cells]

    @property
    def row_count(self) -> int:
        return max((len(cells) for cells in self._cells.values()), default=0)

    @property
    def is_consistent(self) -> bool:
        """True when every included column has the same number of cells."""
        return len({len(cells) for _, cells in self.included_columns()}) <= 1

    def __len__(self) -> int:
        return self.row_count

    def rows(self) -> List[Tuple[str, ...]]:
        return list(zip(*(cells for _, cells in self.included_columns())))

    def sort_by(self, *keys: str) -> None:
        """
        Stable lexicographic sort of every row on the given columns.

        Keys naming columns without cells are ignored.
        """
        included = self.included_columns()
        names = [name for name, _ in included]
        positions = [names.index(key) for key in keys if key in names]
        if not positions:
            return
        rows = sorted(
            self.rows(), key=lambda row: tuple(row[index] for index in positions)
        )
        for index, name in enumerate(names):
            self._cells[name] = [row[index] for row in rows]

    def _apply_default_sort(self) -> None:
        if self._cells["recordType"]:
            self.sort_by("action", "recordType", "recordName")
        elif self._cells["action"]:
            self.sort_by("action")

    def render(self) -> str:
        """
        Render the table as aligned text.

        Rows are sorted by (action, recordType, recordName) when record types
        are present, else by action. Lines after the first are indented by
        two spaces. An empty table renders as an empty string.
        """
        included = self.included_columns()
        if not included:
            return ""

        self._apply_default_sort()
        rows = self.rows()
        hidden = len(rows) - MAX_ROWS

        table = Table(
            box=box.SIMPLE_HEAD,
            show_edge=False,
            pad_edge=False,
            show_lines=False,
        )
        for name, _ in included:
            table.add_column(
                Text(name),
                max_width=MAX_CELL_WIDTH,
                no_wrap=True,
                overflow="ellipsis",
            )
        for row in rows[:MAX_ROWS]:
            table.add_row(*(Text(cell) for cell in row))

        console = Console(
            file=io.StringIO(),
            width=MAX_LINE_WIDTH - len(INDENT),
            color_system=None,
            force_terminal=False,
            force_jupyter=False,
            highlight=False,
            emoji=False,
            markup=False,
            legacy_windows=False,
        )
        with console.capture() as capture:
            console.print(table)

        lines = [line.rstrip() for line in capture.get().splitlines()]
        while lines and not lines[0]:
            lines.pop(0)
        while lines and not lines[-1]:
            lines.pop()
        if hidden > 0:
            lines.append(f"… {hidden} more rows")
        return ("\n" + INDENT).join(lines)
