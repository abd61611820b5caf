"""
Sudoku Scraper - Grid Model

Maps the flat, DOM-ordered cell list of the board onto rows, columns
and 3x3 boxes, and reshapes page payloads into 9x9 grids.

Canonical position of linear index i:
    row = i // 9
    col = i % 9
    box = (row // 3) * 3 + (col // 3)
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple

from ...schemas.sudoku import ALL_CANDIDATES, Grid, SudokuCell
from .exceptions import ExtractionIncompleteError

GRID_SIZE = 9
BOX_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE

# parseInt semantics: optional whitespace, then leading digits
_LEADING_INT = re.compile(r"\s*(\d+)")


class CellPosition(NamedTuple):
    row: int
    col: int
    box: int


def cell_position(index: int) -> CellPosition:
    """Row, column and box of a linear index (0-80)."""
    if not 0 <= index < CELL_COUNT:
        raise ValueError(f"Cell index out of range: {index}")
    row, col = divmod(index, GRID_SIZE)
    box = (row // BOX_SIZE) * BOX_SIZE + (col // BOX_SIZE)
    return CellPosition(row, col, box)


def parse_label(label: Any) -> int | None:
    """
    Parse a cell's accessible label into a digit.

    Labels look like "5" (older markup may append words, e.g. "5 given").
    Returns None when no leading digit 1-9 is present.
    """
    if label is None:
        return None
    match = _LEADING_INT.match(str(label))
    if not match:
        return None
    value = int(match.group(1))
    return value if 1 <= value <= 9 else None


def build_cell(index: int, prefilled: bool, label: Any = None) -> SudokuCell:
    """
    Build the cell at `index`.

    A pre-filled cell takes its value from the label and its candidate
    set collapses to that value; any other cell keeps all nine digits.
    """
    position = cell_position(index)

    if not prefilled:
        return SudokuCell(index=index, row=position.row, col=position.col, box=position.box)

    value = parse_label(label)
    if value is None:
        raise ExtractionIncompleteError(
            f"Pre-filled cell {index} has unreadable label {label!r}",
            reason="bad_label",
        )
    return SudokuCell(
        index=index,
        row=position.row,
        col=position.col,
        box=position.box,
        prefilled=True,
        value=value,
        candidates=frozenset({value}),
    )


def cells_from_page(records: Sequence[Mapping[str, Any]]) -> tuple[SudokuCell, ...]:
    """
    Turn the records returned by the in-page script into cells.

    Records arrive in DOM order; any record whose reported position
    disagrees with its index is rejected.

    Raises:
        ExtractionIncompleteError: Not a list, wrong record count or
            inconsistent positions
    """
    if not _is_list_like(records):
        raise ExtractionIncompleteError(
            f"Cell records are not a list: {type(records).__name__}",
            reason="missing_cells",
        )
    if len(records) != CELL_COUNT:
        raise ExtractionIncompleteError(
            f"Expected {CELL_COUNT} cells, page returned {len(records)}",
            reason="cell_count",
        )

    cells = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise ExtractionIncompleteError(f"Cell {index} is not an object: {record!r}", reason="bad_record")

        expected = cell_position(index)
        reported = (record.get("row", expected.row), record.get("col", expected.col), record.get("box", expected.box))
        if record.get("index", index) != index or tuple(reported) != tuple(expected):
            raise ExtractionIncompleteError(
                f"Cell {index} reported position {reported}, expected {tuple(expected)}",
                reason="bad_position",
            )

        cells.append(build_cell(index, bool(record.get("prefilled")), record.get("label")))

    return tuple(cells)


def puzzle_grid(cells: Sequence[SudokuCell]) -> Grid:
    """9x9 grid of given values, 0 for blank cells."""
    grid = [[0] * GRID_SIZE for _ in range(GRID_SIZE)]
    for cell in cells:
        grid[cell.row][cell.col] = cell.value or 0
    return grid


def _digit(value: Any, allow_blank: bool) -> int:
    if value is None:
        if allow_blank:
            return 0
        raise ExtractionIncompleteError("Grid has an empty cell", reason="missing_solution")
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ExtractionIncompleteError(f"Grid value is not a digit: {value!r}", reason="bad_digit")
    try:
        digit = int(value)
    except ValueError as e:
        raise ExtractionIncompleteError(f"Grid value is not a digit: {value!r}", reason="bad_digit") from e
    lowest = 0 if allow_blank else 1
    if not lowest <= digit <= 9:
        raise ExtractionIncompleteError(f"Grid value out of range: {digit}", reason="bad_digit")
    return digit


def _is_list_like(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def reshape_grid(values: Sequence[Any], allow_blank: bool = True) -> Grid:
    """
    Normalize a flat 81-value list or a 9x9 nested list into a 9x9 grid.

    With allow_blank, None becomes 0 (puzzle grids). Without it every
    cell must hold a digit 1-9 (solution grids).

    Raises:
        ExtractionIncompleteError: Any other shape, a non-digit value, or
            a blank cell where none is allowed
    """
    if not _is_list_like(values):
        raise ExtractionIncompleteError(
            f"Grid is not a list: {type(values).__name__}",
            reason="bad_shape",
        )

    if len(values) == CELL_COUNT and not any(_is_list_like(v) for v in values):
        flat = [_digit(v, allow_blank) for v in values]
        return [flat[row * GRID_SIZE : (row + 1) * GRID_SIZE] for row in range(GRID_SIZE)]

    if len(values) == GRID_SIZE and all(_is_list_like(r) and len(r) == GRID_SIZE for r in values):
        return [[_digit(v, allow_blank) for v in row] for row in values]

    raise ExtractionIncompleteError(
        f"Grid has unexpected shape (length {len(values)})",
        reason="bad_shape",
    )


__all__ = [
    "ALL_CANDIDATES",
    "BOX_SIZE",
    "CELL_COUNT",
    "GRID_SIZE",
    "CellPosition",
    "build_cell",
    "cell_position",
    "cells_from_page",
    "parse_label",
    "puzzle_grid",
    "reshape_grid",
]
