"""Unit tests for the Sudoku grid model.

Covers:
- Linear index -> (row, col, box) mapping for all 81 positions
- Accessible label parsing
- Cell construction (pre-filled vs open cells)
- Validation of in-page cell records
- Grid reshaping (flat and nested)
"""

import pytest

from src.app.schemas.sudoku import ALL_CANDIDATES
from src.app.services.sudoku.exceptions import ExtractionIncompleteError
from src.app.services.sudoku.grid import (
    CELL_COUNT,
    build_cell,
    cell_position,
    cells_from_page,
    parse_label,
    puzzle_grid,
    reshape_grid,
)


# =============================================================================
# CELL POSITION TESTS
# =============================================================================
class TestCellPosition:
    """Tests for index -> (row, col, box)."""

    @pytest.mark.parametrize("index", range(81))
    def test_matches_canonical_formula(self, index: int) -> None:
        """Every index maps to row=i//9, col=i%9, box=(row//3)*3+(col//3)."""
        row, col, box = cell_position(index)
        assert row == index // 9
        assert col == index % 9
        assert box == (row // 3) * 3 + (col // 3)

    def test_each_box_has_nine_cells_in_one_block(self) -> None:
        """Boxes partition the board into contiguous 3x3 blocks."""
        boxes: dict[int, list[tuple[int, int]]] = {}
        for index in range(CELL_COUNT):
            row, col, box = cell_position(index)
            boxes.setdefault(box, []).append((row, col))

        assert sorted(boxes) == list(range(9))
        for box, members in boxes.items():
            assert len(members) == 9
            assert {r // 3 for r, _ in members} == {box // 3}
            assert {c // 3 for _, c in members} == {box % 3}

    def test_known_positions(self) -> None:
        assert cell_position(0) == (0, 0, 0)
        assert cell_position(4) == (0, 4, 1)
        assert cell_position(12) == (1, 3, 1)
        assert cell_position(30) == (3, 3, 4)
        assert cell_position(80) == (8, 8, 8)

    def test_named_fields(self) -> None:
        position = cell_position(40)
        assert (position.row, position.col, position.box) == (4, 4, 4)

    @pytest.mark.parametrize("index", [-1, 81, 100])
    def test_out_of_range(self, index: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            cell_position(index)


# =============================================================================
# LABEL PARSING TESTS
# =============================================================================
class TestParseLabel:
    """Tests for aria-label parsing (parseInt semantics)."""

    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("5", 5),
            (" 7", 7),
            ("9 given", 9),
            (3, 3),
            ("empty", None),
            ("", None),
            (None, None),
            ("0", None),
            ("12", None),
        ],
    )
    def test_parse(self, label, expected) -> None:
        assert parse_label(label) == expected


# =============================================================================
# CELL CONSTRUCTION TESTS
# =============================================================================
class TestBuildCell:
    """Tests for build_cell()."""

    def test_open_cell_keeps_all_candidates(self) -> None:
        cell = build_cell(10, prefilled=False, label="empty")
        assert cell.value is None
        assert cell.prefilled is False
        assert cell.candidates == ALL_CANDIDATES
        assert (cell.row, cell.col, cell.box) == (1, 1, 0)

    def test_prefilled_cell_collapses_candidates(self) -> None:
        cell = build_cell(12, prefilled=True, label="9")
        assert cell.value == 9
        assert cell.prefilled is True
        assert cell.candidates == frozenset({9})
        assert (cell.row, cell.col, cell.box) == (1, 3, 1)

    def test_prefilled_cell_with_unreadable_label(self) -> None:
        with pytest.raises(ExtractionIncompleteError) as exc_info:
            build_cell(3, prefilled=True, label="empty")
        assert exc_info.value.reason == "bad_label"

    def test_cells_are_immutable(self) -> None:
        cell = build_cell(0, prefilled=True, label="5")
        with pytest.raises(Exception):
            cell.value = 6


# =============================================================================
# PAGE RECORD TESTS
# =============================================================================
class TestCellsFromPage:
    """Tests for cells_from_page()."""

    def test_full_board(self, page_payload) -> None:
        payload = page_payload(prefilled={0: "5", 80: "7"})
        cells = cells_from_page(payload["cells"])

        assert len(cells) == 81
        assert [c.index for c in cells] == list(range(81))
        assert cells[0].value == 5
        assert cells[80].value == 7
        assert cells[40].value is None

    def test_wrong_cell_count(self, page_payload) -> None:
        payload = page_payload(cell_count=80)
        with pytest.raises(ExtractionIncompleteError) as exc_info:
            cells_from_page(payload["cells"])
        assert exc_info.value.reason == "cell_count"

    def test_inconsistent_box_rejected(self, page_payload) -> None:
        """A record with an off-by-one box is rejected, not silently fixed."""
        payload = page_payload()
        payload["cells"][27]["box"] = 0  # row 3, col 0 belongs to box 3
        with pytest.raises(ExtractionIncompleteError) as exc_info:
            cells_from_page(payload["cells"])
        assert exc_info.value.reason == "bad_position"

    def test_records_without_positions_use_dom_order(self) -> None:
        records = [{"prefilled": False} for _ in range(81)]
        cells = cells_from_page(records)
        assert cells[13].row == 1
        assert cells[13].col == 4
        assert cells[13].box == 1

    @pytest.mark.parametrize("records", [81, "cells", {"0": {}}])
    def test_records_not_a_list(self, records) -> None:
        with pytest.raises(ExtractionIncompleteError) as exc_info:
            cells_from_page(records)
        assert exc_info.value.reason == "missing_cells"

    def test_non_object_record(self, page_payload) -> None:
        payload = page_payload()
        payload["cells"][5] = "cell"
        with pytest.raises(ExtractionIncompleteError) as exc_info:
            cells_from_page(payload["cells"])
        assert exc_info.value.reason == "bad_record"


# =============================================================================
# GRID TESTS
# =============================================================================
class TestGrids:
    """Tests for puzzle_grid() and reshape_grid()."""

    def test_puzzle_grid_zero_for_blanks(self, page_payload) -> None:
        cells = cells_from_page(page_payload(prefilled={4: "3"})["cells"])
        grid = puzzle_grid(cells)

        assert len(grid) == 9
        assert all(len(row) == 9 for row in grid)
        assert grid[0][4] == 3
        assert sum(sum(row) for row in grid) == 3

    def test_reshape_flat(self) -> None:
        grid = reshape_grid(list(range(9)) * 9)
        assert grid[0] == list(range(9))
        assert grid[8] == list(range(9))

    def test_reshape_nested(self) -> None:
        nested = [[(r + c) % 9 + 1 for c in range(9)] for r in range(9)]
        assert reshape_grid(nested) == nested

    def test_reshape_puzzle_blanks_become_zero(self) -> None:
        grid = reshape_grid([None] * 81)
        assert grid == [[0] * 9 for _ in range(9)]

    def test_solution_with_empty_cells_rejected(self) -> None:
        """An all-null solution must not come back as an all-zero grid."""
        with pytest.raises(ExtractionIncompleteError) as exc_info:
            reshape_grid([None] * 81, allow_blank=False)
        assert exc_info.value.reason == "missing_solution"

    def test_solution_with_zero_rejected(self) -> None:
        values = [5] * 81
        values[17] = 0
        with pytest.raises(ExtractionIncompleteError) as exc_info:
            reshape_grid(values, allow_blank=False)
        assert exc_info.value.reason == "bad_digit"

    def test_solution_nested_null_rejected(self) -> None:
        nested = [[1] * 9 for _ in range(9)]
        nested[4][4] = None
        with pytest.raises(ExtractionIncompleteError) as exc_info:
            reshape_grid(nested, allow_blank=False)
        assert exc_info.value.reason == "missing_solution"

    @pytest.mark.parametrize("values", [12345, "1" * 81, {"solution": [1] * 81}, 3.5])
    def test_reshape_non_list(self, values) -> None:
        with pytest.raises(ExtractionIncompleteError) as exc_info:
            reshape_grid(values)
        assert exc_info.value.reason == "bad_shape"

    def test_reshape_numeric_strings(self) -> None:
        grid = reshape_grid(["4"] * 81)
        assert grid[3][3] == 4

    @pytest.mark.parametrize(
        "values",
        [
            [1] * 80,
            [[1] * 9] * 8,
            [[1] * 8] * 9,
        ],
    )
    def test_reshape_bad_shape(self, values) -> None:
        with pytest.raises(ExtractionIncompleteError) as exc_info:
            reshape_grid(values)
        assert exc_info.value.reason == "bad_shape"

    @pytest.mark.parametrize("bad", [10, -1, "x", True, 1.5])
    def test_reshape_bad_digit(self, bad) -> None:
        values = [1] * 81
        values[40] = bad
        with pytest.raises(ExtractionIncompleteError) as exc_info:
            reshape_grid(values)
        assert exc_info.value.reason == "bad_digit"
