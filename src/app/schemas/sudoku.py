from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

Grid = list[list[int]]

ALL_CANDIDATES = frozenset(range(1, 10))


class SudokuCell(BaseModel):
    """One of the 81 board positions, in row-major order."""

    model_config = ConfigDict(frozen=True)

    index: Annotated[int, Field(ge=0, le=80, description="Linear position in row-major order")]
    row: Annotated[int, Field(ge=0, le=8)]
    col: Annotated[int, Field(ge=0, le=8)]
    box: Annotated[int, Field(ge=0, le=8, description="3x3 block, numbered left-to-right, top-to-bottom")]
    prefilled: bool = False
    value: Annotated[
        int | None,
        Field(default=None, ge=1, le=9, description="Given digit for pre-filled cells"),
    ]
    candidates: Annotated[
        frozenset[int],
        Field(
            default=ALL_CANDIDATES,
            description="Digits still possible for this cell; the given digit alone when pre-filled",
        ),
    ]


class SudokuPuzzle(BaseModel):
    """Puzzle extracted from the source page. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    puzzle: Annotated[Grid, Field(description="9x9 givens, 0 where blank")]
    solution: Annotated[Grid, Field(description="9x9 solution digits")]
    difficulty: Annotated[str, Field(description="Difficulty label as requested", examples=["Easy", "Hard"])]
    cells: Annotated[tuple[SudokuCell, ...], Field(default=(), repr=False)]
    source_url: str | None = None


class SudokuPuzzleRead(BaseModel):
    """API response body for a scraped puzzle."""

    puzzle: Grid
    solution: Grid
    difficulty: str
    source_url: str | None = None
    cells: list[SudokuCell] | None = None


class HealthRead(BaseModel):
    status: str
    driver_live: bool
