from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from src.app.schemas.sudoku import SudokuPuzzle
from src.app.services.sudoku.config import ConfigLoader, ScraperConfig
from src.app.services.sudoku.grid import cells_from_page, puzzle_grid, reshape_grid

SESSION_MODULE = "src.app.services.sudoku.session"


def make_page_payload(
    prefilled: dict[int, str] | None = None,
    solution: Any = None,
    cell_count: int = 81,
) -> dict[str, Any]:
    """Build what the in-page extraction script returns for a board.

    Args:
        prefilled: index -> aria-label of pre-filled cells
        solution: solution value to embed; defaults to a flat 81-digit list
        cell_count: number of cell records to emit
    """
    prefilled = prefilled or {}
    cells = []
    for index in range(cell_count):
        row, col = index // 9, index % 9
        cells.append(
            {
                "index": index,
                "row": row,
                "col": col,
                "box": (row // 3) * 3 + (col // 3),
                "prefilled": index in prefilled,
                "label": prefilled.get(index, "empty"),
            }
        )
    if solution is None:
        solution = [((index % 9) + 1) for index in range(81)]
    return {"cells": cells, "solution": solution}


@pytest.fixture
def scraper_config(tmp_path) -> ScraperConfig:
    """Default config with a local fallback chromedriver that exists."""
    fallback = tmp_path / "chromedriver"
    fallback.write_text("")
    return ConfigLoader.merge(ConfigLoader.default(), {"driver": {"fallback_path": str(fallback)}})


@pytest.fixture
def fake_driver() -> MagicMock:
    """Mock Selenium WebDriver with a board that is already present."""
    driver = MagicMock(name="WebDriver")
    driver.find_element.return_value = MagicMock(name="board")
    driver.execute_script.return_value = make_page_payload()
    return driver


@pytest.fixture
def chrome_patches(fake_driver: MagicMock) -> Generator[dict[str, MagicMock], Any, None]:
    """Patch Chrome construction and executable lookup in the session module."""
    with (
        patch(f"{SESSION_MODULE}.webdriver.Chrome", return_value=fake_driver) as chrome,
        patch(f"{SESSION_MODULE}.ChromeService") as service,
        patch(f"{SESSION_MODULE}.resolve_executable_path", return_value="/usr/bin/chromedriver") as resolve,
    ):
        yield {"chrome": chrome, "service": service, "resolve": resolve}


@pytest.fixture
def page_payload():
    """Factory for in-page extraction results (see make_page_payload)."""
    return make_page_payload


@pytest.fixture
def sample_puzzle() -> SudokuPuzzle:
    """Easy puzzle with givens at (0, 0) = 5 and (8, 8) = 7."""
    payload = make_page_payload(prefilled={0: "5", 80: "7"})
    cells = cells_from_page(payload["cells"])
    return SudokuPuzzle(
        puzzle=puzzle_grid(cells),
        solution=reshape_grid(payload["solution"]),
        difficulty="Easy",
        cells=cells,
        source_url="https://www.nytimes.com/puzzles/sudoku/easy",
    )
