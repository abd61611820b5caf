"""
Sudoku Scraper - Puzzle API Endpoints

Serves freshly scraped puzzles to the game UI. All requests share one
Chrome session, so scrapes are serialized with an asyncio.Lock.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from ...schemas.sudoku import SudokuPuzzleRead
from ...services.sudoku import (
    BoardLoadTimeoutError,
    DriverUnavailableError,
    ExecutableNotFoundError,
    ExtractionIncompleteError,
    InvalidDifficultyError,
    PuzzleScraper,
    SessionInitError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/puzzles", tags=["puzzles"])


def get_puzzle_scraper(request: Request) -> PuzzleScraper:
    scraper = getattr(request.app.state, "puzzle_scraper", None)
    if scraper is None:
        raise HTTPException(status_code=503, detail="Puzzle scraper is not available")
    return scraper


@router.get(
    "/{difficulty}",
    response_model=SudokuPuzzleRead,
    response_model_exclude_none=True,
    summary="Scrape the current puzzle for a difficulty",
    description="Navigates the shared headless browser to the puzzle page and extracts givens and solution.",
)
async def get_puzzle(
    difficulty: str,
    request: Request,
    include_cells: bool = Query(default=False, description="Include per-cell position and candidate records"),
    scraper: PuzzleScraper = Depends(get_puzzle_scraper),
) -> dict[str, Any]:
    """
    Scrape a puzzle.

    Error mapping:
    - **422**: difficulty label is not a plain path segment
    - **502**: page returned incomplete puzzle data
    - **503**: no browser session available (retry later)
    - **504**: puzzle board did not load in time
    """
    lock = request.app.state.scrape_lock

    try:
        async with lock:
            puzzle = await scraper.scrape_puzzle(difficulty)
    except InvalidDifficultyError as e:
        raise HTTPException(status_code=422, detail=e.message) from e
    except (DriverUnavailableError, ExecutableNotFoundError, SessionInitError) as e:
        raise HTTPException(status_code=503, detail=e.message) from e
    except BoardLoadTimeoutError as e:
        raise HTTPException(status_code=504, detail=e.message) from e
    except ExtractionIncompleteError as e:
        raise HTTPException(status_code=502, detail=e.message) from e

    body = puzzle.model_dump(exclude={"cells"})
    if include_cells:
        body["cells"] = list(puzzle.cells)
    return body
