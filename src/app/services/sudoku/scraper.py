"""
Sudoku Scraper - Puzzle Extractor

Navigates the shared Chrome session to the per-difficulty puzzle page,
waits for the client-rendered board, runs the in-page extraction payload
and returns an immutable SudokuPuzzle.

Extraction is all-or-nothing: every failure is logged with the difficulty
and re-raised unchanged, and no partial puzzle is ever returned. There are
no automatic retries.

Usage:
    async with PuzzleScraper.from_settings(settings) as scraper:
        puzzle = await scraper.scrape_puzzle("Easy")
        print(puzzle.puzzle)
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from ...schemas.sudoku import SudokuPuzzle
from .config import ConfigLoader, ScraperConfig
from .exceptions import (
    BoardLoadTimeoutError,
    DriverUnavailableError,
    ExtractionIncompleteError,
    InvalidDifficultyError,
    SudokuScraperException,
)
from .grid import cells_from_page, puzzle_grid, reshape_grid
from .page_script import EXTRACT_BOARD_JS, extraction_arguments
from .session import DriverSession

if TYPE_CHECKING:
    from ...core.config import Settings

logger = logging.getLogger(__name__)

_DIFFICULTY_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


class PuzzleScraper:
    """
    Extracts puzzles through a DriverSession it holds.

    The session is a single mutable resource: concurrent scrape_puzzle()
    calls on one scraper must be serialized by the caller.
    """

    def __init__(
        self,
        session: DriverSession | None = None,
        config: ScraperConfig | None = None,
    ) -> None:
        """
        Initialize PuzzleScraper.

        Args:
            session: Driver session to use. A new one is created if None
            config: Scraper configuration. Defaults to the session's
        """
        if config is None:
            config = session.config if session is not None else ConfigLoader.default()
        self.config = config
        self.session = session or DriverSession(config=config)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "PuzzleScraper":
        config = ConfigLoader.from_settings(settings)
        return cls(session=DriverSession(config=config), config=config)

    async def __aenter__(self) -> "PuzzleScraper":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.session.close()

    def difficulty_key(self, difficulty: str) -> str:
        """
        Lower-cased difficulty used in the page URL and the page's game data.

        Raises:
            InvalidDifficultyError: Label is blank or not a plain path segment
        """
        label = (difficulty or "").strip()
        if not _DIFFICULTY_PATTERN.match(label):
            raise InvalidDifficultyError(f"Invalid difficulty label: {difficulty!r}", difficulty=difficulty)
        return label.lower()

    def build_url(self, difficulty: str) -> str:
        """Puzzle page URL for a difficulty label."""
        return self.config.url_template.format(difficulty=self.difficulty_key(difficulty))

    async def scrape_puzzle(self, difficulty: str) -> SudokuPuzzle:
        """
        Scrape the current puzzle for a difficulty.

        Args:
            difficulty: Difficulty label, e.g. "Easy", "Medium", "Hard"

        Returns:
            SudokuPuzzle with givens, solution and per-cell records

        Raises:
            InvalidDifficultyError: Label unusable in the URL
            ExecutableNotFoundError / SessionInitError: Implicit initialization failed
            DriverUnavailableError: No session after the initialization attempt
            BoardLoadTimeoutError: Board marker never appeared
            ExtractionIncompleteError: Page returned invalid puzzle data
        """
        try:
            key = self.difficulty_key(difficulty)
            url = self.config.url_template.format(difficulty=key)

            if not self.session.is_live:
                logger.info("Driver not initialized, attempting to initialize...")
                await self.session.initialize()

                if not self.session.is_live:
                    raise DriverUnavailableError(
                        "Failed to initialize driver after attempt",
                        difficulty=difficulty,
                    )

            driver = self.session.driver

            logger.info(f"Navigating to URL: {url}")
            await self.session.run(driver.get, url)

            logger.info("Waiting for puzzle board to load...")
            await self._wait_for_board(driver, url)
            logger.info("Puzzle board loaded successfully")

            logger.info("Extracting puzzle data...")
            payload = await self.session.run(
                driver.execute_script,
                EXTRACT_BOARD_JS,
                *extraction_arguments(
                    self.config.selectors.cell,
                    self.config.selectors.prefilled_class,
                    key,
                ),
            )

            puzzle = self._build_puzzle(payload, difficulty.strip(), url)
            givens = sum(1 for cell in puzzle.cells if cell.prefilled)
            logger.info(f"Extracted {difficulty} puzzle: {givens} givens")
            logger.debug(f"Puzzle data: difficulty={difficulty}, puzzle={puzzle.puzzle}, solution={puzzle.solution}")
            return puzzle

        except SudokuScraperException as e:
            logger.error(f"Error scraping {difficulty} puzzle: {e}")
            raise
        except Exception as e:
            logger.exception(f"Unexpected error scraping {difficulty} puzzle: {e}")
            raise

    async def _wait_for_board(self, driver: WebDriver, url: str) -> None:
        selector = self.config.selectors.board
        timeout = self.config.timeouts.board_wait

        def _wait() -> None:
            WebDriverWait(driver, timeout).until(EC.presence_of_element_located((By.CSS_SELECTOR, selector)))

        try:
            await self.session.run(_wait)
        except TimeoutException as e:
            raise BoardLoadTimeoutError(
                f"Puzzle board did not load within {timeout}s",
                url=url,
                timeout_seconds=timeout,
                selector=selector,
            ) from e

    def _build_puzzle(self, payload: Any, difficulty: str, url: str) -> SudokuPuzzle:
        """Validate the in-page payload and reshape it into a SudokuPuzzle."""
        if not isinstance(payload, Mapping):
            raise ExtractionIncompleteError("Failed to extract puzzle data", url=url, reason="missing_payload")

        records = payload.get("cells")
        solution = payload.get("solution")

        if not records:
            raise ExtractionIncompleteError("Failed to extract puzzle data", url=url, reason="missing_cells")
        if not solution:
            raise ExtractionIncompleteError("Failed to extract solution data", url=url, reason="missing_solution")

        try:
            cells = cells_from_page(records)
            solution_grid = reshape_grid(solution, allow_blank=False)
        except ExtractionIncompleteError as e:
            raise ExtractionIncompleteError(e.message, url=url, reason=e.reason) from e

        return SudokuPuzzle(
            puzzle=puzzle_grid(cells),
            solution=solution_grid,
            difficulty=difficulty,
            cells=cells,
            source_url=url,
        )


async def scrape_puzzle(difficulty: str, settings: "Settings | None" = None) -> SudokuPuzzle:
    """
    One-shot scrape: start a session, extract one puzzle, tear down.

    Args:
        difficulty: Difficulty label
        settings: Application settings (defaults to the global settings)
    """
    if settings is None:
        from ...core.config import settings as app_settings

        settings = app_settings

    async with PuzzleScraper.from_settings(settings) as scraper:
        return await scraper.scrape_puzzle(difficulty)


__all__ = ["PuzzleScraper", "scrape_puzzle"]
