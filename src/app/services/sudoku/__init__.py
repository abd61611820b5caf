# ============================================
# SUDOKU - Live Puzzle Scraper
# ============================================
#
# Extracts the current Sudoku puzzle for a difficulty from a
# JavaScript-rendered puzzle page using headless Chrome.
#
# Components:
#   DriverSession: owns the single Chrome session (single-flight init)
#   PuzzleScraper: navigate -> wait for board -> in-page extraction
#   grid: index -> (row, col, box) mapping and grid reshaping
# ============================================

from .config import ConfigLoader, ScraperConfig
from .driver_path import resolve_executable_path
from .exceptions import (
    BoardLoadTimeoutError,
    DriverUnavailableError,
    ExecutableNotFoundError,
    ExtractionIncompleteError,
    InvalidDifficultyError,
    SessionInitError,
    SudokuScraperException,
)
from .grid import CellPosition, cell_position
from .scraper import PuzzleScraper, scrape_puzzle
from .session import DriverSession, InitResult

__all__ = [
    # Extractor
    "PuzzleScraper",
    "scrape_puzzle",
    # Session
    "DriverSession",
    "InitResult",
    "resolve_executable_path",
    # Grid
    "CellPosition",
    "cell_position",
    # Config
    "ConfigLoader",
    "ScraperConfig",
    # Exceptions
    "SudokuScraperException",
    "ExecutableNotFoundError",
    "SessionInitError",
    "DriverUnavailableError",
    "InvalidDifficultyError",
    "BoardLoadTimeoutError",
    "ExtractionIncompleteError",
]
