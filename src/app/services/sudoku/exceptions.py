"""Sudoku Scraper Custom Exceptions.

Hierarchy:
    SudokuScraperException (base)
    ├── ExecutableNotFoundError   - No chromedriver binary could be resolved
    ├── SessionInitError          - Chrome session construction failed
    ├── DriverUnavailableError    - No live session when a scrape needs one
    ├── InvalidDifficultyError    - Difficulty label cannot be used in the URL
    ├── BoardLoadTimeoutError     - Board marker never appeared on the page
    └── ExtractionIncompleteError - In-page extraction returned invalid data
"""


class SudokuScraperException(Exception):
    """Base exception for all Sudoku scraper errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ExecutableNotFoundError(SudokuScraperException):
    """No chromedriver binary found globally or at the local fallback path.

    Fatal for the current process until the environment is corrected.
    """

    def __init__(self, message: str, searched: list[str] | None = None) -> None:
        super().__init__(message, {"searched": searched or []})
        self.searched = searched or []


class SessionInitError(SudokuScraperException):
    """Chrome session construction failed.

    Any partially created session has already been torn down when this is raised.
    """

    def __init__(self, message: str, executable_path: str | None = None) -> None:
        super().__init__(message, {"executable_path": executable_path} if executable_path else None)
        self.executable_path = executable_path


class DriverUnavailableError(SudokuScraperException):
    """A scrape was attempted but no session could be made ready.

    Raised when another caller's initialization is still in flight; the caller must retry.
    """

    def __init__(self, message: str, difficulty: str | None = None) -> None:
        super().__init__(message, {"difficulty": difficulty} if difficulty else None)
        self.difficulty = difficulty


class InvalidDifficultyError(SudokuScraperException):
    """Difficulty label is blank or contains characters that would alter the URL."""

    def __init__(self, message: str, difficulty: str | None = None) -> None:
        super().__init__(message, {"difficulty": difficulty})
        self.difficulty = difficulty


class BoardLoadTimeoutError(SudokuScraperException):
    """Page navigated but the puzzle board marker never appeared."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        timeout_seconds: float | None = None,
        selector: str | None = None,
    ) -> None:
        super().__init__(
            message,
            {
                "url": url,
                "timeout_seconds": timeout_seconds,
                "selector": selector,
            },
        )
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.selector = selector


class ExtractionIncompleteError(SudokuScraperException):
    """In-page extraction ran but returned structurally invalid data."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(message, {"url": url, "reason": reason})
        self.url = url
        self.reason = reason  # "missing_payload", "missing_cells", "bad_position", ...


__all__ = [
    "SudokuScraperException",
    "ExecutableNotFoundError",
    "SessionInitError",
    "DriverUnavailableError",
    "InvalidDifficultyError",
    "BoardLoadTimeoutError",
    "ExtractionIncompleteError",
]
