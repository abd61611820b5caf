"""
Sudoku Scraper - Configuration Models

Pydantic models for the headless Chrome session and the puzzle page markers.
"""

from pydantic import BaseModel, Field


class BrowserConfig(BaseModel):
    """
    Chrome launch configuration.

    The launch flags are fixed; only headless mode and the
    viewport are adjustable.
    """

    headless: bool = True
    window_width: int = Field(default=1920, gt=0)
    window_height: int = Field(default=1080, gt=0)
    extra_arguments: list[str] = Field(default_factory=list)

    def chrome_arguments(self) -> list[str]:
        """Command-line flags passed to Chrome, in launch order."""
        arguments = []
        if self.headless:
            arguments.append("--headless=new")
        arguments.extend(
            [
                "--no-sandbox",
                "--disable-dev-shm-usage",
                "--disable-gpu",
                f"--window-size={self.window_width},{self.window_height}",
                "--disable-extensions",
                "--disable-software-rasterizer",
            ]
        )
        arguments.extend(self.extra_arguments)
        return arguments


class TimeoutsConfig(BaseModel):
    """Operation timeouts configuration (seconds)."""

    page_load: int = Field(default=30, gt=0)
    implicit_wait: int = Field(default=10, ge=0)
    board_wait: int = Field(default=10, gt=0)


class SelectorsConfig(BaseModel):
    """DOM markers of the puzzle page."""

    board: str = ".su-board"
    cell: str = ".su-board .su-cell"
    prefilled_class: str = "prefilled"


class DriverConfig(BaseModel):
    """Chromedriver location overrides."""

    executable_path: str | None = None
    fallback_path: str | None = None
    binary_name: str = "chromedriver"


class ScraperConfig(BaseModel):
    """
    Complete scraper configuration.

    Provides structured configuration for:
    - Chrome launch flags
    - Session and board wait timeouts
    - Puzzle page markers
    - Chromedriver resolution
    """

    url_template: str = "https://www.nytimes.com/puzzles/sudoku/{difficulty}"

    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    timeouts: TimeoutsConfig = Field(default_factory=TimeoutsConfig)
    selectors: SelectorsConfig = Field(default_factory=SelectorsConfig)
    driver: DriverConfig = Field(default_factory=DriverConfig)


__all__ = [
    "ScraperConfig",
    "BrowserConfig",
    "TimeoutsConfig",
    "SelectorsConfig",
    "DriverConfig",
]
