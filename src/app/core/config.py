import os
from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    APP_NAME: str = "Sudoku Scraper"
    APP_DESCRIPTION: str | None = "Extracts Sudoku puzzles from a live, JavaScript-rendered puzzle page."
    APP_VERSION: str | None = "0.1.0"
    LICENSE_NAME: str | None = None
    CONTACT_NAME: str | None = None
    CONTACT_EMAIL: str | None = None


class EnvironmentOption(str, Enum):
    LOCAL = "local"
    STAGING = "staging"
    PRODUCTION = "production"


class EnvironmentSettings(BaseSettings):
    ENVIRONMENT: EnvironmentOption = EnvironmentOption.LOCAL


class CORSSettings(BaseSettings):
    CORS_ORIGINS: list[str] = ["*"]
    CORS_METHODS: list[str] = ["*"]
    CORS_HEADERS: list[str] = ["*"]


class SudokuScraperSettings(BaseSettings):
    """Configuration for the headless Chrome puzzle scraper.

    Driver lifecycle:
    - One Chrome session per DriverSession, created lazily on the first scrape
    - Page load / implicit wait timeouts are session-wide
    - Board wait timeout applies per scrape call
    """

    # ============================================
    # Source Page
    # ============================================
    # {difficulty} is replaced by the lower-cased difficulty label
    SUDOKU_SOURCE_URL_TEMPLATE: str = "https://www.nytimes.com/puzzles/sudoku/{difficulty}"

    # ============================================
    # Browser Settings
    # ============================================
    SUDOKU_HEADLESS: bool = True
    SUDOKU_WINDOW_WIDTH: int = 1920
    SUDOKU_WINDOW_HEIGHT: int = 1080

    # ============================================
    # Timeout Settings (seconds)
    # ============================================
    SUDOKU_PAGE_LOAD_TIMEOUT: int = 30
    SUDOKU_IMPLICIT_WAIT: int = 10
    SUDOKU_BOARD_WAIT_TIMEOUT: int = 10

    # ============================================
    # Page Markers
    # ============================================
    SUDOKU_BOARD_SELECTOR: str = ".su-board"
    SUDOKU_CELL_SELECTOR: str = ".su-board .su-cell"
    SUDOKU_PREFILLED_CLASS: str = "prefilled"

    # ============================================
    # Chromedriver Paths (set via environment in Docker)
    # ============================================
    # Explicit path wins over the global lookup
    SUDOKU_CHROMEDRIVER_PATH: str | None = None
    # None = SeleniumBase driver directory (populated by `sbase get chromedriver`)
    SUDOKU_CHROMEDRIVER_FALLBACK_PATH: str | None = None

    # ============================================
    # Logging
    # ============================================
    SUDOKU_LOG_LEVEL: str = "INFO"


class Settings(
    AppSettings,
    EnvironmentSettings,
    CORSSettings,
    SudokuScraperSettings,
):
    model_config = SettingsConfigDict(
        env_file=os.path.join(os.path.dirname(os.path.realpath(__file__)), "..", "..", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
