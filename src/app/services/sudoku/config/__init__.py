"""
Sudoku Scraper - Configuration Module

Builds the typed scraper configuration from application settings,
JSON files or plain dicts.

Usage:
    from .config import ConfigLoader

    # From environment-driven settings
    config = ConfigLoader.from_settings(settings)

    # Access timeouts
    board_wait = config.timeouts.board_wait
"""

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .scraper import BrowserConfig, DriverConfig, ScraperConfig, SelectorsConfig, TimeoutsConfig

if TYPE_CHECKING:
    from ....core.config import Settings

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Configuration loader for the Sudoku scraper.

    Usage:
        # From settings
        config = ConfigLoader.from_settings(settings)

        # From file
        config = ConfigLoader.from_file("scraper.json")

        # Default config
        config = ConfigLoader.default()
    """

    @classmethod
    def from_settings(cls, settings: "Settings") -> ScraperConfig:
        """
        Build configuration from application settings.

        Args:
            settings: Application settings containing SUDOKU_* values

        Returns:
            ScraperConfig instance
        """
        return ScraperConfig(
            url_template=settings.SUDOKU_SOURCE_URL_TEMPLATE,
            browser=BrowserConfig(
                headless=settings.SUDOKU_HEADLESS,
                window_width=settings.SUDOKU_WINDOW_WIDTH,
                window_height=settings.SUDOKU_WINDOW_HEIGHT,
            ),
            timeouts=TimeoutsConfig(
                page_load=settings.SUDOKU_PAGE_LOAD_TIMEOUT,
                implicit_wait=settings.SUDOKU_IMPLICIT_WAIT,
                board_wait=settings.SUDOKU_BOARD_WAIT_TIMEOUT,
            ),
            selectors=SelectorsConfig(
                board=settings.SUDOKU_BOARD_SELECTOR,
                cell=settings.SUDOKU_CELL_SELECTOR,
                prefilled_class=settings.SUDOKU_PREFILLED_CLASS,
            ),
            driver=DriverConfig(
                executable_path=settings.SUDOKU_CHROMEDRIVER_PATH,
                fallback_path=settings.SUDOKU_CHROMEDRIVER_FALLBACK_PATH,
            ),
        )

    @classmethod
    def from_file(cls, path: str | Path) -> ScraperConfig:
        """
        Load configuration from a JSON file.

        Raises:
            FileNotFoundError: If file not found
            ValueError: If JSON invalid
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file: {e}") from e

        logger.info(f"Loaded configuration from {path}")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ScraperConfig:
        """Load configuration from a dictionary. Keys starting with _ are comments."""
        clean_data = {k: v for k, v in data.items() if not k.startswith("_")}

        try:
            return ScraperConfig.model_validate(clean_data)
        except Exception as e:
            raise ValueError(f"Configuration validation failed: {e}") from e

    @classmethod
    def default(cls) -> ScraperConfig:
        return ScraperConfig()

    @classmethod
    def merge(
        cls,
        base: ScraperConfig,
        overrides: dict[str, Any],
    ) -> ScraperConfig:
        """
        Merge override values into a base configuration.

        Args:
            base: Base configuration
            overrides: Dictionary of override values

        Returns:
            New ScraperConfig with merged values
        """
        base_dict = base.model_dump()
        cls._deep_merge(base_dict, overrides)
        return cls.from_dict(base_dict)

    @staticmethod
    def _deep_merge(base: dict, overrides: dict) -> None:
        """Recursively merge overrides into base dict (in-place)."""
        for key, value in overrides.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                ConfigLoader._deep_merge(base[key], value)
            else:
                base[key] = value


__all__ = [
    "ConfigLoader",
    "ScraperConfig",
    "BrowserConfig",
    "TimeoutsConfig",
    "SelectorsConfig",
    "DriverConfig",
]
