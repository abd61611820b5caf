"""
Sudoku Scraper - Driver Lifecycle Manager

Owns exactly one headless Chrome session driven by Selenium WebDriver.

Lifecycle:
- Created by initialize() (explicitly or implicitly on the first scrape)
- Single-flight: a call arriving while initialization is in flight
  returns ALREADY_INITIALIZING instead of creating a second session
- Destroyed by cleanup(), which never raises

WebDriver calls are blocking, so they run on a single-thread executor
and are awaited from the event loop.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from functools import partial
from typing import Any, Callable, TypeVar

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.remote.webdriver import WebDriver

from .config import ConfigLoader, ScraperConfig
from .driver_path import resolve_executable_path
from .exceptions import DriverUnavailableError, SessionInitError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InitResult(str, Enum):
    """Outcome of DriverSession.initialize()."""

    CREATED = "created"
    ALREADY_LIVE = "already_live"
    ALREADY_INITIALIZING = "already_initializing"


class DriverSession:
    """
    Single headless Chrome session with guarded initialization.

    Usage:
        async with DriverSession(config) as session:
            await session.initialize()
            title = await session.run(lambda: session.driver.title)
    """

    def __init__(
        self,
        config: ScraperConfig | None = None,
        thread_pool: ThreadPoolExecutor | None = None,
    ) -> None:
        """
        Initialize DriverSession. No browser is started here.

        Args:
            config: Scraper configuration. Defaults are used if None
            thread_pool: Optional executor for sync-to-async bridging
        """
        self.config = config or ConfigLoader.default()
        self._driver: WebDriver | None = None
        self._initializing = False
        self._state_lock = threading.Lock()
        # One worker: WebDriver handles are not thread-safe
        self._thread_pool = thread_pool or ThreadPoolExecutor(max_workers=1, thread_name_prefix="sudoku_driver")
        self._owns_pool = thread_pool is None

    async def __aenter__(self) -> "DriverSession":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    @property
    def is_live(self) -> bool:
        return self._driver is not None

    @property
    def is_initializing(self) -> bool:
        return self._initializing

    @property
    def driver(self) -> WebDriver:
        """The live WebDriver handle."""
        if self._driver is None:
            raise DriverUnavailableError("Selenium WebDriver is not initialized")
        return self._driver

    async def run(self, func: Callable[..., T], *args: Any) -> T:
        """Run a blocking WebDriver call on the session executor."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(self._thread_pool, partial(func, *args))

    async def initialize(self) -> InitResult:
        """
        Start the Chrome session if none exists.

        Returns:
            CREATED when this call built the session, ALREADY_LIVE when a
            session existed, ALREADY_INITIALIZING when another call is
            building one right now (no queuing; retry later).

        Raises:
            ExecutableNotFoundError: No chromedriver binary could be resolved
            SessionInitError: Chrome failed to start or to accept timeouts
        """
        with self._state_lock:
            if self._driver is not None:
                logger.info("Driver already initialized")
                return InitResult.ALREADY_LIVE
            if self._initializing:
                logger.info("Driver is already initializing")
                return InitResult.ALREADY_INITIALIZING
            self._initializing = True

        loop = asyncio.get_event_loop()
        init_future = loop.run_in_executor(self._thread_pool, self._init_driver_sync)

        try:
            logger.info("Initializing Selenium WebDriver...")
            try:
                driver = await asyncio.shield(init_future)
            except asyncio.CancelledError:
                # Chrome keeps starting on the worker thread
                init_future.add_done_callback(self._discard_orphaned_driver)
                raise
            self._driver = driver
            logger.info("Selenium WebDriver initialized successfully")
            return InitResult.CREATED
        except Exception:
            self._driver = None
            raise
        finally:
            with self._state_lock:
                self._initializing = False

    def _build_options(self) -> ChromeOptions:
        options = ChromeOptions()
        for argument in self.config.browser.chrome_arguments():
            options.add_argument(argument)
        return options

    def _init_driver_sync(self) -> WebDriver:
        """Synchronous browser construction, executed on the session thread."""
        executable_path = resolve_executable_path(self.config.driver)
        logger.info(f"Using chromedriver at: {executable_path}")

        driver: WebDriver | None = None
        try:
            driver = webdriver.Chrome(
                options=self._build_options(),
                service=ChromeService(executable_path=executable_path),
            )
            driver.set_page_load_timeout(self.config.timeouts.page_load)
            driver.implicitly_wait(self.config.timeouts.implicit_wait)
            return driver
        except Exception as e:
            logger.error(f"Failed to initialize Selenium WebDriver: {e}")
            if driver is not None:
                self._quit_quietly(driver)
            raise SessionInitError(
                f"Failed to initialize Selenium WebDriver: {e}",
                executable_path=executable_path,
            ) from e

    @staticmethod
    def _quit_quietly(driver: WebDriver) -> None:
        try:
            driver.quit()
        except Exception as e:
            logger.error(f"Error quitting driver during initialization failure: {e}")

    def _discard_orphaned_driver(self, future: "asyncio.Future[WebDriver]") -> None:
        """Quit a driver whose initialize() call was cancelled while Chrome was starting."""
        if future.cancelled() or future.exception() is not None:
            return
        driver = future.result()
        logger.warning("Initialization was cancelled, quitting the orphaned driver")
        try:
            self._thread_pool.submit(self._quit_quietly, driver)
        except RuntimeError:
            # Executor already shut down
            self._quit_quietly(driver)

    async def cleanup(self) -> None:
        """Terminate the session. Never raises; the handle is always cleared."""
        if self._driver is None:
            return

        try:
            logger.info("Cleaning up Selenium WebDriver...")
            await self.run(self._driver.quit)
            logger.info("Selenium WebDriver cleaned up successfully")
        except Exception as e:
            logger.error(f"Error during cleanup: {e}")
        finally:
            self._driver = None

    async def close(self) -> None:
        """Clean up the session and release the executor if we own it."""
        await self.cleanup()

        if self._owns_pool and self._thread_pool:
            self._thread_pool.shutdown(wait=False)

        logger.debug("DriverSession closed")


__all__ = [
    "DriverSession",
    "InitResult",
]
