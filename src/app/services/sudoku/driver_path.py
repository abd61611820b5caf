"""Chromedriver executable resolution.

Resolution order:
1. Explicit path from configuration (SUDOKU_CHROMEDRIVER_PATH)
2. Globally installed binary (`where` on Windows, `which -a` elsewhere),
   first candidate ending with the expected binary suffix
3. Local fallback: configured fallback path, or the SeleniumBase driver
   directory populated by `sbase get chromedriver`
"""

import logging
import os
import subprocess
import sys
from pathlib import Path

from .config import DriverConfig
from .exceptions import ExecutableNotFoundError

logger = logging.getLogger(__name__)

LOOKUP_TIMEOUT_SECONDS = 10


def binary_suffix(binary_name: str = "chromedriver", platform: str | None = None) -> str:
    """Expected file name suffix of the driver binary on this platform."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return f"{binary_name}.exe"
    return binary_name


def _locator_command(binary_name: str, platform: str | None = None) -> list[str]:
    platform = platform or sys.platform
    if platform.startswith("win"):
        return ["where", binary_name]
    return ["which", "-a", binary_name]


def find_global_candidates(binary_name: str = "chromedriver") -> list[str]:
    """
    Ask the OS for every globally installed copy of the binary.

    Returns:
        Candidate paths in the order the locator reported them.

    Raises:
        subprocess.CalledProcessError: Locator found nothing
        OSError: Locator command not available
    """
    completed = subprocess.run(
        _locator_command(binary_name),
        capture_output=True,
        text=True,
        check=True,
        timeout=LOOKUP_TIMEOUT_SECONDS,
    )
    return [line.strip() for line in completed.stdout.splitlines() if line.strip()]


def default_fallback_path(binary_name: str = "chromedriver") -> Path:
    """Driver location inside the installed SeleniumBase package."""
    from seleniumbase import drivers

    driver_dir = Path(os.path.dirname(os.path.realpath(drivers.__file__)))
    return driver_dir / binary_suffix(binary_name)


def resolve_executable_path(config: DriverConfig | None = None) -> str:
    """
    Locate the chromedriver binary.

    Args:
        config: Driver location overrides. Defaults are used if None.

    Returns:
        Absolute or PATH-resolved location of the binary.

    Raises:
        ExecutableNotFoundError: Neither the global lookup nor the local
            fallback yields an existing binary.
    """
    config = config or DriverConfig()

    if config.executable_path:
        logger.debug(f"Using configured chromedriver: {config.executable_path}")
        return config.executable_path

    suffix = binary_suffix(config.binary_name)
    searched: list[str] = []

    try:
        candidates = find_global_candidates(config.binary_name)
        searched.extend(candidates)
        match = next((path for path in candidates if path.endswith(suffix)), None)
        if match:
            logger.info(f"Found global chromedriver: {match}")
            return match
        logger.warning(f"No global chromedriver ending with '{suffix}' among {candidates}")
    except (subprocess.SubprocessError, OSError) as e:
        logger.warning(f"Failed to find global chromedriver: {e}")

    fallback = Path(config.fallback_path) if config.fallback_path else default_fallback_path(config.binary_name)
    searched.append(str(fallback))

    if not fallback.exists():
        logger.error(f"Local chromedriver not found at {fallback}")
        raise ExecutableNotFoundError(
            "Could not find chromedriver installation",
            searched=searched,
        )

    logger.info(f"Using local chromedriver: {fallback}")
    return str(fallback)


__all__ = [
    "binary_suffix",
    "default_fallback_path",
    "find_global_candidates",
    "resolve_executable_path",
]
