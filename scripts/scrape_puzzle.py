"""
End-to-end script: scrape one live puzzle with headless Chrome.

Requires Chrome and a chromedriver binary (on PATH, via
SUDOKU_CHROMEDRIVER_PATH, or installed with `sbase get chromedriver`).

Usage:
    python scripts/scrape_puzzle.py --difficulty easy
    python scripts/scrape_puzzle.py --difficulty hard --json
    python scripts/scrape_puzzle.py --difficulty medium --config scraper.json
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def format_grid(grid: list[list[int]]) -> str:
    lines = []
    for row_index, row in enumerate(grid):
        if row_index and row_index % 3 == 0:
            lines.append("------+-------+------")
        cells = [str(v) if v else "." for v in row]
        lines.append(" ".join(cells[0:3]) + " | " + " ".join(cells[3:6]) + " | " + " ".join(cells[6:9]))
    return "\n".join(lines)


async def run(difficulty: str, as_json: bool, config_path: str | None) -> int:
    from app.core.config import Settings
    from app.services.sudoku import ConfigLoader, PuzzleScraper, SudokuScraperException

    settings = Settings()
    config = ConfigLoader.from_file(config_path) if config_path else ConfigLoader.from_settings(settings)

    async with PuzzleScraper(config=config) as scraper:
        try:
            puzzle = await scraper.scrape_puzzle(difficulty)
        except SudokuScraperException as e:
            print(f"❌ {type(e).__name__}: {e}", file=sys.stderr)
            return 1

    if as_json:
        print(json.dumps(puzzle.model_dump(mode="json", exclude={"cells"}), indent=2))
        return 0

    print("=" * 60)
    print(f"SUDOKU PUZZLE ({puzzle.difficulty})")
    print(f"Source: {puzzle.source_url}")
    print("=" * 60)
    print(format_grid(puzzle.puzzle))
    print("\nSolution:")
    print(format_grid(puzzle.solution))
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Scrape a live Sudoku puzzle")
    parser.add_argument("--difficulty", default="easy", help="Difficulty label (easy, medium, hard)")
    parser.add_argument("--json", action="store_true", help="Print the puzzle as JSON")
    parser.add_argument("--config", help="Path to a JSON scraper configuration")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    sys.exit(asyncio.run(run(args.difficulty, args.json, args.config)))


if __name__ == "__main__":
    main()
