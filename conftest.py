def pytest_addoption(parser):
    """Register the scrape script's CLI options so `pytest scripts/scrape_puzzle.py --difficulty hard` won't fail.

    This makes pytest accept the script's command-line flags (best-effort). It does not execute the script's main
    automatically.
    """

    # Helper to safely add options without causing conflicts if already registered
    def safe_addoption(*args, **kwargs):
        try:
            parser.addoption(*args, **kwargs)
        except ValueError:
            # Option already registered, skip
            pass

    safe_addoption("--difficulty", action="store", help="Difficulty label (script flag)")
    safe_addoption("--json", action="store_true", help="Print the puzzle as JSON (script flag)")
    safe_addoption("--config", action="store", help="Path to a JSON scraper configuration (script flag)")
    # Note: do NOT register `--debug` here because pytest already defines it.
