"""
Sudoku Scraper - In-Page Extraction Payload

JavaScript evaluated inside the puzzle page via execute_script.

Arguments:
    arguments[0]: CSS selector matching every board cell, in DOM order
    arguments[1]: class name marking pre-filled cells
    arguments[2]: lower-cased difficulty key of the embedded game data

Returns:
    {
        cells: [{index, row, col, box, prefilled, label}, ...],
        solution: number[] | number[][] | null
    }
"""

EXTRACT_BOARD_JS = """
const cellSelector = arguments[0];
const prefilledClass = arguments[1];
const difficulty = arguments[2];

const cells = Array.from(document.querySelectorAll(cellSelector)).map((cell, index) => {
    const row = Math.floor(index / 9);
    const col = index % 9;
    return {
        index: index,
        row: row,
        col: col,
        box: Math.floor(row / 3) * 3 + Math.floor(col / 3),
        prefilled: cell.classList.contains(prefilledClass),
        label: cell.getAttribute('aria-label'),
    };
});

let solution = null;
const gameData = window.gameData;
if (gameData && gameData[difficulty] && gameData[difficulty].puzzle_data) {
    solution = gameData[difficulty].puzzle_data.solution || null;
}

return { cells: cells, solution: solution };
"""


def extraction_arguments(cell_selector: str, prefilled_class: str, difficulty: str) -> tuple[str, str, str]:
    """Positional arguments for EXTRACT_BOARD_JS."""
    return cell_selector, prefilled_class, difficulty.lower()


__all__ = ["EXTRACT_BOARD_JS", "extraction_arguments"]
