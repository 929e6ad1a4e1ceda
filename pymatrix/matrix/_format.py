"""
Text rendering for Matrix.

Shows at most MAX_ROWS x MAX_COLS cells, each padded or truncated to
CELL_WIDTH characters, with '...' markers where rows or columns were cut.
"""

from typing import Any, Sequence

MAX_ROWS = 5
MAX_COLS = 5
CELL_WIDTH = 6


def _cell(value: Any) -> str:
    text = str(value)
    return f"{text:<{CELL_WIDTH}.{CELL_WIDTH}}"


def describe(rows: int, cols: int, all_rows: Sequence[Sequence[Any]]) -> str:
    """
    Render a matrix preview.

    Example:
        2 x 2 Matrix:
        [  1.0    2.0    ]
        [  3.0    4.0    ]
    """
    if rows == 0 or cols == 0:
        return "Empty Matrix"

    lines = [f"{rows} x {cols} Matrix:"]
    for row in all_rows[:MAX_ROWS]:
        cells = "".join(" " + _cell(v) for v in row[:MAX_COLS])
        tail = " ]" if cols <= MAX_COLS else " ..."
        lines.append("[ " + cells + tail)
    if rows > MAX_ROWS:
        lines.append("...")
    return "\n".join(lines)
