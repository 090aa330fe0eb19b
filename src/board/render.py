"""
Scoreboard table drawn onto a character grid.

render_board() is a pure function of the registry and the available size: the
layout (table origin, column widths) is recomputed on every call, so the
screen never carries layout state between frames.

Table rows, relative to the top border:

     0  ┌────────────────────────┬┬──────┐
     1  │         Name           ││ Ann  │
     2  ├────────────────────────┼┼──────┤
   3-8  │  Ones (1) .. Sixes (6) ││      │
     9  ├────────────────────────┼┼──────┤
    10  │   Left to get bonus    ││ 63   │
    11  │         Bonus          ││ 0    │
    12  ├────────────────────────┼┼──────┤
 13-18  │  Choice .. * YACHT *   ││      │
 19-20  ├────────────────────────┼┼──────┤   (two rules)
    21  │         Total          ││ 0    │
    22  └────────────────────────┴┴──────┘
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.cells import cell_len

from scoring.enums import FREE_CATEGORIES, NUMBER_CATEGORIES, Category

if TYPE_CHECKING:
    from scoring.registry import PlayerRegistry
    from scoring.scoreboard import Scoreboard

HORIZONTAL_LINE = "─"
VERTICAL_LINE = "│"
TOP_LEFT_CORNER = "┌"
TOP_RIGHT_CORNER = "┐"
BOTTOM_LEFT_CORNER = "└"
BOTTOM_RIGHT_CORNER = "┘"
HORIZ_DOWN = "┬"
HORIZ_UP = "┴"
VERT_LEFT = "┤"
VERT_RIGHT = "├"
HORIZ_VERT = "┼"

LABEL_COLUMN_WIDTH = 24
MIN_PLAYER_COLUMN_WIDTH = 6
CELL_PADDING = 2  # text starts this many cells right of a column's left border
TABLE_HEIGHT = 22  # bottom border row, relative to the top border

RULE_ROWS = (0, 2, 9, 12, 19, 20, TABLE_HEIGHT)

NAME_ROW = 1
NUMBER_ROWS = dict(zip(NUMBER_CATEGORIES, range(3, 9), strict=True))
LEFT_TO_BONUS_ROW = 10
BONUS_ROW = 11
LOWER_ROWS = dict(
    zip(
        (*FREE_CATEGORIES, Category.SMALL_STRAIGHT, Category.LARGE_STRAIGHT, Category.YACHT),
        range(13, 19),
        strict=True,
    ),
)
TOTAL_ROW = 21

# (row, indent from the left border, label)
ROW_LABELS: tuple[tuple[int, int, str], ...] = (
    (NAME_ROW, 10, "Name"),
    *((row, 8, f"{category.label:<7}({category.hotkey})") for category, row in NUMBER_ROWS.items()),
    (LEFT_TO_BONUS_ROW, 4, "Left to get bonus"),
    (BONUS_ROW, 10, "Bonus"),
    (LOWER_ROWS[Category.CHOICE], 8, "Choice     (c)"),
    (LOWER_ROWS[Category.FULL_HOUSE], 6, "Full House   (h)"),
    (LOWER_ROWS[Category.FOUR_OF_KIND], 4, "Four of a kind (k)"),
    (LOWER_ROWS[Category.SMALL_STRAIGHT], 4, "Small Straight (s)"),
    (LOWER_ROWS[Category.LARGE_STRAIGHT], 4, "Large Straight (l)"),
    (LOWER_ROWS[Category.YACHT], 6, "* YACHT *    (y)"),
    (TOTAL_ROW, 10, "Total"),
)

HELP_HINT = "Press `?` to show the help message."


class _Canvas:
    """Fixed-size grid of terminal cells.

    A wide character occupies its cell and blanks the cell to its right, so
    joined rows keep their on-screen width.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._cells = [[" "] * width for _ in range(height)]

    def put(self, x: int, y: int, text: str) -> None:
        if not 0 <= y < self.height:
            return
        for char in text:
            char_width = cell_len(char)
            if x + char_width > self.width:
                return
            if x >= 0:
                self._cells[y][x] = char
                if char_width == 2:
                    self._cells[y][x + 1] = ""
            x += char_width

    def lines(self) -> list[str]:
        return ["".join(row).rstrip() for row in self._cells]


def _format_value(value: int | None) -> str:
    return "" if value is None else str(value)


def _row_values(name: str, board: Scoreboard) -> dict[int, str]:
    values = {
        NAME_ROW: name,
        LEFT_TO_BONUS_ROW: str(board.left_to_get_bonus),
        BONUS_ROW: str(board.bonus),
        TOTAL_ROW: str(board.total_score),
    }
    for category, row in (*NUMBER_ROWS.items(), *LOWER_ROWS.items()):
        values[row] = _format_value(board.value_of(category))
    return values


def player_column_width(name: str, board: Scoreboard) -> int:
    """Width of a player's column, left border included."""
    widest = max(cell_len(text) for text in _row_values(name, board).values())
    return max(widest + CELL_PADDING + 1, MIN_PLAYER_COLUMN_WIDTH)


def table_width(registry: PlayerRegistry) -> int:
    """Width of the whole table, both outer borders included."""
    players_width = sum(player_column_width(name, board) for name, board in registry.iterate())
    return LABEL_COLUMN_WIDTH + 1 + players_width + 1


def _draw_column(canvas: _Canvas, left: int, top: int, width: int, *, first: bool) -> None:
    """Draw a column's borders; its right edge is overwritten by the next column."""
    right = left + width
    for row in range(top, top + TABLE_HEIGHT + 1):
        canvas.put(left, row, VERTICAL_LINE)
        canvas.put(right, row, VERTICAL_LINE)
    for rule in RULE_ROWS:
        canvas.put(left + 1, top + rule, HORIZONTAL_LINE * (width - 1))
        if rule == 0:
            canvas.put(left, top, TOP_LEFT_CORNER if first else HORIZ_DOWN)
            canvas.put(right, top, TOP_RIGHT_CORNER)
        elif rule == TABLE_HEIGHT:
            canvas.put(left, top + rule, BOTTOM_LEFT_CORNER if first else HORIZ_UP)
            canvas.put(right, top + rule, BOTTOM_RIGHT_CORNER)
        else:
            canvas.put(left, top + rule, VERT_RIGHT if first else HORIZ_VERT)
            canvas.put(right, top + rule, VERT_LEFT)


def render_board(
    registry: PlayerRegistry,
    width: int,
    height: int,
    *,
    hint: str | None = HELP_HINT,
) -> list[str]:
    """Render the scoreboard table centred in a width x height grid.

    The grid grows when the table or the hint does not fit. When hint is set
    it is written on the last line.
    """
    players = registry.iterate()
    total_width = table_width(registry)

    left = max(0, (width - total_width) // 2)
    top = max(0, height // 2 - (TABLE_HEIGHT // 2))
    hint_width = 1 + cell_len(hint) if hint else 0
    canvas = _Canvas(
        width=max(width, left + total_width, hint_width),
        height=max(height, top + TABLE_HEIGHT + (2 if hint else 1)),
    )

    _draw_column(canvas, left, top, LABEL_COLUMN_WIDTH, first=True)
    for row, indent, label in ROW_LABELS:
        canvas.put(left + indent, top + row, label)

    # one-cell gutter gives the label column its double right border
    offset = left + LABEL_COLUMN_WIDTH
    _draw_column(canvas, offset, top, 1, first=False)
    offset += 1

    for name, board in players:
        column_width = player_column_width(name, board)
        _draw_column(canvas, offset, top, column_width, first=False)
        for row, text in _row_values(name, board).items():
            canvas.put(offset + CELL_PADDING, top + row, text)
        offset += column_width

    if hint:
        canvas.put(1, canvas.height - 1, hint)
    return canvas.lines()
