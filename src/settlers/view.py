"""Text rendering of a settlers board.

Every y coordinate gets two text lines: the coordinate line holding fields,
corners and vertical edges, followed by a spacer line holding dice numbers
and the diagonal edges that lead down to the next row.
"""

from __future__ import annotations

from typing import List

from .engine.board import SettlersBoard
from .engine.config import MAX_X, MAX_Y

COLUMN_WIDTH = 4
MARGIN = "    "


class _Canvas:
    def __init__(self, lines: int, width: int) -> None:
        self._rows: List[List[str]] = [[" "] * width for _ in range(lines)]

    def put(self, line: int, column: int, text: str) -> None:
        row = self._rows[line]
        for offset, char in enumerate(text):
            row[column + offset] = char

    def lines(self) -> List[str]:
        return ["".join(row).rstrip() for row in self._rows]


def _coordinate_line(y: int) -> int:
    return 2 * y


def _spacer_line(y: int) -> int:
    return 2 * y + 1


def render_board(board: SettlersBoard) -> str:
    canvas = _Canvas(2 * (MAX_Y + 1), (MAX_X + 1) * COLUMN_WIDTH + 2)

    for x, y in board.field_coordinates():
        field = board.get_field((x, y))
        canvas.put(_coordinate_line(y), x * COLUMN_WIDTH, field.label)
        if field.resource is not None and field.dice_value:
            canvas.put(_spacer_line(y), x * COLUMN_WIDTH, str(field.dice_value))

    for x, y in board.corner_coordinates():
        occupant = board.get_corner((x, y))
        label = occupant.label if occupant is not None else "()"
        canvas.put(_coordinate_line(y), x * COLUMN_WIDTH, label)

    for edge in board.edges():
        (ax, ay), (bx, by) = edge.corners
        road = board.get_edge(edge.a, edge.b)
        if edge.is_vertical():
            label = road.label if road is not None else "|"
            canvas.put(_coordinate_line(min(ay, by) + 1), ax * COLUMN_WIDTH, label)
            continue
        upper_x, lower_x = (ax, bx) if ay < by else (bx, ax)
        if road is not None:
            label = road.label
        else:
            label = "\\" if upper_x < lower_x else "/"
        column = min(ax, bx) * COLUMN_WIDTH + COLUMN_WIDTH // 2
        canvas.put(_spacer_line(min(ay, by)), column, label)

    header = MARGIN + "".join(f"{x:<{COLUMN_WIDTH}d}" for x in range(MAX_X + 1))
    output = [header.rstrip()]
    for index, line in enumerate(canvas.lines()):
        if index % 2 == 0:
            output.append(f"{index // 2:>3d} {line}".rstrip())
        else:
            output.append(f"{MARGIN}{line}".rstrip())
    return "\n".join(output) + "\n"
