from settlers.engine.board import standard_board
from settlers.engine.types import CornerStructure, Faction, Road, Structure
from settlers.view import render_board

MARGIN = 4
WIDTH = 4


def _coordinate_line(lines, y):
    return lines[2 * y + 1]


def _spacer_line(lines, y):
    return lines[2 * y + 2]


def _at(line, x, offset=0, length=2):
    start = MARGIN + x * WIDTH + offset
    return line[start:start + length]


def test_header_and_row_labels():
    lines = render_board(standard_board()).splitlines()
    assert lines[0].startswith("    0   1   2   3")
    assert _coordinate_line(lines, 0).startswith("  0 ")
    assert _coordinate_line(lines, 11).startswith(" 11 ")


def test_fields_and_dice_numbers():
    lines = render_board(standard_board()).splitlines()
    assert _at(_coordinate_line(lines, 2), 4) == "~~"
    assert _at(_coordinate_line(lines, 5), 5) == "LU"
    assert _at(_spacer_line(lines, 5), 5, length=1) == "6"
    assert _at(_spacer_line(lines, 14), 4) == "10"
    assert _at(_coordinate_line(lines, 11), 7) == "TH"
    assert _at(_spacer_line(lines, 11), 7).strip() == ""


def test_empty_corners_and_edges():
    lines = render_board(standard_board()).splitlines()
    assert _at(_coordinate_line(lines, 4), 6) == "()"
    assert _at(_coordinate_line(lines, 5), 6, length=1) == "|"
    assert _at(_spacer_line(lines, 0), 6, offset=2, length=1) == "\\"
    assert _at(_spacer_line(lines, 0), 5, offset=2, length=1) == "/"


def test_structures_show_owner():
    board = standard_board()
    board.set_corner((6, 4), CornerStructure(Faction.RED))
    board.set_corner((8, 4), CornerStructure(Faction.BLUE, Structure.CITY))
    board.set_edge((6, 4), (6, 6), Road(Faction.RED))
    board.set_edge((6, 0), (7, 1), Road(Faction.GREEN))
    lines = render_board(board).splitlines()

    assert _at(_coordinate_line(lines, 4), 6) == "rr"
    assert _at(_coordinate_line(lines, 4), 8) == "BB"
    assert _at(_coordinate_line(lines, 5), 6) == "rr"
    assert _at(_spacer_line(lines, 0), 6, offset=2) == "gg"


def test_thief_marker_follows_thief():
    board = standard_board()
    board.set_thief_position((10, 14))
    lines = render_board(board).splitlines()
    assert _at(_coordinate_line(lines, 14), 10) == "TH"
    assert _at(_coordinate_line(lines, 11), 7) == "--"
