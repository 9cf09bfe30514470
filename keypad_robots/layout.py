'''
The two keypads. Coordinates are (row, col), row 0 at the top.

    7 8 9
    4 5 6        _ ^ A
    1 2 3        < v >
    _ 0 A
'''

import numpy as np

GAP = " "
CONFIRM = "A"

NUMERIC = "numeric"
DIRECTIONAL = "directional"

# (y, x)
move_vectors = {
    "^": (-1, 0),
    "v": (1, 0),
    "<": (0, -1),
    ">": (0, 1)
}


def _freeze(rows):
    grid = np.array(rows)
    grid.setflags(write=False)
    return grid


KEYPADS = {
    NUMERIC: _freeze([
        ["7", "8", "9"],
        ["4", "5", "6"],
        ["1", "2", "3"],
        [GAP, "0", CONFIRM]
    ]),
    DIRECTIONAL: _freeze([
        [GAP, "^", CONFIRM],
        ["<", "v", ">"]
    ])
}

COORDINATES = {
    keypad: {str(button): position for position, button in np.ndenumerate(grid) if button != GAP}
    for keypad, grid in KEYPADS.items()
}


def _grid(keypad):
    if keypad not in KEYPADS:
        raise ValueError("Unknown keypad %r" % (keypad,))
    return KEYPADS[keypad]


def coordinate_of(keypad, button):
    _grid(keypad)
    position = COORDINATES[keypad].get(button)
    if position is None:
        raise ValueError("No button %r on the %s keypad" % (button, keypad))
    return position


def in_bounds(keypad, row, col):
    height, width = _grid(keypad).shape
    return 0 <= row < height and 0 <= col < width


def button_at(keypad, row, col):
    if not in_bounds(keypad, row, col):
        raise ValueError("(%d, %d) is outside of the %s keypad" % (row, col, keypad))
    return str(KEYPADS[keypad][row, col])


def is_gap(keypad, row, col):
    return button_at(keypad, row, col) == GAP


def step(keypad, position, move):
    '''Move one cell. None if that would leave the keypad or hit the gap.'''
    if move not in move_vectors:
        raise ValueError("Unknown move %r" % (move,))
    vector = move_vectors[move]
    row = position[0] + vector[0]
    col = position[1] + vector[1]
    if not in_bounds(keypad, row, col) or is_gap(keypad, row, col):
        return None
    return (row, col)
