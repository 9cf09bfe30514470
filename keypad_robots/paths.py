'''
Candidate moves between two buttons of a keypad.

Only the two monotone shapes are worth trying: every horizontal move then every
vertical one, or the other way round. Zig-zagging is never shorter once the
moves are typed on a directional keypad, because repeated tokens cost a single
extra press each.
'''

from keypad_robots.layout import CONFIRM, coordinate_of, step


def walk(keypad, start, moves):
    '''Follow moves from start. Returns the final position, or None if the gap or an edge got in the way.'''
    position = coordinate_of(keypad, start)
    for move in moves:
        position = step(keypad, position, move)
        if position is None:
            return None
    return position


def candidate_paths(keypad, start, end):
    row, col = coordinate_of(keypad, start)
    end_row, end_col = coordinate_of(keypad, end)
    delta_row = end_row - row
    delta_col = end_col - col

    vertical = ("v" if delta_row > 0 else "^") * abs(delta_row)
    horizontal = (">" if delta_col > 0 else "<") * abs(delta_col)

    # A set, since the shapes coincide when either delta is zero.
    paths = set()
    for moves in (horizontal + vertical, vertical + horizontal):
        if walk(keypad, start, moves) == (end_row, end_col):
            paths.add(moves + CONFIRM)

    if not paths:
        raise RuntimeError("No path from %r to %r on the %s keypad" % (start, end, keypad))
    return paths
