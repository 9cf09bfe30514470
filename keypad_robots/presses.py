'''
Minimal operator presses through a chain of directional keypads.

Depth counts directional keypad layers from the operator: at depth 0 the
operator presses the button directly, at depth n the button is pressed by a
robot whose arm is driven by typing on a depth n - 1 directional keypad.

Every keypad rests on A before a string is typed on it, and rests on the last
key pressed afterwards. So the cost of typing a string is the sum of the
costs of its consecutive pairs, with an implicit leading A, and the costs can
be memoized per (keypad, pair, depth) without ever building the presses.
'''

from keypad_robots.layout import CONFIRM, DIRECTIONAL, coordinate_of
from keypad_robots.paths import candidate_paths


class PressCounter:
    '''Memo table for one run. Do not share between runs with different depth meanings.'''

    def __init__(self):
        self.memo = {}

    def min_presses_to_press(self, source, destination, keypad, depth):
        if depth < 0:
            raise ValueError("Depth must not be negative, got %d" % depth)

        key = (keypad, source, destination, depth)
        if key in self.memo:
            return self.memo[key]

        if depth == 0:
            coordinate_of(keypad, source)
            coordinate_of(keypad, destination)
            presses = 1
        else:
            presses = min(
                self.presses_for_keys(path, DIRECTIONAL, depth - 1)
                for path in candidate_paths(keypad, source, destination)
            )

        self.memo[key] = presses
        return presses

    def presses_for_keys(self, keys, keypad, depth):
        '''Presses needed to type keys on keypad, starting from A.'''
        total = 0
        for previous, current in zip(CONFIRM + keys, keys):
            total += self.min_presses_to_press(previous, current, keypad, depth)
        return total
