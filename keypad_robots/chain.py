'''
Replays operator presses through the robot chain, one arm per keypad.

Slow and literal; only useful for checking a press sequence by hand.
'''

from keypad_robots.layout import CONFIRM, DIRECTIONAL, NUMERIC, button_at, coordinate_of, step


def type_presses(presses, robots):
    keypads = [DIRECTIONAL] * robots + [NUMERIC]
    arms = [coordinate_of(keypad, CONFIRM) for keypad in keypads]

    typed = ""
    for i, press in enumerate(presses):
        level = 0
        token = press
        while True:
            keypad = keypads[level]
            if token != CONFIRM:
                position = step(keypad, arms[level], token)
                if position is None:
                    raise ValueError("Press %d (%r) moves arm %d off the %s keypad or over its gap" % (i, press, level, keypad))
                arms[level] = position
                break
            button = button_at(keypad, *arms[level])
            if level == len(keypads) - 1:
                typed += button
                break
            token = button
            level += 1
    return typed
