'''
Complexity of door codes: presses needed to type the code times its number.
'''

import re

from keypad_robots.layout import NUMERIC
from keypad_robots.presses import PressCounter

BASELINE_ROBOTS = 2
DEEP_ROBOTS = 25

code_pattern = re.compile(r"^([0-9]+)A\Z")


def is_code(text):
    return code_pattern.match(text) is not None


def numeric_value(code):
    match = code_pattern.match(code)
    if match is None:
        raise ValueError("Malformed code %r" % (code,))
    return int(match.group(1))


def parse_codes(text):
    codes = text.split()
    for code in codes:
        if not is_code(code):
            raise ValueError("Malformed code %r" % (code,))
    return codes


def total_presses(code, robots, counter=None):
    # One level per robot directional keypad, plus the keypad the operator presses.
    if counter is None:
        counter = PressCounter()
    numeric_value(code)
    return counter.presses_for_keys(code, NUMERIC, robots + 1)


def complexity(code, robots, counter=None):
    return total_presses(code, robots, counter) * numeric_value(code)


def total_complexity(codes, robots):
    counter = PressCounter()
    return sum(complexity(code, robots, counter) for code in codes)
