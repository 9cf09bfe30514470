'''
cat day_21_input.txt | python3 -m keypad_robots.day_21_1
'''

import sys

from keypad_robots.complexity import BASELINE_ROBOTS, is_code, numeric_value, total_presses
from keypad_robots.presses import PressCounter

ROBOTS = BASELINE_ROBOTS

counter = PressCounter()
total = 0
for code in sys.stdin.read().split():
    if not is_code(code):
        print("Unknown code", code)
        continue
    presses = total_presses(code, ROBOTS, counter)
    value = numeric_value(code)
    print(code, presses, value, presses * value)
    total += presses * value

print("Sum of complexities with %d robots is %d." % (ROBOTS, total))
