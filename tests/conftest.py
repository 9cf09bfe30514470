import pytest

from keypad_robots.presses import PressCounter


EXAMPLE_CODES = ["029A", "980A", "179A", "456A", "379A"]


@pytest.fixture
def counter():
    return PressCounter()


@pytest.fixture
def example_codes():
    return list(EXAMPLE_CODES)
