import io
import runpy
import sys

import pytest


def run_script(module, text, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    runpy.run_module(module, run_name="__main__")
    return capsys.readouterr().out.splitlines()


def test_two_robots(monkeypatch, capsys, example_codes):
    lines = run_script("keypad_robots.day_21_1", "\n".join(example_codes + ["foo"]) + "\n", monkeypatch, capsys)
    assert lines == [
        "029A 68 29 1972",
        "980A 60 980 58800",
        "179A 68 179 12172",
        "456A 64 456 29184",
        "379A 64 379 24256",
        "Unknown code foo",
        "Sum of complexities with 2 robots is 126384.",
    ]


def test_twenty_five_robots(monkeypatch, capsys, example_codes):
    lines = run_script("keypad_robots.day_21_2", "foo " + " ".join(example_codes), monkeypatch, capsys)
    assert lines[0] == "Unknown code foo"
    assert [line.split()[0] for line in lines[1:-1]] == example_codes
    assert lines[-1] == "Sum of complexities with 25 robots is 154115708116294."


@pytest.mark.parametrize("module", ["keypad_robots.day_21_1", "keypad_robots.day_21_2"])
def test_empty_input(module, monkeypatch, capsys):
    lines = run_script(module, "", monkeypatch, capsys)
    assert len(lines) == 1
    assert lines[0].startswith("Sum of complexities with")
    assert lines[0].endswith(" is 0.")
