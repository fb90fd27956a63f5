"""Ready-made automata used by the CLI (--builtin) and the test suite."""

from __future__ import annotations

import string
from typing import Callable

from dfasim.core.alphabet import build_alphabet_index
from dfasim.core.builder import build_automaton
from dfasim.core.types import AlphabetSpec, Automaton


def make_div3_automaton() -> Automaton:
    """Binary numbers divisible by three, read most significant bit first."""
    return build_automaton(
        states=("q0", "q1", "q2"),
        alphabet=build_alphabet_index(AlphabetSpec(isolated=("0", "1"))),
        transitions={
            ("q0", "0"): "q0",
            ("q0", "1"): "q1",
            ("q1", "0"): "q2",
            ("q1", "1"): "q0",
            ("q2", "0"): "q1",
            ("q2", "1"): "q2",
        },
        initial="q0",
        accepting=("q0",),
        description="binary multiples of three",
    )


def make_ends_with_zero_automaton() -> Automaton:
    return build_automaton(
        states=("q0", "q1"),
        alphabet=build_alphabet_index(AlphabetSpec(isolated=("0", "1"))),
        transitions={
            "q0": {"0": "q1", "1": "q0"},
            "q1": {"0": "q1", "1": "q0"},
        },
        initial="q0",
        accepting=("q1",),
        description="binary strings ending in 0",
    )


def make_unsigned_integer_automaton() -> Automaton:
    """
    One or more digits followed by a single '#'.

    The table is deliberately partial: anything after '#' and a leading '#'
    have no transition.
    """
    return build_automaton(
        states=("start", "digits", "done"),
        alphabet=build_alphabet_index(
            AlphabetSpec(groups={"digit": ",".join(string.digits)}, isolated=("#",))
        ),
        transitions={
            "start": {"digit": "digits"},
            "digits": {"digit": "digits", "#": "done"},
        },
        initial="start",
        accepting=("done",),
        description="unsigned integer terminated by #",
    )


def make_identifier_automaton() -> Automaton:
    return build_automaton(
        states=("start", "ident", "reject"),
        alphabet=build_alphabet_index(
            AlphabetSpec(
                groups={
                    "letter": ",".join(string.ascii_letters),
                    "digit": ",".join(string.digits),
                },
                isolated=("_",),
            )
        ),
        transitions={
            "start": {"letter": "ident", "_": "ident", "digit": "reject"},
            "ident": {"letter": "ident", "_": "ident", "digit": "ident"},
            "reject": {"letter": "reject", "_": "reject", "digit": "reject"},
        },
        initial="start",
        accepting=("ident",),
        description="identifiers: a letter or '_' followed by letters, digits or '_'",
    )


BUILTINS: dict[str, Callable[[], Automaton]] = {
    "div3": make_div3_automaton,
    "ends-with-zero": make_ends_with_zero_automaton,
    "unsigned-integer": make_unsigned_integer_automaton,
    "identifier": make_identifier_automaton,
}
