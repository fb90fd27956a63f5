"""
Pytest configuration and fixtures for dfasim tests.

Provides small automata and alphabets shared by unit and integration tests.
"""

import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture
def binary_alphabet():
    """Alphabet {0, 1}, each symbol its own group."""
    from dfasim.core.alphabet import build_alphabet_index
    from dfasim.core.types import AlphabetSpec

    return build_alphabet_index(AlphabetSpec(isolated=("0", "1")))


@pytest.fixture
def ends_with_zero(binary_alphabet):
    """
    Two-state automaton accepting binary strings that end in 0.

    delta(q0,0)=q1, delta(q0,1)=q0, delta(q1,0)=q1, delta(q1,1)=q0.
    """
    from dfasim.core.builder import build_automaton

    return build_automaton(
        states=["q0", "q1"],
        alphabet=binary_alphabet,
        transitions={
            "q0": {"0": "q1", "1": "q0"},
            "q1": {"0": "q1", "1": "q0"},
        },
        initial="q0",
        accepting=["q1"],
    )


@pytest.fixture
def digit_alphabet():
    """Group "digit" = 0,1,2 plus isolated "#"."""
    from dfasim.core.alphabet import build_alphabet_index
    from dfasim.core.types import AlphabetSpec

    return build_alphabet_index(AlphabetSpec(groups={"digit": "0,1,2"}, isolated=("#",)))


@pytest.fixture
def digit_automaton(digit_alphabet):
    """Digits then '#'. Partial table: nothing leaves "end"."""
    from dfasim.core.builder import build_automaton

    return build_automaton(
        states=["start", "num", "end"],
        alphabet=digit_alphabet,
        transitions={
            "start": {"digit": "num"},
            "num": {"digit": "num", "#": "end"},
        },
        initial="start",
        accepting=["end"],
    )


@pytest.fixture
def sample_record():
    """Definition record in the JSON shape, for the ends-with-zero automaton."""
    return {
        "description": "binary strings ending in 0",
        "states": ["q0", "q1"],
        "alphabet": {"isolated": ["0", "1"]},
        "initialState": "q0",
        "acceptingStates": ["q1"],
        "transitions": {
            "q0": {"0": "q1", "1": "q0"},
            "q1": {"0": "q1", "1": "q0"},
        },
    }
