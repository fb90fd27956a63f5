"""
Tests for dfasim.core.builder: cross-reference validation and the
fail-fast order of checks.
"""

import pytest

from dfasim.core.builder import automaton_from_definition, build_automaton
from dfasim.core.errors import (
    DuplicateSymbol,
    EmptyStateSet,
    MalformedDefinition,
    UnknownGroup,
    UnknownState,
)
from dfasim.core.types import AlphabetSpec, Automaton, Definition


def _build(binary_alphabet, **overrides):
    kwargs = dict(
        states=["q0", "q1"],
        alphabet=binary_alphabet,
        transitions={"q0": {"0": "q1", "1": "q0"}, "q1": {"0": "q1", "1": "q0"}},
        initial="q0",
        accepting=["q1"],
    )
    kwargs.update(overrides)
    return build_automaton(**kwargs)


class TestBuildAutomatonValid:
    """Successful construction."""

    def test_returns_automaton(self, binary_alphabet):
        automaton = _build(binary_alphabet)
        assert isinstance(automaton, Automaton)
        assert automaton.states == ("q0", "q1")
        assert automaton.initial == "q0"
        assert automaton.accepting == frozenset({"q1"})
        assert automaton.transitions["q0"]["0"] == "q1"

    def test_repeated_states_collapse_in_order(self, binary_alphabet):
        automaton = _build(binary_alphabet, states=["q1", "q0", "q1"])
        assert automaton.states == ("q1", "q0")

    def test_accepting_may_be_empty(self, binary_alphabet):
        assert _build(binary_alphabet, accepting=[]).accepting == frozenset()

    def test_partial_table_is_allowed(self, binary_alphabet):
        automaton = _build(binary_alphabet, transitions={"q0": {"0": "q1"}})
        assert automaton.next_state("q0", "0") == "q1"
        assert automaton.next_state("q0", "1") is None
        assert automaton.next_state("q1", "0") is None

    def test_empty_table_is_allowed(self, binary_alphabet):
        assert dict(_build(binary_alphabet, transitions={}).transitions) == {}

    def test_flat_table(self, binary_alphabet):
        automaton = _build(
            binary_alphabet,
            transitions={("q0", "0"): "q1", ("q0", "1"): "q0", ("q1", "1"): "q0"},
        )
        assert automaton.transitions["q0"] == {"0": "q1", "1": "q0"}
        assert automaton.transitions["q1"] == {"1": "q0"}

    def test_description_carried(self, binary_alphabet):
        assert _build(binary_alphabet, description="demo").description == "demo"

    def test_caller_dict_changes_do_not_leak(self, binary_alphabet):
        table = {"q0": {"0": "q1"}}
        automaton = _build(binary_alphabet, transitions=table)
        table["q0"]["1"] = "q0"
        assert automaton.next_state("q0", "1") is None

    def test_transitions_are_read_only(self, binary_alphabet):
        automaton = _build(binary_alphabet)
        with pytest.raises(TypeError):
            automaton.transitions["q0"]["0"] = "q0"


class TestBuildAutomatonErrors:
    """Each check fails with the matching structured error."""

    def test_empty_states(self, binary_alphabet):
        with pytest.raises(EmptyStateSet):
            _build(binary_alphabet, states=[])

    def test_unknown_initial(self, binary_alphabet):
        with pytest.raises(UnknownState) as excinfo:
            _build(binary_alphabet, initial="q9")
        assert excinfo.value.label == "q9"
        assert excinfo.value.role == "initial"

    def test_unknown_accepting(self, binary_alphabet):
        with pytest.raises(UnknownState) as excinfo:
            _build(binary_alphabet, accepting=["q1", "qx"])
        assert (excinfo.value.label, excinfo.value.role) == ("qx", "accepting")

    def test_unknown_origin(self, binary_alphabet):
        with pytest.raises(UnknownState) as excinfo:
            _build(binary_alphabet, transitions={"q7": {"0": "q0"}})
        assert (excinfo.value.label, excinfo.value.role) == ("q7", "origin")

    def test_unknown_destination(self, binary_alphabet):
        with pytest.raises(UnknownState) as excinfo:
            _build(binary_alphabet, transitions={"q0": {"0": "nowhere"}})
        assert (excinfo.value.label, excinfo.value.role) == ("nowhere", "destination")

    def test_unknown_group(self, binary_alphabet):
        with pytest.raises(UnknownGroup) as excinfo:
            _build(binary_alphabet, transitions={"q0": {"2": "q1"}})
        assert excinfo.value.label == "2"
        assert excinfo.value.state == "q0"

    def test_symbol_is_not_a_group(self, digit_alphabet):
        # columns are keyed by group label, not by member symbol
        with pytest.raises(UnknownGroup, match="'1'"):
            build_automaton(
                states=["s"],
                alphabet=digit_alphabet,
                transitions={"s": {"1": "s"}},
                initial="s",
            )

    def test_empty_states_checked_before_initial(self, binary_alphabet):
        with pytest.raises(EmptyStateSet):
            _build(binary_alphabet, states=[], initial="missing")

    def test_initial_checked_before_accepting(self, binary_alphabet):
        with pytest.raises(UnknownState) as excinfo:
            _build(binary_alphabet, initial="bad_initial", accepting=["bad_accepting"])
        assert excinfo.value.role == "initial"

    def test_accepting_checked_before_transitions(self, binary_alphabet):
        with pytest.raises(UnknownState) as excinfo:
            _build(binary_alphabet, accepting=["zz"], transitions={"q0": {"9": "q0"}})
        assert excinfo.value.role == "accepting"

    def test_group_checked_before_destination(self, binary_alphabet):
        with pytest.raises(UnknownGroup):
            _build(binary_alphabet, transitions={"q0": {"9": "nowhere"}})

    def test_bad_flat_key(self, binary_alphabet):
        with pytest.raises(MalformedDefinition):
            _build(binary_alphabet, transitions={("q0", "0", "x"): "q1"})


class TestAutomatonFromDefinition:
    """Definition -> alphabet index -> automaton."""

    def test_builds(self):
        definition = Definition(
            states=("a", "b"),
            alphabet=AlphabetSpec(groups={"bit": "0,1"}),
            initial="a",
            accepting=("b",),
            transitions={"a": {"bit": "b"}, "b": {"bit": "a"}},
            description="toggle",
        )
        automaton = automaton_from_definition(definition)
        assert automaton.alphabet.group_of["1"] == "bit"
        assert automaton.description == "toggle"

    def test_alphabet_errors_propagate(self):
        definition = Definition(
            states=("a",),
            alphabet=AlphabetSpec(groups={"x": "a", "y": "a"}),
            initial="a",
        )
        with pytest.raises(DuplicateSymbol):
            automaton_from_definition(definition)
