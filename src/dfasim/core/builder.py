"""
Automaton construction.

build_automaton cross-checks raw states, transitions, initial and accepting
labels against each other and the alphabet, failing at the first problem.
Total coverage of the transition table is not required.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Union

from dfasim.core.alphabet import build_alphabet_index
from dfasim.core.errors import EmptyStateSet, MalformedDefinition, UnknownGroup, UnknownState
from dfasim.core.types import AlphabetIndex, Automaton, Definition

NestedTable = Mapping[str, Mapping[str, str]]
FlatTable = Mapping[tuple[str, str], str]


def _nest(transitions: Union[NestedTable, FlatTable]) -> dict[str, dict[str, str]]:
    nested: dict[str, dict[str, str]] = {}
    for key, value in transitions.items():
        if isinstance(key, tuple):
            if len(key) != 2:
                raise MalformedDefinition("transitions", f"expected (state, group) key, got {key!r}")
            origin, group = key
            nested.setdefault(origin, {})[group] = value
        else:
            if not isinstance(value, Mapping):
                raise MalformedDefinition("transitions", f"row for {key!r} must be a mapping")
            nested.setdefault(key, {}).update(value)
    return nested


def build_automaton(
    states: Iterable[str],
    alphabet: AlphabetIndex,
    transitions: Union[NestedTable, FlatTable],
    initial: str,
    accepting: Iterable[str] = (),
    description: str = "",
) -> Automaton:
    """
    Validate raw automaton parts and assemble an Automaton.

    Args:
        states: State labels. Repeats collapse, order is kept.
        alphabet: Resolved alphabet the transition columns refer to.
        transitions: Either {origin: {group: destination}} or
            {(origin, group): destination}.
        initial: Initial state label.
        accepting: Accepting state labels, possibly empty.
        description: Free text carried on the automaton.

    Raises:
        EmptyStateSet: No states were given.
        UnknownState: initial, an accepting label, a transition origin or a
            transition destination is not a declared state.
        UnknownGroup: A transition column is not a group of the alphabet.
    """
    state_list = tuple(dict.fromkeys(states))
    if not state_list:
        raise EmptyStateSet()
    state_set = set(state_list)

    if initial not in state_set:
        raise UnknownState(initial, "initial")

    accepting = tuple(accepting)
    for label in accepting:
        if label not in state_set:
            raise UnknownState(label, "accepting")

    table = _nest(transitions)
    known_groups = set(alphabet.groups)
    for origin, row in table.items():
        if origin not in state_set:
            raise UnknownState(origin, "origin")
        for group, destination in row.items():
            if group not in known_groups:
                raise UnknownGroup(group, origin)
            if destination not in state_set:
                raise UnknownState(destination, "destination")

    return Automaton(
        states=state_list,
        alphabet=alphabet,
        transitions=table,
        initial=initial,
        accepting=frozenset(accepting),
        description=description,
    )


def automaton_from_definition(definition: Definition) -> Automaton:
    """Build the alphabet index and then the automaton for a parsed definition."""
    alphabet = build_alphabet_index(definition.alphabet)
    return build_automaton(
        states=definition.states,
        alphabet=alphabet,
        transitions=definition.transitions,
        initial=definition.initial,
        accepting=definition.accepting,
        description=definition.description,
    )
