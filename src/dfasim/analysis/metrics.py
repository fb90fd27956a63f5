from __future__ import annotations

from typing import Iterable, Sequence

import networkx as nx
import numpy as np

from dfasim.core.types import Automaton, Evaluation, Outcome

MISSING = -1


def transition_matrix(automaton: Automaton) -> tuple[np.ndarray, tuple[str, ...], tuple[str, ...]]:
    """
    Dense view of the transition table.

    Returns:
        (matrix, states, groups) where matrix[i, j] is the index in states of
        the destination of (states[i], groups[j]), or MISSING.
    """
    states = automaton.states
    groups = automaton.alphabet.groups
    state_to_idx = {state: idx for idx, state in enumerate(states)}

    matrix = np.full((len(states), len(groups)), MISSING, dtype=np.int64)
    for i, state in enumerate(states):
        for j, group in enumerate(groups):
            destination = automaton.next_state(state, group)
            if destination is not None:
                matrix[i, j] = state_to_idx[destination]

    return matrix, states, groups


def missing_transitions(automaton: Automaton) -> list[tuple[str, str]]:
    """(state, group) pairs with no transition, in table order."""
    matrix, states, groups = transition_matrix(automaton)
    rows, cols = np.nonzero(matrix == MISSING)
    return [(states[i], groups[j]) for i, j in zip(rows.tolist(), cols.tolist())]


def is_complete(automaton: Automaton) -> bool:
    return not missing_transitions(automaton)


def automaton_graph(automaton: Automaton) -> nx.MultiDiGraph:
    """
    Transition graph: one node per state, one edge per table cell.

    Node attributes: initial, accepting. Edge attributes: group, symbols.
    """
    graph = nx.MultiDiGraph(description=automaton.description)
    for state in automaton.states:
        graph.add_node(
            state,
            initial=state == automaton.initial,
            accepting=state in automaton.accepting,
        )
    for origin, row in automaton.transitions.items():
        for group, destination in row.items():
            graph.add_edge(
                origin,
                destination,
                key=group,
                group=group,
                symbols=automaton.alphabet.members(group),
            )
    return graph


def reachable_states(automaton: Automaton) -> frozenset[str]:
    graph = automaton_graph(automaton)
    return frozenset(nx.descendants(graph, automaton.initial) | {automaton.initial})


def state_visit_counts(automaton: Automaton, evaluations: Iterable[Evaluation]) -> np.ndarray:
    """Times each state (in automaton.states order) appears across the paths."""
    state_to_idx = {state: idx for idx, state in enumerate(automaton.states)}
    counts = np.zeros(len(automaton.states), dtype=np.int64)
    for evaluation in evaluations:
        for state in evaluation.states:
            counts[state_to_idx[state]] += 1
    return counts


def acceptance_rate(outcomes: Sequence[Outcome]) -> float:
    """Fraction of successful evaluations that were accepted."""
    verdicts = [outcome.evaluation.accepted for outcome in outcomes if outcome.ok]
    if not verdicts:
        raise ValueError("outcomes must contain at least one successful evaluation")
    return float(np.mean(verdicts))
