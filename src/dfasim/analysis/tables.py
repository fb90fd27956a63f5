"""pandas views of transition tables and evaluation outcomes."""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from dfasim.core.types import Automaton, Outcome


def _marker(automaton: Automaton, state: str) -> str:
    marker = ""
    if state == automaton.initial:
        marker += "->"
    if state in automaton.accepting:
        marker += "*"
    return marker


def transition_table(automaton: Automaton) -> pd.DataFrame:
    """
    One row per state, one column per group. Rows are indexed by
    (mark, state) where mark is "->" for the initial state and "*" for
    accepting ones, so no group label can shadow it. Missing transitions are
    empty strings.
    """
    groups = list(automaton.alphabet.groups)
    rows = [
        [automaton.next_state(state, group) or "" for group in groups]
        for state in automaton.states
    ]
    index = pd.MultiIndex.from_tuples(
        [(_marker(automaton, state), state) for state in automaton.states],
        names=["mark", "state"],
    )
    return pd.DataFrame(rows, index=index, columns=pd.Index(groups, dtype=object))


def outcomes_frame(outcomes: Sequence[Outcome]) -> pd.DataFrame:
    records = []
    for outcome in outcomes:
        if outcome.ok:
            records.append(
                {
                    "text": outcome.text,
                    "accepted": outcome.evaluation.accepted,
                    "final_state": outcome.evaluation.final_state,
                    "steps": len(outcome.evaluation.path) - 1,
                    "error": None,
                }
            )
        else:
            records.append(
                {
                    "text": outcome.text,
                    "accepted": None,
                    "final_state": None,
                    "steps": None,
                    "error": type(outcome.error).__name__,
                }
            )
    return pd.DataFrame(records, columns=["text", "accepted", "final_state", "steps", "error"])
