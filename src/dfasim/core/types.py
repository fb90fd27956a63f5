"""
Core types for dfasim: AlphabetSpec, AlphabetIndex, Automaton, PathStep,
Evaluation, Outcome, Definition.

Immutable data containers. Cross-reference validation lives in the
builders, not here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Union

from dfasim.core.errors import EvaluationError


def _freeze_table(table: Mapping[str, Mapping[str, str]]) -> Mapping[str, Mapping[str, str]]:
    return MappingProxyType(
        {origin: MappingProxyType(dict(row)) for origin, row in table.items()}
    )


@dataclass(frozen=True)
class AlphabetSpec:
    """
    Raw alphabet specification.

    groups maps a group label to its symbols, either as a comma-separated
    string ("0, 1, 2") or as a sequence of symbols. isolated lists symbols
    that form their own singleton group.
    """

    groups: Mapping[str, Union[str, tuple[str, ...]]] = field(default_factory=dict)
    isolated: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "groups", MappingProxyType(dict(self.groups)))
        object.__setattr__(self, "isolated", tuple(self.isolated))


@dataclass(frozen=True)
class AlphabetIndex:
    """
    Resolved alphabet: every recognized symbol and the group it belongs to.

    groups holds the group labels in declaration order, which is also the
    column order of transition tables.
    """

    symbols: frozenset[str]
    group_of: Mapping[str, str]
    groups: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "symbols", frozenset(self.symbols))
        object.__setattr__(self, "group_of", MappingProxyType(dict(self.group_of)))
        object.__setattr__(self, "groups", tuple(self.groups))

    def members(self, group: str) -> tuple[str, ...]:
        """Symbols belonging to group, sorted."""
        return tuple(sorted(s for s, g in self.group_of.items() if g == group))

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.symbols


@dataclass(frozen=True)
class Automaton:
    """
    A validated DFA over symbol groups.

    transitions maps origin state -> group label -> destination state. The
    table may have gaps; they surface as MissingTransition during evaluation.
    """

    states: tuple[str, ...]
    alphabet: AlphabetIndex
    transitions: Mapping[str, Mapping[str, str]]
    initial: str
    accepting: frozenset[str]
    description: str = ""

    def __post_init__(self):
        object.__setattr__(self, "states", tuple(self.states))
        object.__setattr__(self, "accepting", frozenset(self.accepting))
        object.__setattr__(self, "transitions", _freeze_table(self.transitions))

    def next_state(self, state: str, group: str) -> Optional[str]:
        return self.transitions.get(state, {}).get(group)


@dataclass(frozen=True)
class PathStep:
    """One entry of a path trace. The first step has no symbol."""

    symbol: Optional[str]
    state: str


@dataclass(frozen=True)
class Evaluation:
    """Successful run of an automaton over one input string."""

    text: str
    path: tuple[PathStep, ...]
    accepted: bool

    @property
    def states(self) -> tuple[str, ...]:
        return tuple(step.state for step in self.path)

    @property
    def final_state(self) -> str:
        return self.path[-1].state


@dataclass(frozen=True)
class Outcome:
    """Either an Evaluation or the EvaluationError that stopped it."""

    text: str
    evaluation: Optional[Evaluation] = None
    error: Optional[EvaluationError] = None

    def __post_init__(self):
        if (self.evaluation is None) == (self.error is None):
            raise ValueError("exactly one of evaluation and error must be set")

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class Definition:
    """Raw, unvalidated automaton definition as read from a record."""

    states: tuple[str, ...]
    alphabet: AlphabetSpec
    initial: str
    accepting: tuple[str, ...] = ()
    transitions: Mapping[str, Mapping[str, str]] = field(default_factory=dict)
    description: str = ""

    def __post_init__(self):
        object.__setattr__(self, "states", tuple(self.states))
        object.__setattr__(self, "accepting", tuple(self.accepting))
        object.__setattr__(self, "transitions", _freeze_table(self.transitions))
