"""Interactive definition of an automaton, one question at a time."""

from __future__ import annotations

from typing import Callable, Optional

from dfasim.core.alphabet import parse_symbol_list
from dfasim.core.types import AlphabetSpec, Definition

Ask = Callable[[str], str]
Tell = Callable[[str], None]


def prompt_definition(ask: Optional[Ask] = None, tell: Optional[Tell] = None) -> Definition:
    """
    Ask for states, alphabet, initial state, accepting states and every
    transition, and return the answers as a Definition.

    Each alphabet symbol becomes its own group. A transition answer that is
    not a declared state is rejected and asked again. Other answers are not
    validated here; build the automaton to check them.
    """
    ask = input if ask is None else ask
    tell = print if tell is None else tell

    states = parse_symbol_list(ask("1. States (comma separated, e.g. q0,q1,q2): "))
    symbols = parse_symbol_list(ask("2. Alphabet (comma separated symbols, e.g. 0,1): "))
    initial = ask("3. Initial state (one of the states, e.g. q0): ").strip()
    accepting = parse_symbol_list(ask("4. Accepting states (comma separated, e.g. q2): "))

    tell("5. Transitions (δ):")
    state_set = set(states)
    transitions: dict[str, dict[str, str]] = {}
    for state in states:
        row = transitions.setdefault(state, {})
        for symbol in symbols:
            while True:
                answer = ask(f"   δ({state}, {symbol}) -> ").strip()
                if answer in state_set:
                    break
                tell(f"   [warning] {answer!r} is not a state, enter one of: {', '.join(states)}")
            row[symbol] = answer

    return Definition(
        states=states,
        alphabet=AlphabetSpec(isolated=symbols),
        initial=initial,
        accepting=accepting,
        transitions=transitions,
    )
