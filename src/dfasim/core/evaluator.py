"""
String evaluation.

evaluate walks the transition table one character at a time, resolving each
character to its group first. check and evaluate_many return failures as
values so one bad string never affects the next.
"""

from __future__ import annotations

from typing import Iterable

from dfasim.core.errors import EvaluationError, InternalError, MissingTransition, UnrecognizedSymbol
from dfasim.core.types import Automaton, Evaluation, Outcome, PathStep


def evaluate(automaton: Automaton, text: str) -> Evaluation:
    """
    Run automaton over text.

    Returns:
        Evaluation whose path starts with the initial state and has one step
        per consumed character.

    Raises:
        UnrecognizedSymbol: A character is outside the alphabet.
        MissingTransition: The current state has no transition for the
            character's group.
    """
    alphabet = automaton.alphabet
    current = automaton.initial
    path = [PathStep(symbol=None, state=current)]

    for position, symbol in enumerate(text):
        if symbol not in alphabet.symbols:
            raise UnrecognizedSymbol(symbol, position)

        group = alphabet.group_of.get(symbol)
        if group is None:
            raise InternalError(f"symbol {symbol!r} has no group")

        destination = automaton.next_state(current, group)
        if destination is None:
            raise MissingTransition(current, group, position)

        current = destination
        path.append(PathStep(symbol=symbol, state=current))

    return Evaluation(text=text, path=tuple(path), accepted=current in automaton.accepting)


def check(automaton: Automaton, text: str) -> Outcome:
    try:
        return Outcome(text=text, evaluation=evaluate(automaton, text))
    except EvaluationError as err:
        return Outcome(text=text, error=err)


def evaluate_many(automaton: Automaton, texts: Iterable[str]) -> list[Outcome]:
    return [check(automaton, text) for text in texts]
