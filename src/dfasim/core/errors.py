"""
Error taxonomy for dfasim.

Construction failures derive from DefinitionError, per-string failures from
EvaluationError. Both are ValueErrors so callers that only care about
"bad input" can catch that.
"""

from __future__ import annotations


class AutomatonError(ValueError):
    """Root of all dfasim errors."""


class DefinitionError(AutomatonError):
    """An automaton definition failed validation."""


class EvaluationError(AutomatonError):
    """A single input string could not be evaluated."""


class DuplicateSymbol(DefinitionError):
    def __init__(self, symbol: str, groups: tuple[str, str]):
        self.symbol = symbol
        self.groups = groups
        super().__init__(
            f"symbol {symbol!r} appears in more than one group: "
            f"{groups[0]!r} and {groups[1]!r}"
        )


class DuplicateGroup(DefinitionError):
    def __init__(self, label: str):
        self.label = label
        super().__init__(f"group {label!r} is declared more than once")


class EmptyStateSet(DefinitionError):
    def __init__(self):
        super().__init__("states must not be empty")


class UnknownState(DefinitionError):
    def __init__(self, label: str, role: str):
        self.label = label
        self.role = role
        super().__init__(f"{role} state {label!r} is not in states")


class UnknownGroup(DefinitionError):
    def __init__(self, label: str, state: str):
        self.label = label
        self.state = state
        super().__init__(
            f"transition from {state!r} references unknown group {label!r}"
        )


class MalformedDefinition(DefinitionError):
    """A definition record has a missing field or a value of the wrong shape."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


class UnrecognizedSymbol(EvaluationError):
    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(
            f"symbol {symbol!r} at position {position} is not in the alphabet"
        )


class MissingTransition(EvaluationError):
    def __init__(self, state: str, group: str, position: int):
        self.state = state
        self.group = group
        self.position = position
        super().__init__(
            f"no transition defined for state {state!r} on group {group!r}"
        )


class InternalError(AutomatonError, RuntimeError):
    """Alphabet index and evaluator disagree. Should never happen."""

    def __init__(self, message: str):
        super().__init__(f"internal error: {message}")
