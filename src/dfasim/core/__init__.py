"""Core of dfasim: alphabet resolution, automaton construction, evaluation."""

from dfasim.core.alphabet import SYMBOL_SEPARATOR, build_alphabet_index, parse_symbol_list
from dfasim.core.builder import automaton_from_definition, build_automaton
from dfasim.core.errors import (
    AutomatonError,
    DefinitionError,
    DuplicateGroup,
    DuplicateSymbol,
    EmptyStateSet,
    EvaluationError,
    InternalError,
    MalformedDefinition,
    MissingTransition,
    UnknownGroup,
    UnknownState,
    UnrecognizedSymbol,
)
from dfasim.core.evaluator import check, evaluate, evaluate_many
from dfasim.core.types import (
    AlphabetIndex,
    AlphabetSpec,
    Automaton,
    Definition,
    Evaluation,
    Outcome,
    PathStep,
)

__all__ = [
    "SYMBOL_SEPARATOR",
    "AlphabetIndex",
    "AlphabetSpec",
    "Automaton",
    "AutomatonError",
    "Definition",
    "DefinitionError",
    "DuplicateGroup",
    "DuplicateSymbol",
    "EmptyStateSet",
    "Evaluation",
    "EvaluationError",
    "InternalError",
    "MalformedDefinition",
    "MissingTransition",
    "Outcome",
    "PathStep",
    "UnknownGroup",
    "UnknownState",
    "UnrecognizedSymbol",
    "automaton_from_definition",
    "build_alphabet_index",
    "build_automaton",
    "check",
    "evaluate",
    "evaluate_many",
    "parse_symbol_list",
]
