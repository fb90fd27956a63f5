"""Random test strings over an automaton's alphabet."""

from __future__ import annotations

from dataclasses import dataclass

from numpy.random import Generator

from dfasim.core.rng import spawn_rngs
from dfasim.core.types import Automaton


@dataclass
class SamplingConfig:
    """How many strings to draw and their length range (inclusive)."""

    n_strings: int = 10
    min_length: int = 0
    max_length: int = 8

    def __post_init__(self):
        if self.n_strings <= 0:
            raise ValueError("n_strings must be > 0")
        if self.min_length < 0:
            raise ValueError("min_length must be >= 0")
        if self.max_length < self.min_length:
            raise ValueError("max_length must be >= min_length")


def random_strings(
    automaton: Automaton,
    config: SamplingConfig,
    rng: Generator,
) -> list[str]:
    """
    Draw config.n_strings strings of uniformly random length and symbols.

    Symbols are taken in sorted order before drawing, so the output depends
    only on the alphabet and the generator's seed.
    """
    symbols = sorted(automaton.alphabet.symbols)
    if not symbols:
        if config.min_length > 0:
            raise ValueError("cannot draw non-empty strings from an empty alphabet")
        return [""] * config.n_strings

    length_rng, symbol_rng = spawn_rngs(rng, 2)
    lengths = length_rng.integers(config.min_length, config.max_length + 1, size=config.n_strings)
    strings = []
    for length in lengths:
        picks = symbol_rng.integers(0, len(symbols), size=int(length))
        strings.append("".join(symbols[i] for i in picks))
    return strings
