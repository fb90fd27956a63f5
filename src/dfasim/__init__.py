"""dfasim: deterministic finite automaton simulator with symbol groups."""

from dfasim.core import *  # noqa: F401,F403
from dfasim.core import __all__ as _core_all

__version__ = "0.1.0"

__all__ = ["__version__", *_core_all]
