"""Plain-text rendering of evaluations and errors."""

from __future__ import annotations

from dfasim.core.errors import AutomatonError
from dfasim.core.types import Evaluation, Outcome


def format_path(evaluation: Evaluation) -> str:
    """
    Examples:
        q0 --(1)-> q0 --(0)-> q1
    """
    parts = [evaluation.path[0].state]
    for step in evaluation.path[1:]:
        parts.append(f"--({step.symbol})-> {step.state}")
    return " ".join(parts)


def format_verdict(evaluation: Evaluation) -> str:
    final = evaluation.final_state
    if evaluation.accepted:
        return f"ACCEPTED (final state {final!r} is accepting)"
    return f"REJECTED (final state {final!r} is not accepting)"


def format_error(error: AutomatonError) -> str:
    return f"error: {error}"


def format_outcome(outcome: Outcome, show_path: bool = True) -> str:
    if not outcome.ok:
        return format_error(outcome.error)
    lines = []
    if show_path:
        lines.append(f"path: {format_path(outcome.evaluation)}")
    lines.append(f"result: {format_verdict(outcome.evaluation)}")
    return "\n".join(lines)
