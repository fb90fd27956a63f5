from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Optional, Sequence

from dfasim import __version__
from dfasim.core.types import Automaton, Outcome


@dataclass
class RunRecord:
    text: str
    accepted: Optional[bool]
    path: Optional[list[str]]
    error: Optional[str]
    error_type: Optional[str]
    description: str
    dfasim_version: str
    timestamp: str


def outcome_record(outcome: Outcome, automaton: Automaton) -> RunRecord:
    if outcome.ok:
        evaluation = outcome.evaluation
        accepted, path = evaluation.accepted, list(evaluation.states)
        error = error_type = None
    else:
        accepted = path = None
        error, error_type = str(outcome.error), type(outcome.error).__name__

    return RunRecord(
        text=outcome.text,
        accepted=accepted,
        path=path,
        error=error,
        error_type=error_type,
        description=automaton.description,
        dfasim_version=__version__,
        timestamp=datetime.now().isoformat(),
    )


def save_report(outcomes: Sequence[Outcome], automaton: Automaton, path: str) -> None:
    records = [asdict(outcome_record(outcome, automaton)) for outcome in outcomes]
    with open(path, "w", encoding="utf-8") as f:
        json.dump(records, f, indent=2)


def load_report(path: str) -> list[RunRecord]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return [RunRecord(**item) for item in data]
