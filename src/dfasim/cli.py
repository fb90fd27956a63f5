"""
dfasim command line.

    dfasim definition.json -s 1010 -s 01
    dfasim --builtin div3 --sample 20 --seed 7 --table
    dfasim                      # prompt for a definition, then test interactively
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

from dfasim import __version__
from dfasim.analysis.metrics import acceptance_rate, missing_transitions, reachable_states
from dfasim.analysis.sampling import SamplingConfig, random_strings
from dfasim.analysis.tables import transition_table
from dfasim.catalog import BUILTINS
from dfasim.core.builder import automaton_from_definition
from dfasim.core.errors import DefinitionError
from dfasim.core.evaluator import check, evaluate_many
from dfasim.core.rng import make_rng
from dfasim.core.types import Automaton, Definition, Outcome
from dfasim.io.definition import load_definition, save_definition
from dfasim.io.prompt import prompt_definition
from dfasim.io.render import format_error, format_outcome


@dataclass
class SessionConfig:
    """Settings of the interactive test loop."""

    quit_commands: tuple[str, ...] = (":quit", ":sair", ":exit")
    prompt: str = "> "
    show_path: bool = True

    def __post_init__(self):
        if not self.quit_commands:
            raise ValueError("quit_commands must not be empty")
        if not self.prompt:
            raise ValueError("prompt must not be empty")
        self.quit_commands = tuple(c.lower() for c in self.quit_commands)


def _count(minimum: int):
    def parse(value: str) -> int:
        number = int(value)
        if number < minimum:
            raise argparse.ArgumentTypeError(f"must be >= {minimum}, got {number}")
        return number

    return parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dfasim",
        description="Simulate a deterministic finite automaton over input strings.",
    )
    parser.add_argument("definition", nargs="?", help="JSON definition file (prompted for when omitted).")
    parser.add_argument("--builtin", choices=sorted(BUILTINS), help="Use a built-in automaton instead of a file.")
    parser.add_argument("-s", "--string", action="append", dest="strings", default=[],
                        help="String to evaluate (repeatable). Skips the interactive loop.")
    parser.add_argument("--sample", type=_count(1), metavar="N", help="Evaluate N random strings.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for --sample.")
    parser.add_argument("--max-length", type=_count(0), default=8, help="Longest sampled string.")
    parser.add_argument("--table", action="store_true", help="Print the transition table and coverage.")
    parser.add_argument("--no-path", action="store_true", help="Only print verdicts.")
    parser.add_argument("--plot", metavar="FILE", help="Save a state diagram to FILE.")
    parser.add_argument("--report", metavar="FILE", help="Write evaluation outcomes to FILE as JSON.")
    parser.add_argument("--save-definition", metavar="FILE",
                        help="Write the validated definition to FILE as JSON (not with --builtin).")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_automaton(args: argparse.Namespace) -> tuple[Automaton, Optional[Definition]]:
    """Built-in automata have no Definition; the second item is then None."""
    if args.builtin:
        return BUILTINS[args.builtin](), None
    if args.definition:
        definition = load_definition(args.definition)
    else:
        print("--- Deterministic Finite Automaton Simulator ---")
        print("Define the components of your automaton.")
        definition = prompt_definition()
    return automaton_from_definition(definition), definition


def print_table(automaton: Automaton, out: TextIO) -> None:
    print(transition_table(automaton).to_string(), file=out)
    gaps = missing_transitions(automaton)
    if gaps:
        listed = ", ".join(f"δ({state}, {group})" for state, group in gaps)
        print(f"missing transitions: {listed}", file=out)
    reachable = reachable_states(automaton)
    unreachable = [s for s in automaton.states if s not in reachable]
    if unreachable:
        print(f"unreachable states: {', '.join(unreachable)}", file=out)


def run_batch(automaton: Automaton, texts: Iterable[str], show_path: bool, out: TextIO) -> list[Outcome]:
    outcomes = evaluate_many(automaton, texts)
    for outcome in outcomes:
        print(f"{outcome.text!r}", file=out)
        print(format_outcome(outcome, show_path=show_path), file=out)
    successes = [o for o in outcomes if o.ok]
    if successes:
        print(f"accepted {acceptance_rate(outcomes):.0%} of {len(successes)} evaluated strings", file=out)
    return outcomes


def run_session(
    automaton: Automaton,
    config: SessionConfig,
    lines: Iterable[str],
    out: TextIO,
) -> list[Outcome]:
    """Evaluate each line until a quit command or the end of input."""
    outcomes = []
    hint = f"Type a string to test or '{config.quit_commands[0]}' to stop."
    print(hint, file=out)
    out.write(config.prompt)
    out.flush()
    for line in lines:
        text = line.strip()
        if text.lower() in config.quit_commands:
            print("stopping...", file=out)
            break
        outcome = check(automaton, text)
        outcomes.append(outcome)
        print(format_outcome(outcome, show_path=config.show_path), file=out)
        print(hint, file=out)
        out.write(config.prompt)
        out.flush()
    return outcomes


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.builtin and args.save_definition:
        parser.error("--save-definition cannot be combined with --builtin")

    try:
        automaton, definition = load_automaton(args)
    except (DefinitionError, FileNotFoundError) as err:
        print(format_error(err), file=sys.stderr)
        return 2
    except (EOFError, KeyboardInterrupt):
        print("\ndefinition aborted", file=sys.stderr)
        return 2

    if args.save_definition:
        save_definition(definition, args.save_definition)
        print(f"definition saved to {args.save_definition}")

    if args.table:
        print_table(automaton, sys.stdout)
    if args.plot:
        from dfasim.viz.plotting import save_automaton_plot

        save_automaton_plot(automaton, args.plot)
        print(f"state diagram saved to {args.plot}")

    texts = list(args.strings)
    if args.sample:
        sampling = SamplingConfig(n_strings=args.sample, max_length=args.max_length)
        texts.extend(random_strings(automaton, sampling, make_rng(args.seed)))

    if texts:
        outcomes = run_batch(automaton, texts, show_path=not args.no_path, out=sys.stdout)
    else:
        print("\n--- Start testing ---")
        outcomes = run_session(automaton, SessionConfig(show_path=not args.no_path), sys.stdin, sys.stdout)

    if args.report:
        from dfasim.io.report import save_report

        save_report(outcomes, automaton, args.report)
        print(f"report written to {args.report}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
