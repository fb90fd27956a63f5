"""Definition records (parsed JSON) to Definition and back."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Union

from dfasim.core.errors import MalformedDefinition
from dfasim.core.types import AlphabetSpec, Definition


def _string_list(record: Mapping[str, Any], key: str, required: bool) -> tuple[str, ...]:
    if key not in record:
        if required:
            raise MalformedDefinition(key, "missing")
        return ()
    value = record[key]
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise MalformedDefinition(key, "must be a list of strings")
    for item in value:
        if not isinstance(item, str):
            raise MalformedDefinition(key, f"must contain strings, got {item!r}")
    return tuple(value)


def _alphabet(value: Any) -> AlphabetSpec:
    if not isinstance(value, Mapping):
        raise MalformedDefinition("alphabet", "must be a mapping")

    groups = value.get("groups") or {}
    if not isinstance(groups, Mapping):
        raise MalformedDefinition("alphabet.groups", "must be a mapping")
    for label, symbols in groups.items():
        if isinstance(symbols, str):
            continue
        if not isinstance(symbols, (list, tuple)) or not all(isinstance(s, str) for s in symbols):
            raise MalformedDefinition(
                "alphabet.groups", f"group {label!r} must be a string or a list of strings"
            )

    return AlphabetSpec(
        groups={label: s if isinstance(s, str) else tuple(s) for label, s in groups.items()},
        isolated=_string_list(value, "isolated", required=False),
    )


def _transitions(value: Any) -> dict[str, dict[str, str]]:
    if not isinstance(value, Mapping):
        raise MalformedDefinition("transitions", "must be a mapping")
    table: dict[str, dict[str, str]] = {}
    for origin, row in value.items():
        if not isinstance(row, Mapping):
            raise MalformedDefinition("transitions", f"row for {origin!r} must be a mapping")
        for group, destination in row.items():
            if not isinstance(destination, str):
                raise MalformedDefinition(
                    "transitions", f"destination of ({origin!r}, {group!r}) must be a string"
                )
        table[origin] = dict(row)
    return table


def parse_definition(record: Mapping[str, Any]) -> Definition:
    """
    Check the shape of a definition record and convert it.

    Expected keys: description, states, alphabet {groups, isolated},
    initialState, acceptingStates, transitions. Only states, alphabet and
    initialState are required. Cross references are not checked here; that
    is build_automaton's job.

    Raises:
        MalformedDefinition: A field is missing or has the wrong type.
    """
    if not isinstance(record, Mapping):
        raise MalformedDefinition("<root>", "definition must be a mapping")

    if "alphabet" not in record:
        raise MalformedDefinition("alphabet", "missing")
    if "initialState" not in record:
        raise MalformedDefinition("initialState", "missing")
    initial = record["initialState"]
    if not isinstance(initial, str):
        raise MalformedDefinition("initialState", "must be a string")
    description = record.get("description", "")
    if not isinstance(description, str):
        raise MalformedDefinition("description", "must be a string")

    return Definition(
        states=_string_list(record, "states", required=True),
        alphabet=_alphabet(record["alphabet"]),
        initial=initial,
        accepting=_string_list(record, "acceptingStates", required=False),
        transitions=_transitions(record.get("transitions", {})),
        description=description,
    )


def load_definition(path: Union[str, Path]) -> Definition:
    """
    Read a JSON definition file.

    Raises:
        FileNotFoundError: If path does not exist
        MalformedDefinition: If the file is not UTF-8 JSON or has the wrong shape
    """
    if not Path(path).exists():
        raise FileNotFoundError(f"Definition file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            record = json.load(f)
        except json.JSONDecodeError as err:
            raise MalformedDefinition("<root>", f"invalid JSON: {err}") from err
        except UnicodeDecodeError as err:
            raise MalformedDefinition("<root>", f"not UTF-8 text: {err}") from err
    return parse_definition(record)


def definition_to_record(definition: Definition) -> dict[str, Any]:
    return {
        "description": definition.description,
        "states": list(definition.states),
        "alphabet": {
            "groups": {
                label: symbols if isinstance(symbols, str) else ",".join(symbols)
                for label, symbols in definition.alphabet.groups.items()
            },
            "isolated": list(definition.alphabet.isolated),
        },
        "initialState": definition.initial,
        "acceptingStates": list(definition.accepting),
        "transitions": {origin: dict(row) for origin, row in definition.transitions.items()},
    }


def save_definition(definition: Definition, path: Union[str, Path]) -> None:
    """Write definition as a JSON record that load_definition reads back."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(definition_to_record(definition), f, indent=2, ensure_ascii=False)
