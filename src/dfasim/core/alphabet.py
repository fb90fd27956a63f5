"""
Alphabet resolution.

Turns an AlphabetSpec (named groups plus isolated symbols) into an
AlphabetIndex with a precomputed symbol -> group mapping.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Union

from dfasim.core.errors import DuplicateGroup, DuplicateSymbol, MalformedDefinition
from dfasim.core.types import AlphabetIndex, AlphabetSpec

SYMBOL_SEPARATOR = ","


def parse_symbol_list(raw: Union[str, Iterable[str]]) -> tuple[str, ...]:
    """
    Split a symbol list into unique symbols, keeping first-seen order.

    Strings are split on SYMBOL_SEPARATOR. Tokens are stripped and empty
    tokens dropped. Repeats collapse silently.

    Examples:
        >>> parse_symbol_list("0, 1,,2, 1")
        ('0', '1', '2')
    """
    tokens = raw.split(SYMBOL_SEPARATOR) if isinstance(raw, str) else raw
    seen: dict[str, None] = {}
    for token in tokens:
        token = token.strip()
        if token:
            seen.setdefault(token, None)
    return tuple(seen)


def _as_spec(spec: Union[AlphabetSpec, Mapping]) -> AlphabetSpec:
    if isinstance(spec, AlphabetSpec):
        return spec
    return AlphabetSpec(
        groups=spec.get("groups") or {},
        isolated=tuple(spec.get("isolated") or ()),
    )


def build_alphabet_index(spec: Union[AlphabetSpec, Mapping]) -> AlphabetIndex:
    """
    Resolve an alphabet specification into an AlphabetIndex.

    Named groups are processed in declaration order, then isolated symbols,
    each of which becomes a group labelled by the symbol itself.

    Args:
        spec: AlphabetSpec, or a mapping with optional "groups" and
            "isolated" keys.

    Returns:
        AlphabetIndex whose groups are pairwise disjoint.

    Raises:
        DuplicateSymbol: A symbol belongs to two groups.
        DuplicateGroup: A group label is declared twice.
        MalformedDefinition: A named group has no symbols.
    """
    spec = _as_spec(spec)

    group_of: dict[str, str] = {}
    labels: list[str] = []

    def add_group(label: str, members: tuple[str, ...]) -> None:
        for symbol in members:
            if symbol in group_of:
                raise DuplicateSymbol(symbol, (group_of[symbol], label))
        if label in labels:
            raise DuplicateGroup(label)
        labels.append(label)
        for symbol in members:
            group_of[symbol] = label

    for label, raw in spec.groups.items():
        members = parse_symbol_list(raw)
        if not members:
            raise MalformedDefinition("alphabet.groups", f"group {label!r} has no symbols")
        add_group(label, members)

    # isolated symbols are taken verbatim, whitespace included; repeats name
    # the same singleton group and collapse
    for symbol in dict.fromkeys(spec.isolated):
        if not symbol:
            raise MalformedDefinition("alphabet.isolated", "empty symbol")
        add_group(symbol, (symbol,))

    return AlphabetIndex(symbols=frozenset(group_of), group_of=group_of, groups=tuple(labels))
