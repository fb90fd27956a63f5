"""Structural metrics, sampling and tabular views of automata."""
