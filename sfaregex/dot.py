"""Graphviz DOT output for deterministic automata."""

from __future__ import annotations

from pathlib import Path

from .dfa import DFA

_GRAPH_NAME = "DFA"


def _node_attrs() -> dict[str, str]:
    return {"fontname": "meiryo", "fontsize": "18"}


def _edge_attrs() -> dict[str, str]:
    return {"fontname": "meiryo", "fontsize": "18", "len": "1.5", "labelfloat": "false"}


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _attr_list(attrs: dict[str, str]) -> str:
    body = ", ".join(f"{key}={_quote(value)}" for key, value in sorted(attrs.items()))
    return f"[{body}]"


def dfa_to_dot(dfa: DFA) -> str:
    """Render the automaton as a directed DOT graph."""
    lines = [f"digraph {_GRAPH_NAME} {{", "\trankdir=LR;"]

    start_attrs = _node_attrs()
    start_attrs["shape"] = "point"
    lines.append(f'\t"" {_attr_list(start_attrs)};')

    states = {dfa.initial, *dfa.rules.values()}
    for state in sorted(states):
        attrs = _node_attrs()
        if state in dfa.accepts:
            attrs["shape"] = "doublecircle"
        lines.append(f"\t{_quote(str(state))} {_attr_list(attrs)};")

    init_attrs = _edge_attrs()
    init_attrs["len"] = "2"
    lines.append(f'\t"" -> {_quote(str(dfa.initial))} {_attr_list(init_attrs)};')

    for arg, dst in sorted(dfa.rules.items()):
        attrs = _edge_attrs()
        attrs["label"] = f"'{arg.symbol}'"
        lines.append(
            f"\t{_quote(str(arg.source))} -> {_quote(str(dst))} {_attr_list(attrs)};"
        )

    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(dfa: DFA, name: str) -> Path:
    """Write the DOT graph to ``<name>.dot`` and return its path."""
    path = Path(f"{name}.dot")
    path.write_text(dfa_to_dot(dfa), encoding="utf-8")
    return path