"""
Relation graph built from extraction triples.
- Subjects and objects become nodes, relations become labelled edges
- Keeps one edge per extraction, in extraction order
- Serializes to a Graphviz DOT description
"""
from __future__ import annotations
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Tuple

import networkx as nx


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class RelationGraph:
    def __init__(self):
        self.g = nx.MultiDiGraph()
        self._count = 0

    def add_extraction(self, extraction: Sequence[str]):
        subject, relation, obj = extraction[0], extraction[1], extraction[2]
        self.g.add_node(subject)
        self.g.add_node(obj)
        # index keeps the DOT output in extraction order
        self.g.add_edge(subject, obj, label=relation, index=self._count)
        self._count += 1

    def build_from_extractions(self, extractions: Iterable[Sequence[str]]):
        for extraction in extractions:
            self.add_extraction(extraction)
        return self

    def edges(self) -> List[Tuple[str, str, str]]:
        """Return (subject, object, relation) for every edge in insertion order."""
        data = sorted(self.g.edges(data=True), key=lambda e: e[2]["index"])
        return [(u, v, d["label"]) for u, v, d in data]

    def to_dot(self) -> str:
        lines = ["digraph {"]
        for subject, obj, relation in self.edges():
            lines.append(f"{_quote(subject)} -> {_quote(obj)} [ label={_quote(relation)} ];")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def save(self, path: Path) -> Path:
        path = Path(path)
        with path.open("w", encoding="utf-8") as f:
            f.write(self.to_dot())
        return path

    def stats(self) -> Dict[str, int]:
        return {"nodes": self.g.number_of_nodes(), "edges": self.g.number_of_edges()}
