"""Graph rendering of extraction triples."""
from .relation_graph import RelationGraph
from .renderer import render_graph

__all__ = ["RelationGraph", "render_graph"]
