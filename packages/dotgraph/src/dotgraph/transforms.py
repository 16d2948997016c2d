from dataclasses import replace

from dotgraph.parser.ast import DotGraph, GraphID


def set_id(graph: DotGraph, graph_id: GraphID) -> DotGraph:
    return replace(graph, id=graph_id)


def make_strict(graph: DotGraph) -> DotGraph:
    return replace(graph, strict=True)
