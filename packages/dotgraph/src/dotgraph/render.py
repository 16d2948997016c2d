"""DOT text output for graphs, nodes, clusters and edges."""

import logging

from dotgraph.attributes import render_attribute_list
from dotgraph.ids import render_graph_id
from dotgraph.parser.ast import Cluster, DotEdge, DotGraph, DotNode, Node

logger = logging.getLogger(__name__)

_CLOSE_CLUSTER = "}"


def render(graph: DotGraph) -> str:
    header = "digraph" if graph.directed else "graph"
    if graph.strict:
        header = "strict " + header
    if graph.id is not None:
        header += " " + render_graph_id(graph.id)

    lines = [header + " {"]
    if graph.attributes:
        lines.append(f"\tgraph {render_attribute_list(graph.attributes)};")
    for node in graph.nodes:
        lines.append(render_node(node))
    for edge in graph.edges:
        lines.append(render_edge(edge))
    lines.append("}")

    text = "\n".join(lines) + "\n"
    logger.debug("Rendered DOT graph as %d lines", text.count("\n"))
    return text


def render_node(node: DotNode) -> str:
    """Render ``node`` as it appears in a graph body, one tab deep."""
    return "\n".join("\t" + line for line in render_node_lines(node))


def render_node_lines(node: DotNode) -> list[str]:
    """Unindented lines for ``node``; cluster contents are indented one tab per level."""
    lines: list[str] = []
    pending: list[tuple[DotNode | str, int]] = [(node, 0)]

    while pending:
        item, depth = pending.pop()
        indent = "\t" * depth
        if isinstance(item, str):
            lines.append(indent + item)
        elif isinstance(item, Node):
            lines.append(indent + _node_statement(item))
        else:
            lines.extend(indent + line for line in _cluster_opening(item))
            pending.append((_CLOSE_CLUSTER, depth))
            pending.extend((element, depth + 1) for element in reversed(item.elements))

    return lines


def render_edge(edge: DotEdge) -> str:
    operator = "->" if edge.directed else "--"
    statement = f"{edge.head} {operator} {edge.tail}"
    if edge.attributes:
        statement += " " + render_attribute_list(edge.attributes)
    return f"\t{statement};"


def _node_statement(node: Node) -> str:
    if not node.attributes:
        return f"{node.id};"
    return f"{node.id} {render_attribute_list(node.attributes)};"


def _cluster_opening(cluster: Cluster) -> list[str]:
    lines = [f"subgraph cluster_{cluster.id} {{"]
    if cluster.attributes:
        lines.append(f"\tgraph {render_attribute_list(cluster.attributes)};")
    return lines
