import logging

from dotgraph.attributes import parse_attribute_list
from dotgraph.ids import parse_graph_id
from dotgraph.parser.ast import Attribute, DotEdge, DotGraph, GraphID, Node
from dotgraph.parser.scanner import Scanner

logger = logging.getLogger(__name__)

DIRECTED_GRAPH = "digraph"
UNDIRECTED_GRAPH = "graph"
DIRECTED_EDGE = "->"
UNDIRECTED_EDGE = "--"


class DotParser:
    """Parses the fixed-order DOT subset: header, defaults, nodes, edges, close.

    Each stage runs once and never revisits an earlier one, so a node
    statement after the first edge statement is a syntax error.
    """

    def __init__(self, source: str):
        self._scanner = Scanner(source)

    def parse(self) -> DotGraph:
        scanner = self._scanner
        with scanner.annotate("Not a valid DotGraph"):
            strict, directed, graph_id = self._parse_header()
            attributes = self._parse_defaults()
            nodes = scanner.many1(self._parse_node_statement, "node statement")
            edges = scanner.many1(self._parse_edge_statement, "edge statement")
            scanner.optional_whitespace()
            scanner.char("}")
            scanner.expect_end()

        logger.debug("Parsed DOT graph with %d nodes and %d edges", len(nodes), len(edges))
        return DotGraph(
            strict=strict,
            directed=directed,
            id=graph_id,
            attributes=attributes,
            nodes=tuple(nodes),
            edges=tuple(edges),
        )

    def parse_node(self) -> Node:
        scanner = self._scanner
        with scanner.annotate("Not a valid DotNode"):
            node_id = scanner.integer()
            attributes = scanner.optional(self._parse_spaced_attributes)
            scanner.char(";")
        return Node(id=node_id, attributes=attributes or ())

    def parse_edge(self) -> DotEdge:
        scanner = self._scanner
        with scanner.annotate("Not a valid DotEdge"):
            scanner.optional_whitespace()
            head = scanner.integer()
            scanner.whitespace()
            operator = scanner.strings([DIRECTED_EDGE, UNDIRECTED_EDGE])
            scanner.whitespace()
            tail = scanner.integer()
            attributes = scanner.optional(self._parse_spaced_attributes)
            scanner.char(";")
        return DotEdge(
            head=head,
            tail=tail,
            attributes=attributes or (),
            directed=operator == DIRECTED_EDGE,
        )

    def _parse_header(self) -> tuple[bool, bool, GraphID | None]:
        scanner = self._scanner
        strict = scanner.optional(self._parse_strict) is not None
        graph_type = scanner.strings([DIRECTED_GRAPH, UNDIRECTED_GRAPH])
        graph_id = scanner.optional(self._parse_spaced_graph_id)
        scanner.whitespace()
        scanner.char("{")
        scanner.skip_to_newline()
        return strict, graph_type == DIRECTED_GRAPH, graph_id

    def _parse_strict(self) -> str:
        keyword = self._scanner.string("strict")
        self._scanner.whitespace()
        return keyword

    def _parse_spaced_graph_id(self) -> GraphID:
        self._scanner.whitespace()
        return parse_graph_id(self._scanner)

    def _parse_defaults(self) -> tuple[Attribute, ...]:
        statements = self._scanner.many(self._parse_default_statement)
        return tuple(attribute for attributes in statements for attribute in attributes)

    def _parse_default_statement(self) -> tuple[Attribute, ...]:
        scanner = self._scanner
        scanner.optional_whitespace()
        return scanner.one_of(
            self._parse_edge_defaults,
            self._parse_node_defaults,
            self._parse_graph_attributes,
            expected="an edge, node or graph attribute statement",
        )

    def _parse_edge_defaults(self) -> tuple[Attribute, ...]:
        # Default edge attributes are not modelled.
        self._scanner.string("edge")
        self._scanner.skip_to_newline()
        return ()

    def _parse_node_defaults(self) -> tuple[Attribute, ...]:
        self._scanner.string("node")
        self._scanner.skip_to_newline()
        return ()

    def _parse_graph_attributes(self) -> tuple[Attribute, ...]:
        scanner = self._scanner
        scanner.string("graph")
        scanner.whitespace()
        attributes = parse_attribute_list(scanner)
        scanner.skip_to_newline()
        return attributes

    def _parse_node_statement(self) -> Node:
        self._scanner.optional_whitespace()
        node = self.parse_node()
        self._scanner.skip_to_newline()
        return node

    def _parse_edge_statement(self) -> DotEdge:
        self._scanner.optional_whitespace()
        edge = self.parse_edge()
        self._scanner.skip_to_newline()
        return edge

    def _parse_spaced_attributes(self) -> tuple[Attribute, ...]:
        self._scanner.whitespace()
        return parse_attribute_list(self._scanner)


def parse_dot_graph(source: str) -> DotGraph:
    return DotParser(source).parse()
