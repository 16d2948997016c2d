from dotgraph.errors import DotSyntaxError, GrammarArityError, ParseError
from dotgraph.parser.ast import (
    Attribute,
    Bare,
    Cluster,
    DotEdge,
    DotGraph,
    DotNode,
    GraphID,
    HtmlLike,
    Node,
    Number,
    Quoted,
)
from dotgraph.parser.parser import parse_dot_graph
from dotgraph.render import render
from dotgraph.transforms import make_strict, set_id

__all__ = [
    "Attribute",
    "Bare",
    "Cluster",
    "DotEdge",
    "DotGraph",
    "DotNode",
    "DotSyntaxError",
    "GrammarArityError",
    "GraphID",
    "HtmlLike",
    "Node",
    "Number",
    "ParseError",
    "Quoted",
    "make_strict",
    "parse_dot_graph",
    "render",
    "set_id",
]
