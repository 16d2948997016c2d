"""Attribute lists: ``[name=value, ...]`` as attached to graphs, nodes and edges."""

from dotgraph.ids import parse_graph_id, render_graph_id
from dotgraph.parser.ast import Attribute
from dotgraph.parser.scanner import Scanner

SEPARATORS = {",", ";"}


def parse_attribute_list(scanner: Scanner) -> tuple[Attribute, ...]:
    attributes: list[Attribute] = []

    with scanner.annotate("Not a valid attribute list"):
        scanner.char("[")
        scanner.optional_whitespace()
        while scanner.peek() != "]":
            attributes.append(_parse_attribute(scanner))
            scanner.optional_whitespace()
            if scanner.peek() in SEPARATORS:
                scanner.char(scanner.peek())
                scanner.optional_whitespace()
        scanner.char("]")

    return tuple(attributes)


def render_attribute_list(attributes: tuple[Attribute, ...]) -> str:
    rendered = ", ".join(
        f"{attribute.name}={render_graph_id(attribute.value)}" for attribute in attributes
    )
    return f"[{rendered}]"


def _parse_attribute(scanner: Scanner) -> Attribute:
    name = scanner.bare_id()
    scanner.optional_whitespace()
    scanner.char("=")
    scanner.optional_whitespace()
    return Attribute(name=name, value=parse_graph_id(scanner))
