"""Parsing and printing of graph identifiers."""

from decimal import Decimal

from dotgraph.parser.ast import Bare, GraphID, HtmlLike, Number, Quoted
from dotgraph.parser.scanner import Scanner


def parse_graph_id(scanner: Scanner) -> GraphID:
    with scanner.annotate("Not a valid GraphID"):
        return scanner.one_of(
            lambda: Bare(scanner.bare_id()),
            lambda: Number(scanner.numeral()),
            lambda: Quoted(scanner.quoted_string()),
            lambda: HtmlLike(scanner.html_string()),
            expected="an identifier, number, quoted string or HTML string",
        )


def render_graph_id(graph_id: GraphID) -> str:
    if isinstance(graph_id, Bare):
        return graph_id.text
    if isinstance(graph_id, Number):
        return format_number(graph_id.value)
    if isinstance(graph_id, Quoted):
        return quote(graph_id.text)
    return f"<{graph_id.text}>"


def format_number(value: float) -> str:
    """Shortest decimal that reads back as ``value``, never in exponent form."""
    text = repr(float(value))
    if "e" in text:
        text = format(Decimal(text), "f")
    if "." not in text and text not in {"inf", "-inf", "nan"}:
        text += ".0"
    return text


def quote(text: str) -> str:
    escaped: list[str] = []
    for index, char in enumerate(text):
        if char == '"':
            escaped.append('\\"')
        elif char == "\\" and text[index + 1 : index + 2] in {"", '"', "\\"}:
            escaped.append("\\\\")
        else:
            escaped.append(char)
    return '"' + "".join(escaped) + '"'
