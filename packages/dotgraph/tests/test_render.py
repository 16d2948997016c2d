from dotgraph.parser.ast import (
    Attribute,
    Bare,
    Cluster,
    DotEdge,
    DotGraph,
    HtmlLike,
    Node,
    Number,
)
from dotgraph.render import render, render_edge, render_node, render_node_lines


def test_render_strict_digraph_header():
    graph = DotGraph(
        strict=True,
        directed=True,
        id=Bare("G"),
        nodes=[Node(1)],
        edges=[DotEdge(1, 1, [], True)],
    )

    assert render(graph) == "strict digraph G {\n\t1;\n\t1 -> 1;\n}\n"


def test_render_undirected_graph_with_attributes():
    graph = DotGraph(
        directed=False,
        attributes=[Attribute("rankdir", Bare("LR"))],
        nodes=[Node(1, [Attribute("width", Number(2.0))]), Node(2)],
        edges=[DotEdge(1, 2, [Attribute("label", HtmlLike("<b>x</b>"))], False)],
    )

    assert render(graph) == (
        "graph {\n"
        "\tgraph [rankdir=LR];\n"
        "\t1 [width=2.0];\n"
        "\t2;\n"
        "\t1 -- 2 [label=<<b>x</b>>];\n"
        "}\n"
    )


def test_render_empty_graph():
    assert render(DotGraph()) == "digraph {\n}\n"


def test_render_edge():
    assert render_edge(DotEdge(3, 4, [], True)) == "\t3 -> 4;"
    assert render_edge(DotEdge(3, 4, [Attribute("color", Bare("red"))], False)) == (
        "\t3 -- 4 [color=red];"
    )


def test_render_cluster_nests_with_tabs():
    cluster = Cluster("A", [], [Node(1), Node(2)])

    assert render_node(cluster) == "\tsubgraph cluster_A {\n\t\t1;\n\t\t2;\n\t}"
    assert render(DotGraph(nodes=[cluster], edges=[DotEdge(1, 2)])) == (
        "digraph {\n"
        "\tsubgraph cluster_A {\n"
        "\t\t1;\n"
        "\t\t2;\n"
        "\t}\n"
        "\t1 -> 2;\n"
        "}\n"
    )


def test_render_nested_clusters_with_attributes():
    cluster = Cluster(
        "outer",
        [Attribute("label", Bare("Outer"))],
        [
            Node(1),
            Cluster("inner", [], [Node(2, [Attribute("shape", Bare("box"))])]),
            Cluster("empty"),
            Node(3),
        ],
    )

    assert render_node_lines(cluster) == [
        "subgraph cluster_outer {",
        "\tgraph [label=Outer];",
        "\t1;",
        "\tsubgraph cluster_inner {",
        "\t\t2 [shape=box];",
        "\t}",
        "\tsubgraph cluster_empty {",
        "\t}",
        "\t3;",
        "}",
    ]


def test_render_deeply_nested_clusters():
    depth = 5000
    node = Node(0)
    for level in range(depth):
        node = Cluster(str(level), [], [node])

    lines = render_node_lines(node)

    assert len(lines) == 2 * depth + 1
    assert lines[depth] == "\t" * depth + "0;"
    assert lines[-1] == "}"
