from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Bare:
    text: str


@dataclass(slots=True, frozen=True)
class Number:
    value: float


@dataclass(slots=True, frozen=True)
class Quoted:
    text: str


@dataclass(slots=True, frozen=True)
class HtmlLike:
    text: str


GraphID = Bare | Number | Quoted | HtmlLike


@dataclass(slots=True, frozen=True)
class Attribute:
    name: str
    value: GraphID


@dataclass(slots=True, frozen=True)
class Node:
    id: int
    attributes: tuple[Attribute, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "attributes", tuple(self.attributes))


@dataclass(slots=True, frozen=True)
class Cluster:
    """A named group of nodes and clusters, printed as ``subgraph cluster_<id>``.

    Clusters are only ever built by callers; the parser produces flat nodes.
    """

    id: str
    attributes: tuple[Attribute, ...] = ()
    elements: tuple["DotNode", ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "attributes", tuple(self.attributes))
        object.__setattr__(self, "elements", tuple(self.elements))


DotNode = Node | Cluster


@dataclass(slots=True, frozen=True)
class DotEdge:
    head: int
    tail: int
    attributes: tuple[Attribute, ...] = ()
    directed: bool = True

    def __post_init__(self):
        object.__setattr__(self, "attributes", tuple(self.attributes))


@dataclass(slots=True, frozen=True)
class DotGraph:
    strict: bool = False
    directed: bool = True
    id: GraphID | None = None
    attributes: tuple[Attribute, ...] = ()
    nodes: tuple[DotNode, ...] = ()
    edges: tuple[DotEdge, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "attributes", tuple(self.attributes))
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))
