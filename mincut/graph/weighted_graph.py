"""Undirected weighted graph with symmetric edges and an incidence index.

`WeightedGraph` extends `networkx.Graph` and keeps two extra indexes next to the
networkx adjacency: a global edge set and a per-vertex incidence set, both
holding `Edge` objects. An `Edge` compares and hashes by its unordered pair of
endpoints, so at most one edge per vertex pair is stored. What happens when the
same pair is added twice is controlled by `GraphConfig.parallel_edges`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterable, KeysView, Optional, Tuple

import networkx as nx

from mincut.config import GRAPH_CONFIG, GraphConfig, ParallelEdgePolicy
from mincut.errors import FrozenGraphError, InvalidEdgeError, VertexNotFoundError

NodeID = Hashable

WEIGHT = "weight"


@dataclass(frozen=True, eq=False)
class Edge:
    """An undirected weighted edge between two distinct vertices.

    Equality and hashing ignore both the weight and the order of the
    endpoints: ``Edge("a", "b", 1.0) == Edge("b", "a", 7.0)``.

    Attributes:
        u: First endpoint, as given when the edge was created.
        v: Second endpoint.
        weight: Edge weight.

    Raises:
        InvalidEdgeError: If an endpoint is None or ``u == v``.
    """

    u: NodeID
    v: NodeID
    weight: float = 1.0

    def __post_init__(self) -> None:
        if self.u is None or self.v is None or self.u == self.v:
            raise InvalidEdgeError(
                f"{self.u!r} and {self.v!r} cannot be None or equal."
            )

    @property
    def endpoints(self) -> frozenset:
        return frozenset((self.u, self.v))

    def other(self, vertex: NodeID) -> NodeID:
        """Return the endpoint opposite to ``vertex``.

        Raises:
            VertexNotFoundError: If ``vertex`` is not an endpoint of this edge.
        """
        if vertex == self.u:
            return self.v
        if vertex == self.v:
            return self.u
        raise VertexNotFoundError(
            f"{vertex!r} is not on the edge {self.u!r} -- {self.v!r}."
        )

    def ordered(self) -> Tuple[NodeID, NodeID]:
        """Return both endpoints in canonical order.

        Endpoints are sorted by value, or by ``repr`` when they do not compare,
        so ``Edge("b", "a")`` and ``Edge("a", "b")`` serialize the same way.
        """
        try:
            if self.v < self.u:
                return self.v, self.u
            return self.u, self.v
        except TypeError:
            first, second = sorted((self.u, self.v), key=repr)
            return first, second

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.u == other.u and self.v == other.v) or (
            self.u == other.v and self.v == other.u
        )

    def __hash__(self) -> int:
        return hash(self.endpoints)

    def __str__(self) -> str:
        a, b = self.ordered()
        return f"{a} -- {b} ({self.weight:g})"


class EdgeData(dict):
    """Networkx edge attribute dict whose ``weight`` entry is read-only.

    ``g[u][v]`` and ``g.edges[u, v]`` hand out this dict, so other attributes
    stay writable while the weight always equals the stored `Edge.weight`.
    Only `WeightedGraph.add_edge` sets it.
    """

    def _guard(self, key: Any) -> None:
        if key == WEIGHT:
            raise FrozenGraphError(
                "Edge weight is read-only; use add_edge() to change it."
            )

    def __setitem__(self, key: Any, value: Any) -> None:
        self._guard(key)
        super().__setitem__(key, value)

    def __delitem__(self, key: Any) -> None:
        self._guard(key)
        super().__delitem__(key)

    def update(self, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        items = dict(*args, **kwargs)
        if WEIGHT in items:
            self._guard(WEIGHT)
        super().update(items)

    def __ior__(self, other: Any) -> EdgeData:  # type: ignore[override]
        self.update(other)
        return self

    def setdefault(self, key: Any, default: Any = None) -> Any:
        if key not in self:
            self._guard(key)
        return super().setdefault(key, default)

    def pop(self, key: Any, *default: Any) -> Any:
        self._guard(key)
        return super().pop(key, *default)

    def popitem(self) -> Tuple[Any, Any]:
        if self:
            self._guard(next(reversed(self)))
        return super().popitem()

    def clear(self) -> None:
        if WEIGHT in self:
            self._guard(WEIGHT)
        super().clear()

    def __reduce__(self) -> Any:
        # copy, deepcopy and pickle rebuild through __init__, which skips _guard
        return (EdgeData, (dict(self),))

    def _set_weight(self, weight: float) -> None:
        dict.__setitem__(self, WEIGHT, weight)


class WeightedGraph(nx.Graph):
    """An undirected weighted graph with at most one edge per vertex pair.

    This class enforces:
      - No self-loops and no None endpoints (raises InvalidEdgeError).
      - Adding a vertex twice is a no-op.
      - Adding an edge creates missing endpoints.
      - Re-adding an edge between the same pair follows the configured
        `ParallelEdgePolicy`; the edge count never grows.
      - Removing a missing vertex raises VertexNotFoundError; removing a
        missing edge is a no-op.
      - A frozen graph rejects every mutation with FrozenGraphError.

    The networkx mutators (``add_node``, ``add_edges_from``, ``remove_node``,
    ...) are routed through the same bookkeeping, so the edge and incidence
    indexes stay consistent with the networkx adjacency whichever API is used.

    Inherits from:
        networkx.Graph
    """

    edge_attr_dict_factory = EdgeData

    def __init__(self, config: Optional[GraphConfig] = None, **attr: Any) -> None:
        """Initialize an empty WeightedGraph.

        Args:
            config: Parallel-edge behaviour; defaults to the global GRAPH_CONFIG.
            **attr: Graph attributes forwarded to networkx.

        Attributes:
            _edges: Global edge set (dict used as an ordered set).
            _incidence: Map vertex to the set of its incident edges.
        """
        super().__init__(**attr)
        self._config: GraphConfig = config if config is not None else GRAPH_CONFIG
        self._edges: Dict[Edge, Edge] = {}
        self._incidence: Dict[NodeID, Dict[Edge, Edge]] = {}

    @property
    def config(self) -> GraphConfig:
        return self._config

    #
    # Vertex management
    #
    def add_vertex(self, vertex: NodeID, **attr: Any) -> None:
        """Add a vertex if it is not already present.

        Args:
            vertex: Hashable vertex label.
            **attr: Optional vertex attributes (merged into existing ones).

        Raises:
            ValueError: If vertex is None.
            FrozenGraphError: If the graph is frozen.
        """
        self._check_mutable()
        super().add_node(vertex, **attr)
        self._incidence.setdefault(vertex, {})

    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        self.add_vertex(node_for_adding, **attr)

    def add_nodes_from(self, nodes_for_adding: Iterable[Any], **attr: Any) -> None:
        self._check_mutable()
        super().add_nodes_from(nodes_for_adding, **attr)
        for vertex in self._adj:
            self._incidence.setdefault(vertex, {})

    def remove_vertex(self, vertex: NodeID) -> None:
        """Remove a vertex together with every edge touching it.

        Args:
            vertex: The vertex to remove.

        Raises:
            VertexNotFoundError: If the vertex does not exist.
            FrozenGraphError: If the graph is frozen.
        """
        self._check_mutable()
        if vertex not in self._adj:
            raise VertexNotFoundError(f"Vertex {vertex!r} does not exist.")
        for edge in list(self._incidence.get(vertex, ())):
            other = edge.other(vertex)
            del self._incidence[other][edge]
            del self._edges[edge]
        self._incidence.pop(vertex, None)
        super().remove_node(vertex)

    def remove_node(self, n: NodeID) -> None:
        self.remove_vertex(n)

    def remove_nodes_from(self, nodes: Iterable[NodeID]) -> None:
        # networkx semantics: silently skip missing nodes
        for vertex in list(nodes):
            if vertex in self._adj:
                self.remove_vertex(vertex)

    #
    # Edge management
    #
    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_of_edge: NodeID,
        v_of_edge: NodeID,
        weight: float = 1.0,
        **attr: Any,
    ) -> Edge:
        """Add an undirected edge, creating missing endpoints.

        If an edge between the same pair already exists, the configured
        `ParallelEdgePolicy` decides the stored weight; the edge count is
        unchanged either way.

        Args:
            u_of_edge: One endpoint.
            v_of_edge: The other endpoint.
            weight: Edge weight.
            **attr: Extra edge attributes kept on the networkx edge data.

        Returns:
            Edge: The edge stored for this pair after the call.

        Raises:
            InvalidEdgeError: On a self-loop, a None endpoint, or a weight that
                is not a number. The graph is left unchanged.
            FrozenGraphError: If the graph is frozen.
        """
        self._check_mutable()
        try:
            weight = float(weight)
        except (TypeError, ValueError) as exc:
            raise InvalidEdgeError(f"Edge weight {weight!r} is not a number.") from exc
        edge = Edge(u_of_edge, v_of_edge, weight)

        existing = self._edges.get(edge)
        if existing is not None:
            edge = self._resolve_parallel(existing, edge)
            if edge is existing:
                return existing
            self._forget_edge(existing)

        self.add_vertex(u_of_edge)
        self.add_vertex(v_of_edge)
        super().add_edge(u_of_edge, v_of_edge, **attr)
        self._adj[u_of_edge][v_of_edge]._set_weight(edge.weight)
        self._edges[edge] = edge
        self._incidence[u_of_edge][edge] = edge
        self._incidence[v_of_edge][edge] = edge
        return edge

    def add_edges_from(self, ebunch_to_add: Iterable[Any], **attr: Any) -> None:
        """Add edges given as ``(u, v)`` or ``(u, v, data)`` tuples.

        The ``weight`` key of ``data`` (or of ``attr``) becomes the edge weight.
        """
        for item in ebunch_to_add:
            if len(item) == 3:
                u, v, data = item
            elif len(item) == 2:
                u, v = item
                data = {}
            else:
                raise InvalidEdgeError(
                    f"Edge tuple {item!r} must be a 2-tuple or 3-tuple."
                )
            edge_attr = {**attr, **data}
            weight = edge_attr.pop("weight", 1.0)
            self.add_edge(u, v, weight, **edge_attr)

    def remove_edge(self, u: Any, v: Optional[NodeID] = None) -> None:
        """Remove the edge between two vertices, or the given `Edge`.

        Accepts either ``remove_edge(edge)`` or ``remove_edge(u, v)``. Missing
        edges are ignored.

        Raises:
            FrozenGraphError: If the graph is frozen.
        """
        self._check_mutable()
        if v is None and isinstance(u, Edge):
            u, v = u.u, u.v
        try:
            key = Edge(u, v)
        except InvalidEdgeError:
            return
        existing = self._edges.get(key)
        if existing is None:
            return
        self._forget_edge(existing)
        super().remove_edge(u, v)

    def remove_edges_from(self, ebunch: Iterable[Any]) -> None:
        for item in list(ebunch):
            if isinstance(item, Edge):
                self.remove_edge(item)
            else:
                self.remove_edge(item[0], item[1])

    def clear(self) -> None:
        self._check_mutable()
        super().clear()
        self._edges.clear()
        self._incidence.clear()

    def clear_edges(self) -> None:
        self._check_mutable()
        super().clear_edges()
        self._edges.clear()
        for incident in self._incidence.values():
            incident.clear()

    def _resolve_parallel(self, existing: Edge, incoming: Edge) -> Edge:
        policy = self._config.parallel_edges
        if policy is ParallelEdgePolicy.KEEP:
            return existing
        if policy is ParallelEdgePolicy.SUM:
            return Edge(incoming.u, incoming.v, existing.weight + incoming.weight)
        if policy is ParallelEdgePolicy.MAX:
            return existing if existing.weight >= incoming.weight else incoming
        return incoming

    def _forget_edge(self, edge: Edge) -> None:
        # Drop the edge from both indexes; networkx adjacency is handled by the caller
        del self._edges[edge]
        del self._incidence[edge.u][edge]
        del self._incidence[edge.v][edge]

    #
    # Read-only queries
    #
    def get_vertices(self) -> KeysView[NodeID]:
        """Return a read-only live view of all vertices."""
        return self._adj.keys()

    def get_edges(self) -> KeysView[Edge]:
        """Return a read-only live view of all edges."""
        return self._edges.keys()

    def get_edges_of(self, vertex: NodeID) -> KeysView[Edge]:
        """Return a read-only live view of the edges touching ``vertex``.

        Raises:
            VertexNotFoundError: If the vertex does not exist.
        """
        if vertex not in self._adj:
            raise VertexNotFoundError(f"Vertex {vertex!r} does not exist.")
        return self._incidence[vertex].keys()

    def get_edge(self, u: NodeID, v: NodeID) -> Optional[Edge]:
        """Return the stored edge between ``u`` and ``v``, or None."""
        try:
            return self._edges.get(Edge(u, v))
        except InvalidEdgeError:
            return None

    def vertex_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        return len(self._edges)

    def total_weight(self) -> float:
        """Return the sum of all edge weights."""
        return sum(edge.weight for edge in self._edges)

    def is_connected(self) -> bool:
        """Return True if the graph has vertices and a single component."""
        return bool(self._adj) and nx.is_connected(self)

    #
    # Derived graphs
    #
    def copy(self) -> WeightedGraph:  # type: ignore[override]
        """Create an independent, mutable copy of this graph.

        Unlike networkx, views are not supported: a view would not carry the
        edge and incidence indexes.

        Returns:
            WeightedGraph: A new graph with the same vertices and edges.
        """
        return self.induced(self._adj)

    def subgraph(self, nodes: Iterable[NodeID]) -> WeightedGraph:  # type: ignore[override]
        """Return a frozen induced copy on ``nodes``."""
        return self.induced(nodes).freeze()

    def induced(self, vertices: Iterable[NodeID]) -> WeightedGraph:
        """Build a new graph on ``vertices`` with every edge inside that set.

        Vertices not present in this graph are ignored.

        Args:
            vertices: Vertices to keep.

        Returns:
            WeightedGraph: A new, mutable graph with this graph's config.
        """
        keep = {vertex for vertex in vertices if vertex in self._adj}
        graph = WeightedGraph(config=self._config, **self.graph)
        for vertex in self._adj:
            if vertex in keep:
                graph.add_vertex(vertex, **self._node[vertex])
        for edge in self._edges:
            if edge.u in keep and edge.v in keep:
                data = dict(self._adj[edge.u][edge.v])
                data.pop("weight", None)
                graph.add_edge(edge.u, edge.v, edge.weight, **data)
        return graph

    def freeze(self) -> WeightedGraph:
        """Make this graph immutable and return it.

        Sets the same ``frozen`` flag that `networkx.is_frozen` reads.
        """
        self.frozen = True
        return self

    def _check_mutable(self) -> None:
        if nx.is_frozen(self):
            raise FrozenGraphError("Frozen graph can't be modified.")
