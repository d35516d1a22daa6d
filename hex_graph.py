# hex_graph.py
#
# Undirected weighted graph over dense vertex indices 0..n-1.
# Each vertex carries a label, each edge carries a weight.
# Adjacency is kept per vertex in insertion order.

from typing import Any, Dict, Iterator, List, Tuple


class GraphError(Exception):
    """Base class for misuse of the graph (a bug in the caller, not a game event)."""


class InvalidVertexError(GraphError, IndexError):
    pass


class MissingEdgeError(GraphError, KeyError):
    pass


class Graph:
    """
    Undirected graph with labelled vertices and weighted edges.

    Vertices are appended with add_vertex() and never removed one by one;
    clear() drops everything at once.
    """

    def __init__(self):
        self._labels: List[Any] = []
        self._adj: List[Dict[int, Any]] = []
        self._nedges = 0

    # ---------- validation ----------

    def _validate_vertex(self, x: int) -> None:
        if not (0 <= x < len(self._labels)):
            raise InvalidVertexError(f"vertex {x} out of range (0..{len(self._labels) - 1})")

    def _validate_vertices(self, x: int, y: int) -> None:
        self._validate_vertex(x)
        self._validate_vertex(y)

    # ---------- accessors ----------

    def get_nodes(self) -> int:
        return len(self._labels)

    def get_edges(self) -> int:
        return self._nedges

    def is_vertex(self, x: int) -> bool:
        return 0 <= x < len(self._labels)

    def is_adjacent(self, x: int, y: int) -> bool:
        self._validate_vertices(x, y)
        return y in self._adj[x]

    def get_edge_weight(self, x: int, y: int) -> Any:
        """Weight of the edge x-y. The edge must exist."""
        self._validate_vertices(x, y)
        try:
            return self._adj[x][y]
        except KeyError:
            raise MissingEdgeError(f"no edge between {x} and {y}") from None

    def get_vertex_label(self, x: int) -> Any:
        self._validate_vertex(x)
        return self._labels[x]

    def get_neighbors(self, v: int) -> List[int]:
        """Neighbors of v, in the order the edges were added."""
        self._validate_vertex(v)
        return list(self._adj[v])

    def iter_neighbors(self, v: int) -> Iterator[int]:
        # no copy: callers must not add edges to v while iterating
        self._validate_vertex(v)
        return iter(self._adj[v])

    def iter_edges(self) -> Iterator[Tuple[int, int, Any]]:
        """Yield each undirected edge once as (i, j, weight) with i > j."""
        for i, neigh in enumerate(self._adj):
            for j, w in neigh.items():
                if j < i:
                    yield i, j, w

    # ---------- mutators ----------

    def add_vertex(self, label: Any) -> int:
        self._labels.append(label)
        self._adj.append({})
        return len(self._labels) - 1

    def add_edge(self, x: int, y: int, weight: Any = 1) -> None:
        """
        Connect x and y. If the edge already exists only its weight is
        updated, so the edge count never double counts a pair.
        """
        self._validate_vertices(x, y)
        if x == y:
            raise GraphError(f"self loop on vertex {x} is not allowed")
        if y in self._adj[x]:
            self.set_edge_weight(x, y, weight)
            return
        self._adj[x][y] = weight
        self._adj[y][x] = weight
        self._nedges += 1

    def set_edge_weight(self, x: int, y: int, weight: Any) -> None:
        """Change the weight of the edge x-y. The edge must exist."""
        self._validate_vertices(x, y)
        if y not in self._adj[x]:
            raise MissingEdgeError(f"no edge between {x} and {y}")
        self._adj[x][y] = weight
        self._adj[y][x] = weight

    def set_vertex_label(self, x: int, label: Any) -> None:
        self._validate_vertex(x)
        self._labels[x] = label

    def clear(self) -> None:
        self._labels.clear()
        self._adj.clear()
        self._nedges = 0

    def clone(self, other: "Graph") -> None:
        """
        Make this graph a copy of `other`, discarding what was here.

        Vertices (labels) first, then every undirected edge once. `other`
        must be simple and undirected, which add_edge() guarantees.
        """
        self.clear()
        for i in range(other.get_nodes()):
            self.add_vertex(other.get_vertex_label(i))
        for i, j, w in other.iter_edges():
            self.add_edge(i, j, w)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={self.get_nodes()}, edges={self.get_edges()})"
