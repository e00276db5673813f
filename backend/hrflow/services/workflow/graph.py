"""Lookup structures over a workflow graph snapshot.

The index is rebuilt for every validation or simulation call and never
mutated afterwards. It keeps:
- a node-id map (duplicate ids: the last node wins)
- adjacency lists in edge insertion order, for every edge
- reverse adjacency for incoming-edge queries
- in-degree counts for known nodes, counting only edges whose target exists

Time Complexity:
- Construction: O(V + E)
- Successor / degree lookups: O(1)

Space Complexity: O(V + E)
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator

from hrflow.schemas.workflow import WorkflowEdge, WorkflowNode


class WorkflowGraph:
    """Directed graph index for a workflow snapshot.

    Example:
        >>> graph = WorkflowGraph.from_workflow(nodes, edges)
        >>> graph.get_successors("start-1")
        ['task-1']
        >>> graph.get_in_degree("task-1")
        1
    """

    __slots__ = (
        "_adjacency",
        "_edge_count",
        "_in_degree",
        "_nodes",
        "_reverse_adjacency",
    )

    def __init__(self) -> None:
        """Initialize an empty graph index."""
        self._nodes: dict[str, WorkflowNode] = {}
        self._adjacency: defaultdict[str, list[str]] = defaultdict(list)
        self._reverse_adjacency: defaultdict[str, list[str]] = defaultdict(list)
        self._in_degree: dict[str, int] = {}
        self._edge_count: int = 0

    @classmethod
    def from_workflow(
        cls,
        nodes: Iterable[WorkflowNode],
        edges: Iterable[WorkflowEdge],
    ) -> WorkflowGraph:
        """Build the index from raw node and edge lists.

        Args:
            nodes: Workflow nodes in document order.
            edges: Workflow edges in document order.

        Returns:
            A populated WorkflowGraph. Empty input yields an empty index.
        """
        graph = cls()
        for node in nodes:
            graph._nodes[node.id] = node
            graph._in_degree[node.id] = 0

        for edge in edges:
            graph._adjacency[edge.source].append(edge.target)
            graph._reverse_adjacency[edge.target].append(edge.source)
            if edge.target in graph._in_degree:
                graph._in_degree[edge.target] += 1
            graph._edge_count += 1

        return graph

    @property
    def node_count(self) -> int:
        """Get the number of distinct node ids."""
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        """Get the number of edges, including dangling ones."""
        return self._edge_count

    @property
    def node_ids(self) -> list[str]:
        """Distinct node ids in first-seen order."""
        return list(self._nodes)

    def get_node(self, node_id: str) -> WorkflowNode | None:
        return self._nodes.get(node_id)

    def get_successors(self, node_id: str) -> list[str]:
        """Get outgoing neighbors in edge insertion order.

        Targets that are not known nodes are included.
        """
        return self._adjacency.get(node_id, [])

    def get_predecessors(self, node_id: str) -> list[str]:
        return self._reverse_adjacency.get(node_id, [])

    def get_in_degree(self, node_id: str) -> int:
        """Get the in-degree of a known node (0 for unknown ids)."""
        return self._in_degree.get(node_id, 0)

    def get_out_degree(self, node_id: str) -> int:
        return len(self._adjacency.get(node_id, []))

    def has_incoming(self, node_id: str) -> bool:
        return bool(self._reverse_adjacency.get(node_id))

    def has_outgoing(self, node_id: str) -> bool:
        return bool(self._adjacency.get(node_id))

    def in_degrees(self) -> dict[str, int]:
        """Return a fresh copy of the in-degree table."""
        return dict(self._in_degree)

    def label_for(self, node_id: str) -> str:
        """Display label for a node id, falling back to the id itself."""
        node = self._nodes.get(node_id)
        return node.label if node is not None else node_id

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[WorkflowNode]:
        return iter(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"WorkflowGraph(nodes={self.node_count}, edges={self.edge_count})"


__all__ = ["WorkflowGraph"]
