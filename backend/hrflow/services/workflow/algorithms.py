"""Graph algorithms for workflow validation and scheduling.

This module provides the traversals the validator and simulator rely on:
- Reachability analysis using BFS
- Cycle detection using DFS with a recursion stack
- Execution ordering using Kahn's algorithm

All traversals guard against revisiting nodes, so they terminate on cyclic
graphs, and none of them recurse, so long chains do not hit the
interpreter's recursion limit.

Time Complexity: O(V + E) for every algorithm.
Space Complexity: O(V) beyond the graph index.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hrflow.schemas.workflow import WorkflowNode
    from hrflow.services.workflow.graph import WorkflowGraph


class GraphAlgorithms:
    """Collection of stateless graph algorithms over a WorkflowGraph.

    Example:
        >>> graph = WorkflowGraph.from_workflow(nodes, edges)
        >>> cycle = GraphAlgorithms.detect_cycle(graph, graph.node_ids)
        >>> if cycle:
        ...     print(" -> ".join(cycle))
    """

    @staticmethod
    def reachable_from(graph: WorkflowGraph, start_id: str) -> set[str]:
        """Collect every id reachable from ``start_id`` by following edges.

        Args:
            graph: The graph to traverse.
            start_id: Node to start from (included in the result).

        Returns:
            Set of reached ids. May contain edge targets that are not
            known nodes.

        Example:
            >>> # start -> a -> b, c isolated
            >>> GraphAlgorithms.reachable_from(graph, "start")
            {'start', 'a', 'b'}
        """
        reachable: set[str] = set()
        queue: deque[str] = deque([start_id])

        while queue:
            current = queue.popleft()
            if current in reachable:
                continue
            reachable.add(current)

            for successor in graph.get_successors(current):
                if successor not in reachable:
                    queue.append(successor)

        return reachable

    @staticmethod
    def detect_cycle(
        graph: WorkflowGraph,
        roots: Iterable[str],
    ) -> list[str] | None:
        """Detect the first cycle using DFS with path tracking.

        Every root not already visited starts a new traversal, so cycles in
        components disconnected from the start node are found too.

        Args:
            graph: The graph to check.
            roots: Traversal roots in the order to try them
                (normally the node-list order).

        Returns:
            The traversal path from the DFS root to the back-edge, ending
            with the node that closes the cycle, or None if acyclic.

        Example:
            >>> # start -> a -> b -> a
            >>> GraphAlgorithms.detect_cycle(graph, ["start", "a", "b"])
            ['start', 'a', 'b', 'a']
        """
        visited: set[str] = set()
        on_stack: set[str] = set()

        for root in roots:
            if root in visited:
                continue

            visited.add(root)
            on_stack.add(root)
            path: list[str] = [root]
            pending: list[Iterator[str]] = [iter(graph.get_successors(root))]

            while pending:
                successor = next(pending[-1], None)
                if successor is None:
                    pending.pop()
                    on_stack.discard(path.pop())
                    continue

                if successor not in visited:
                    visited.add(successor)
                    on_stack.add(successor)
                    path.append(successor)
                    pending.append(iter(graph.get_successors(successor)))
                elif successor in on_stack:
                    return [*path, successor]

        return None

    @staticmethod
    def topological_order(graph: WorkflowGraph) -> list[WorkflowNode]:
        """Kahn's algorithm for a single execution order.

        Ready nodes are processed first-in first-out, seeded in node order,
        so ties keep the document order. Nodes caught in a cycle never
        reach in-degree 0 and are left out; this method does not report
        cycles itself.

        Args:
            graph: The graph to order (expected to be acyclic).

        Returns:
            Nodes in an order consistent with every edge between known nodes.

        Example:
            >>> # a -> b, a -> c, b -> d, c -> d
            >>> [n.id for n in GraphAlgorithms.topological_order(graph)]
            ['a', 'b', 'c', 'd']
        """
        in_degree = graph.in_degrees()
        queue: deque[str] = deque(
            node_id for node_id in graph.node_ids if in_degree[node_id] == 0
        )

        order: list[WorkflowNode] = []
        while queue:
            node_id = queue.popleft()
            node = graph.get_node(node_id)
            if node is not None:
                order.append(node)

            for successor in graph.get_successors(node_id):
                if successor not in in_degree:
                    continue
                in_degree[successor] -= 1
                if in_degree[successor] == 0:
                    queue.append(successor)

        return order


__all__ = ["GraphAlgorithms"]
