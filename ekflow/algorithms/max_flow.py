"""Maximum-flow computation via Edmonds-Karp augmentation.

Repeatedly runs a breadth-first search over the residual graph of a
``Network`` to find a shortest (fewest-edge) augmenting path, pushes the path
bottleneck along it and records the path, until the sink is unreachable.

Reverse residual arcs are not materialised. During the search an edge may be
traversed against its direction when it carries positive flow; the parent
entry stored for the reached node is tagged as backward so that the bottleneck,
augmentation and reconstruction walks know which way the edge was used.
"""

from __future__ import annotations

import math
from collections import deque
from typing import List, Optional, Tuple

from ekflow.logging import get_logger
from ekflow.model.network import Edge, Network
from ekflow.types.base import Capacity, EngineState, NodeID
from ekflow.types.dto import AugmentingPath, MaxFlowResult

logger = get_logger(__name__)

#: Parent slot of a node reached by the search: the edge used and whether it
#: was traversed forward (True) or against its direction (False).
ParentEdge = Tuple[Edge, bool]


class MaxFlowEngine:
    """Edmonds-Karp solver bound to a network and a source/sink pair.

    The engine borrows the network for the duration of ``solve`` and updates
    edge flows in place. It keeps no other state between solves apart from the
    path history of the latest run.

    Example:
        >>> net = Network(3)
        >>> _ = net.add_edge(0, 1, 5)
        >>> _ = net.add_edge(1, 2, 3)
        >>> MaxFlowEngine(net, 0, 2).solve().total_flow
        3
    """

    def __init__(self, network: Network, source: NodeID, sink: NodeID) -> None:
        if source == sink:
            raise ValueError(f"Source and sink must differ (both are {source}).")
        self.network = network
        self.source = source
        self.sink = sink
        self.state = EngineState.SEARCHING
        self.iterations = 0
        self._paths: List[AugmentingPath] = []

    @property
    def augmenting_paths(self) -> List[AugmentingPath]:
        """Paths found by the most recent ``solve``, in discovery order."""
        return list(self._paths)

    def solve(self, reset_flows: bool = True) -> MaxFlowResult:
        """Run the search/augment loop to completion.

        Args:
            reset_flows: Zero all edge flows before starting. When False the
                engine continues from the flows already on the network and
                only reports the additional flow it can push.

        Returns:
            MaxFlowResult with the total flow pushed during this run, the
            augmenting paths in discovery order and the number of searches.
        """
        if reset_flows:
            self.network.reset_flows()
        self._paths.clear()
        self.iterations = 0
        self.state = EngineState.SEARCHING

        total_flow: Capacity = 0
        while self.state is EngineState.SEARCHING:
            self.iterations += 1
            parents = self.find_augmenting_path()
            if parents is None:
                self.state = EngineState.DONE
                continue

            bottleneck = self._bottleneck(parents)
            self._augment(parents, bottleneck)
            path = AugmentingPath(self._reconstruct_path(parents), bottleneck)
            self._paths.append(path)
            total_flow += bottleneck

            logger.debug(
                f"Path {len(self._paths)}: "
                f"{' -> '.join(str(n) for n in path.path)} with flow = {bottleneck}"
            )

        logger.debug(
            f"Max flow {self.source}->{self.sink} = {total_flow} "
            f"({len(self._paths)} paths, {self.iterations} searches)"
        )
        return MaxFlowResult(
            total_flow=total_flow,
            paths=tuple(self._paths),
            iterations=self.iterations,
        )

    def find_augmenting_path(self) -> Optional[List[Optional[ParentEdge]]]:
        """Breadth-first search for a shortest path in the residual graph.

        For each dequeued node, outgoing edges with residual capacity are
        examined first, then incoming edges carrying flow, both in insertion
        order. The first edge that reaches an unvisited node becomes its
        permanent parent for this search.

        Returns:
            Per-node parent slots when the sink was reached, otherwise None.
        """
        network = self.network
        visited = [False] * network.num_nodes
        parents: List[Optional[ParentEdge]] = [None] * network.num_nodes

        # Source is marked before any edge is looked at so that it can never
        # be relabelled through an edge pointing into it.
        visited[self.source] = True
        queue = deque([self.source])

        while queue and not visited[self.sink]:
            current = queue.popleft()

            for edge in network.outgoing_edges(current):
                nxt = edge.destination
                if not visited[nxt] and edge.residual_capacity > 0:
                    visited[nxt] = True
                    parents[nxt] = (edge, True)
                    queue.append(nxt)

            for edge in network.incoming_edges(current):
                nxt = edge.source
                if not visited[nxt] and edge.flow > 0:
                    visited[nxt] = True
                    parents[nxt] = (edge, False)
                    queue.append(nxt)

        return parents if visited[self.sink] else None

    def _walk(self, parents: List[Optional[ParentEdge]]):
        """Yield ``(edge, forward)`` pairs from the sink back to the source."""
        current = self.sink
        while current != self.source:
            edge, forward = parents[current]  # type: ignore[misc]
            yield edge, forward
            current = edge.source if forward else edge.destination

    def _bottleneck(self, parents: List[Optional[ParentEdge]]) -> Capacity:
        bottleneck: Capacity = math.inf
        for edge, forward in self._walk(parents):
            limit = edge.residual_capacity if forward else edge.flow
            bottleneck = min(bottleneck, limit)
        return bottleneck

    def _augment(
        self, parents: List[Optional[ParentEdge]], bottleneck: Capacity
    ) -> None:
        for edge, forward in self._walk(parents):
            if forward:
                edge.add_flow(bottleneck)
            else:
                # Cancel flow previously pushed along this edge
                edge.add_flow(-bottleneck)

    def _reconstruct_path(
        self, parents: List[Optional[ParentEdge]]
    ) -> Tuple[NodeID, ...]:
        nodes = [self.sink]
        for edge, forward in self._walk(parents):
            nodes.append(edge.source if forward else edge.destination)
        nodes.reverse()
        return tuple(nodes)


def calc_max_flow(
    network: Network,
    source: NodeID,
    sink: NodeID,
    *,
    reset_flows: bool = True,
) -> MaxFlowResult:
    """Compute the maximum flow from ``source`` to ``sink``.

    Convenience wrapper around ``MaxFlowEngine``. Edge flows on ``network``
    hold the resulting flow assignment afterwards.

    Args:
        network: Network to solve; mutated in place.
        source: Source node index.
        sink: Sink node index, distinct from ``source``.
        reset_flows: Zero existing flows first (default True).

    Returns:
        MaxFlowResult for the run.
    """
    return MaxFlowEngine(network, source, sink).solve(reset_flows=reset_flows)
