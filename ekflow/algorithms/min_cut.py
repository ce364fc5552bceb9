"""Minimum cut extraction from a solved network.

After a max-flow run, the nodes still reachable from the source in the
residual graph form the source side of a minimum cut; the edges leaving that
set are saturated and their capacities sum to the maximum flow value.
"""

from __future__ import annotations

from collections import deque
from typing import Set

from ekflow.model.network import Network
from ekflow.types.base import NodeID
from ekflow.types.dto import MinCut


def residual_reachable(network: Network, source: NodeID) -> Set[NodeID]:
    """Return nodes reachable from ``source`` in the current residual graph.

    Uses the same traversal rules as the max-flow search: an edge is usable
    forward while it has residual capacity and backward while it carries flow.
    """
    seen = {source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for edge in network.outgoing_edges(node):
            if edge.residual_capacity > 0 and edge.destination not in seen:
                seen.add(edge.destination)
                queue.append(edge.destination)
        for edge in network.incoming_edges(node):
            if edge.flow > 0 and edge.source not in seen:
                seen.add(edge.source)
                queue.append(edge.source)
    return seen


def min_cut(network: Network, source: NodeID) -> MinCut:
    """Compute the source-side minimum cut from the network's current flows.

    The network must hold a maximum flow (e.g. right after
    ``MaxFlowEngine.solve``); otherwise the sink may be on the source side and
    the result is only a cut of the residual reachability set.

    Args:
        network: Network carrying the flow assignment.
        source: Source node the flow was computed from.

    Returns:
        MinCut with the reachable set, the crossing edges and their capacity.
    """
    reachable = residual_reachable(network, source)
    crossing = tuple(
        edge.snapshot()
        for edge in network.edges
        if edge.source in reachable and edge.destination not in reachable
    )
    return MinCut(
        source_side=frozenset(reachable),
        edges=crossing,
        capacity=sum(e.capacity for e in crossing),
    )
