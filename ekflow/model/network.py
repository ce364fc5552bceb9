"""Flow network model with Edge and Network classes.

``Network`` owns an ordered list of directed, capacitated edges over integer
nodes ``0..num_nodes-1`` and keeps per-node outgoing/incoming indexes in
insertion order. Edge flows are mutable so that the max-flow engine can
update them in place; topology and capacities never change once added.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from ekflow.types.base import Capacity, NodeID
from ekflow.types.dto import EdgeFlow


@dataclass(eq=False)
class Edge:
    """Represents one directed edge with a fixed capacity and a current flow.

    Edges compare by identity, so parallel edges between the same pair of
    nodes are tracked independently.

    Attributes:
        source (int): Tail node.
        destination (int): Head node.
        capacity (int | float): Maximum flow the edge can carry.
        index (int): Position of the edge in its network's edge list.
        flow (int | float): Current flow, 0 on creation.
    """

    source: NodeID
    destination: NodeID
    capacity: Capacity
    index: int = -1
    flow: Capacity = 0

    @property
    def residual_capacity(self) -> Capacity:
        """Additional flow that can still be pushed forward."""
        return self.capacity - self.flow

    def add_flow(self, amount: Capacity) -> None:
        self.flow += amount

    def snapshot(self) -> EdgeFlow:
        return EdgeFlow(self.source, self.destination, self.flow, self.capacity)

    def __str__(self) -> str:
        return f"{self.source}->{self.destination} ({self.flow}/{self.capacity})"


class Network:
    """A directed capacitated network over nodes ``0..num_nodes-1``.

    No validation is performed on node bounds, capacities or duplicates;
    ``ekflow.io`` checks descriptions before they reach this class.
    Looking up the edges of a node outside the valid range raises
    ``KeyError``.

    Attributes:
        edges (List[Edge]): All edges in insertion order.
    """

    def __init__(self, num_nodes: int) -> None:
        self._num_nodes = num_nodes
        self.edges: List[Edge] = []
        self._outgoing: Dict[NodeID, List[Edge]] = {n: [] for n in range(num_nodes)}
        self._incoming: Dict[NodeID, List[Edge]] = {n: [] for n in range(num_nodes)}

    @property
    def num_nodes(self) -> int:
        return self._num_nodes

    def __len__(self) -> int:
        """Return the number of edges."""
        return len(self.edges)

    def __repr__(self) -> str:
        return f"Network(num_nodes={self._num_nodes}, edges={len(self.edges)})"

    def add_edge(
        self, source: NodeID, destination: NodeID, capacity: Capacity
    ) -> Edge:
        """Add a directed edge with zero flow.

        Parallel edges and self-loops are accepted. A self-loop can never be
        part of an augmenting path since a node is visited at most once per
        search.

        Args:
            source: Tail node.
            destination: Head node.
            capacity: Edge capacity.

        Returns:
            The newly created edge.
        """
        edge = Edge(source, destination, capacity, index=len(self.edges))
        self.edges.append(edge)
        self._outgoing[source].append(edge)
        self._incoming[destination].append(edge)
        return edge

    def outgoing_edges(self, node: NodeID) -> List[Edge]:
        """Return edges whose source is ``node``, in insertion order."""
        return self._outgoing[node]

    def incoming_edges(self, node: NodeID) -> List[Edge]:
        """Return edges whose destination is ``node``, in insertion order."""
        return self._incoming[node]

    def reset_flows(self) -> None:
        """Set every edge's flow to zero, keeping capacities and topology."""
        for edge in self.edges:
            edge.flow = 0

    def total_flow(self, source: NodeID) -> Capacity:
        """Return the net flow leaving ``source`` (outflow minus inflow)."""
        outflow = sum(edge.flow for edge in self._outgoing[source])
        inflow = sum(edge.flow for edge in self._incoming[source])
        return outflow - inflow

    def edge_flows(self) -> List[EdgeFlow]:
        """Return the current flow on every edge, in insertion order."""
        return [edge.snapshot() for edge in self.edges]

    @property
    def total_capacity(self) -> Capacity:
        return sum(edge.capacity for edge in self.edges)
