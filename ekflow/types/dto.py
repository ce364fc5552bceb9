"""Immutable result containers for max-flow computations.

These records are produced by the engine and the min-cut query and consumed
by reporting code; they hold plain values only, never live ``Edge`` objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Tuple

from ekflow.types.base import Capacity, NodeID


@dataclass(frozen=True)
class AugmentingPath:
    """One augmentation step: the nodes traversed and the flow pushed.

    Attributes:
        path: Node indices from source to sink, inclusive.
        amount: Bottleneck value pushed along the path.
    """

    path: Tuple[NodeID, ...]
    amount: Capacity

    def __len__(self) -> int:
        """Return the number of edges (hops) on the path."""
        return max(len(self.path) - 1, 0)

    def to_dict(self) -> Dict[str, Any]:
        return {"path": list(self.path), "amount": self.amount}


@dataclass(frozen=True)
class EdgeFlow:
    """Snapshot of one edge's flow state.

    Attributes:
        source: Tail node of the edge.
        destination: Head node of the edge.
        flow: Flow on the edge when the snapshot was taken.
        capacity: Fixed capacity of the edge.
    """

    source: NodeID
    destination: NodeID
    flow: Capacity
    capacity: Capacity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "destination": self.destination,
            "flow": self.flow,
            "capacity": self.capacity,
        }


@dataclass(frozen=True)
class MaxFlowResult:
    """Result of a max-flow computation between a source/sink pair.

    Attributes:
        total_flow: Maximum flow value achieved.
        paths: Augmenting paths in discovery order.
        iterations: Number of searches run, including the final failed one.
    """

    total_flow: Capacity
    paths: Tuple[AugmentingPath, ...] = ()
    iterations: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "total_flow": self.total_flow,
            "iterations": self.iterations,
            "paths": [p.to_dict() for p in self.paths],
        }


@dataclass(frozen=True)
class MinCut:
    """Minimum s-t cut read off the final residual graph.

    Attributes:
        source_side: Nodes reachable from the source in the residual graph.
        edges: Edges leaving ``source_side``, in network insertion order.
        capacity: Sum of the capacities of ``edges``.
    """

    source_side: FrozenSet[NodeID]
    edges: Tuple[EdgeFlow, ...]
    capacity: Capacity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source_side": sorted(self.source_side),
            "edges": [e.to_dict() for e in self.edges],
            "capacity": self.capacity,
        }
