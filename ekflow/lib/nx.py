"""NetworkX graph conversion utilities.

Convert between NetworkX graphs and ``Network``. Node names in NetworkX can be
any hashable; they are mapped to contiguous integer indices on the way in and
the mapping is returned so results can be translated back.

Example:
    >>> import networkx as nx
    >>> from ekflow.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("s", "a", capacity=3)
    >>> G.add_edge("a", "t", capacity=2)
    >>> network, node_map = from_networkx(G)
    >>> node_map.to_index["t"]
    2
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Tuple

import networkx as nx

from ekflow.model.network import Network
from ekflow.types.base import Capacity, NodeID


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Attributes:
        to_index: Maps original node names to integer indices.
        to_name: Maps integer indices back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, NodeID] = field(default_factory=dict)
    to_name: Dict[NodeID, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, path: Tuple[NodeID, ...]) -> List[Hashable]:
        """Translate a path of indices into node names."""
        return [self.to_name[i] for i in path]

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_index)


def from_networkx(
    G: Any,
    *,
    capacity_attr: str = "capacity",
    default_capacity: Optional[Capacity] = None,
    bidirectional: bool = False,
) -> Tuple[Network, NodeMap]:
    """Build a ``Network`` from a NetworkX graph.

    Nodes are indexed in ``G.nodes`` order. Multigraph edges become parallel
    edges.

    Args:
        G: NetworkX DiGraph, MultiDiGraph, Graph or MultiGraph.
        capacity_attr: Edge attribute holding the capacity.
        default_capacity: Capacity for edges lacking ``capacity_attr``. When
            None such edges raise ``ValueError``.
        bidirectional: Add a reverse edge for every edge. Undirected graphs are
            always converted bidirectionally.

    Returns:
        Tuple of the network and the node-name mapping.

    Raises:
        ValueError: If the graph has fewer than 2 nodes, an edge lacks a
            capacity and no default is given, or a capacity is negative.
    """
    node_map = NodeMap.from_names(list(G.nodes))
    if len(node_map) < 2:
        raise ValueError(
            f"A flow network needs at least 2 nodes, got {len(node_map)}"
        )
    network = Network(len(node_map))
    both_ways = bidirectional or not G.is_directed()

    for u, v, data in G.edges(data=True):
        capacity = data.get(capacity_attr, default_capacity)
        if capacity is None:
            raise ValueError(
                f"Edge {u!r}->{v!r} has no '{capacity_attr}' attribute"
            )
        if capacity < 0:
            raise ValueError(
                f"Edge {u!r}->{v!r} has negative capacity {capacity}"
            )
        ui, vi = node_map.to_index[u], node_map.to_index[v]
        network.add_edge(ui, vi, capacity)
        if both_ways:
            network.add_edge(vi, ui, capacity)

    return network, node_map


def to_networkx(
    network: Network,
    node_map: Optional[NodeMap] = None,
    *,
    multigraph: bool = True,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
) -> Any:
    """Convert a ``Network`` to a NetworkX graph.

    Args:
        network: Network to convert; current flows are exported too.
        node_map: Optional mapping to restore original node names.
        multigraph: Return a MultiDiGraph keeping parallel edges separately.
            When False, parallel edges are merged into one DiGraph edge whose
            capacity and flow are the sums of the originals.
        capacity_attr: Attribute name for capacities.
        flow_attr: Attribute name for flows.

    Returns:
        ``nx.MultiDiGraph`` or ``nx.DiGraph``.
    """

    def name(i: NodeID) -> Hashable:
        return node_map.to_name[i] if node_map is not None else i

    if multigraph:
        G = nx.MultiDiGraph()
        G.add_nodes_from(name(i) for i in range(network.num_nodes))
        for edge in network.edges:
            G.add_edge(
                name(edge.source),
                name(edge.destination),
                key=edge.index,
                **{capacity_attr: edge.capacity, flow_attr: edge.flow},
            )
        return G

    G = nx.DiGraph()
    G.add_nodes_from(name(i) for i in range(network.num_nodes))
    for edge in network.edges:
        u, v = name(edge.source), name(edge.destination)
        if G.has_edge(u, v):
            G[u][v][capacity_attr] += edge.capacity
            G[u][v][flow_attr] += edge.flow
        else:
            G.add_edge(u, v, **{capacity_attr: edge.capacity, flow_attr: edge.flow})
    return G
