"""Reading and writing network descriptions.

Two input formats are supported:

Text edge list (``.txt`` and anything not recognised as YAML)::

    4
    0 1 10
    0 2 10
    1 3 10
    2 3 10

The first non-blank line holds the node count; every other non-blank line
that does not start with ``#`` is ``source destination capacity``.

YAML (``.yaml``/``.yml``)::

    nodes: 4
    source: 0
    sink: 3
    edges:
      - [0, 1, 10]
      - {source: 1, destination: 3, capacity: 10}

All descriptions are validated before a ``Network`` is built: the node count
must be at least 2, endpoints must lie in ``[0, nodes)`` and capacities must be
non-negative numbers. Violations raise ``ValueError``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple, Union

import yaml

from ekflow.logging import get_logger
from ekflow.model.network import Network
from ekflow.types.base import Capacity, NodeID

logger = get_logger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


@dataclass
class NetworkSpec:
    """A parsed network plus the terminals named by its description, if any.

    Attributes:
        network: The constructed network with zero flow on every edge.
        source: Source node given by the description, or None.
        sink: Sink node given by the description, or None.
    """

    network: Network
    source: Optional[NodeID] = None
    sink: Optional[NodeID] = None

    def resolve_terminals(
        self, source: Optional[NodeID] = None, sink: Optional[NodeID] = None
    ) -> Tuple[NodeID, NodeID]:
        """Pick terminals: explicit arguments, then the description, then 0 / N-1.

        Returns:
            Validated ``(source, sink)`` pair.

        Raises:
            ValueError: If the resulting terminals are invalid.
        """
        if source is None:
            source = self.source if self.source is not None else 0
        if sink is None:
            sink = self.sink if self.sink is not None else self.network.num_nodes - 1
        validate_terminals(self.network, source, sink)
        return source, sink


def _parse_capacity(token: Any, where: str) -> Capacity:
    if isinstance(token, bool):
        raise ValueError(f"{where}: capacity must be a number, got {token!r}")
    if isinstance(token, (int, float)):
        value: Capacity = token
    else:
        try:
            value = int(token)
        except (TypeError, ValueError):
            try:
                value = float(token)
            except (TypeError, ValueError):
                raise ValueError(
                    f"{where}: capacity must be a number, got {token!r}"
                ) from None
    if not math.isfinite(value):
        raise ValueError(f"{where}: capacity must be finite, got {token!r}")
    if value < 0:
        raise ValueError(f"{where}: capacity must be non-negative, got {token!r}")
    return value


def _parse_node(token: Any, num_nodes: int, where: str) -> NodeID:
    if isinstance(token, bool):
        raise ValueError(f"{where}: node index must be an integer, got {token!r}")
    try:
        node = int(token)
    except (TypeError, ValueError):
        raise ValueError(
            f"{where}: node index must be an integer, got {token!r}"
        ) from None
    if isinstance(token, float) and token != node:
        raise ValueError(f"{where}: node index must be an integer, got {token!r}")
    if not 0 <= node < num_nodes:
        raise ValueError(
            f"{where}: node {node} is out of range [0, {num_nodes})"
        )
    return node


def _parse_num_nodes(token: Any, where: str) -> int:
    if isinstance(token, bool):
        raise ValueError(f"{where}: node count must be an integer, got {token!r}")
    try:
        num_nodes = int(token)
    except (TypeError, ValueError):
        raise ValueError(
            f"{where}: node count must be an integer, got {token!r}"
        ) from None
    if isinstance(token, float) and token != num_nodes:
        raise ValueError(f"{where}: node count must be an integer, got {token!r}")
    if num_nodes < 2:
        raise ValueError(f"{where}: a flow network needs at least 2 nodes, got {num_nodes}")
    return num_nodes


def parse_network_lines(lines: Iterable[str]) -> Network:
    """Build a network from the lines of a text edge list.

    Args:
        lines: Iterable of lines, e.g. an open file.

    Returns:
        Network with the described edges, in file order.

    Raises:
        ValueError: On a missing or invalid node count, a line that is not
            exactly three tokens, an out-of-range node or a bad capacity.
    """
    network: Optional[Network] = None
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        where = f"line {lineno}"

        if network is None:
            network = Network(_parse_num_nodes(line, where))
            continue

        tokens = line.split()
        if len(tokens) != 3:
            raise ValueError(
                f"{where}: expected 'source destination capacity', got {line!r}"
            )
        src = _parse_node(tokens[0], network.num_nodes, where)
        dst = _parse_node(tokens[1], network.num_nodes, where)
        network.add_edge(src, dst, _parse_capacity(tokens[2], where))

    if network is None:
        raise ValueError("Network description is empty (missing node count)")

    logger.debug(
        f"Parsed network with {network.num_nodes} nodes and {len(network)} edges"
    )
    return network


def parse_network_text(text: str) -> Network:
    """Build a network from a text edge list held in a string."""
    return parse_network_lines(text.splitlines())


def parse_network_yaml(text: str) -> NetworkSpec:
    """Build a network (and optional terminals) from a YAML document.

    Edges may be given as ``[source, destination, capacity]`` sequences or as
    mappings with ``source``, ``destination`` (or ``target``) and ``capacity``.

    Raises:
        ValueError: If the document is not a mapping, lacks ``nodes``, or
            contains an invalid edge or terminal.
    """
    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")
    if "nodes" not in data:
        raise ValueError("Network YAML must define 'nodes' (the node count)")

    network = Network(_parse_num_nodes(data["nodes"], "nodes"))

    edges = data.get("edges") or []
    if not isinstance(edges, list):
        raise ValueError("'edges' must be a list")

    for idx, entry in enumerate(edges):
        where = f"edges[{idx}]"
        if isinstance(entry, dict):
            if "source" not in entry or "capacity" not in entry:
                raise ValueError(
                    f"{where}: edge mapping must include 'source', 'destination' and 'capacity'"
                )
            dst_token = entry.get("destination", entry.get("target"))
            if dst_token is None:
                raise ValueError(f"{where}: edge mapping must include 'destination'")
            src_token, cap_token = entry["source"], entry["capacity"]
        elif isinstance(entry, (list, tuple)) and len(entry) == 3:
            src_token, dst_token, cap_token = entry
        else:
            raise ValueError(
                f"{where}: expected [source, destination, capacity], got {entry!r}"
            )
        network.add_edge(
            _parse_node(src_token, network.num_nodes, where),
            _parse_node(dst_token, network.num_nodes, where),
            _parse_capacity(cap_token, where),
        )

    source = data.get("source")
    sink = data.get("sink")
    spec = NetworkSpec(
        network=network,
        source=None if source is None else _parse_node(source, network.num_nodes, "source"),
        sink=None if sink is None else _parse_node(sink, network.num_nodes, "sink"),
    )
    logger.debug(
        f"Parsed YAML network with {network.num_nodes} nodes and {len(network)} edges"
    )
    return spec


def load_network(path: Union[str, Path]) -> NetworkSpec:
    """Load a network description from a file, choosing the format by suffix.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the description is invalid.
    """
    path = Path(path)
    text = path.read_text()
    if path.suffix.lower() in YAML_SUFFIXES:
        return parse_network_yaml(text)
    return NetworkSpec(network=parse_network_text(text))


def validate_terminals(network: Network, source: NodeID, sink: NodeID) -> None:
    """Check that source and sink are distinct nodes of ``network``.

    Raises:
        ValueError: If either terminal is out of range or they are equal.
    """
    for name, node in (("source", source), ("sink", sink)):
        if not 0 <= node < network.num_nodes:
            raise ValueError(
                f"{name} node {node} is out of range [0, {network.num_nodes})"
            )
    if source == sink:
        raise ValueError(f"source and sink must be different nodes (both are {source})")


def network_to_edgelist(network: Network) -> List[str]:
    """Render a network in the text edge-list format (without flows).

    The first element is the node count; ``parse_network_lines`` accepts the
    output unchanged.
    """
    lines = [str(network.num_nodes)]
    for edge in network.edges:
        lines.append(f"{edge.source} {edge.destination} {edge.capacity}")
    return lines
