"""Integrations with third-party graph libraries."""

from ekflow.lib.nx import NodeMap, from_networkx, to_networkx

__all__ = ["NodeMap", "from_networkx", "to_networkx"]
