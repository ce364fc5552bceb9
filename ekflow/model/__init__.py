"""Flow network model package.

Defines ``Edge`` and ``Network``, the mutable structure the max-flow engine
operates on.
"""

from ekflow.model.network import Edge, Network

__all__ = [
    "Edge",
    "Network",
]
