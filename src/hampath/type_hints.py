"""Type hints used in Hampath."""

from typing import Callable, Iterable, List, Tuple

# Vertex identifier in [0, n)
NodeID = int

# Directed edge (source, target)
Edge = Tuple[NodeID, NodeID]
EdgeList = Iterable[Edge]

# Ordered vertices of a Hamiltonian path
HamPath = List[NodeID]

# Zero-argument coin flip used for random tournaments
RandomBoolSource = Callable[[], bool]

#  LocalWords:  NodeID HamPath
