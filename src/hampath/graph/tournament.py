"""Immutable tournament graph."""

# Hampath
# Copyright (C) 2025  Hampath developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import FrozenSet, Iterator, List, Sequence, Tuple

from hampath.constants import RENDER_EDGE_IN, RENDER_EDGE_OUT, RENDER_SEPARATOR
from hampath.exceptions import NodeOutOfRangeException
from hampath.graph.builder import TournamentGraphBuilder, random_edges
from hampath.graph.node import Node
from hampath.graph.validation import ValidationReport, check_tournament_property
from hampath.type_hints import Edge, EdgeList, NodeID, RandomBoolSource


class TournamentGraph:
    """Read-only graph over nodes ``0..n-1``, indexed by node ID.

    Instances are produced by ``TournamentGraphBuilder.finalize`` or by the
    ``from_edges`` family of constructors. Nothing here mutates the graph,
    so one instance can be shared freely between readers.
    """

    __slots__ = ("_nodes",)

    def __init__(self, nodes: Sequence[Node]):
        self._nodes: Tuple[Node, ...] = tuple(nodes)

    # --- Construction ---

    @classmethod
    def from_edges(cls, n: int, edges: EdgeList) -> "TournamentGraph":
        """Build a graph and verify the tournament property.

        Raises:
            TournamentValidationException: If the edges are not a tournament
        """
        return TournamentGraphBuilder(n).add_edges(edges).finalize(validate=True)

    @classmethod
    def from_edges_unchecked(cls, n: int, edges: EdgeList) -> "TournamentGraph":
        """Build a graph from edges already known to form a tournament."""
        return TournamentGraphBuilder(n).add_edges(edges).finalize(validate=False)

    @classmethod
    def random(cls, n: int, source: RandomBoolSource) -> "TournamentGraph":
        """Build a random tournament, one coin flip per pair of nodes."""
        return cls.from_edges_unchecked(n, random_edges(n, source))

    # --- Queries ---

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    @property
    def num_nodes(self) -> int:
        return len(self._nodes)

    def node(self, node_id: NodeID) -> Node:
        if not 0 <= node_id < len(self._nodes):
            raise NodeOutOfRangeException(
                f"Node {node_id} is outside [0, {len(self._nodes)})"
            )
        return self._nodes[node_id]

    def neighbor_ids(self, node_id: NodeID) -> FrozenSet[NodeID]:
        """Return the IDs ``node_id`` has outgoing edges to."""
        return self.node(node_id).neighbor_ids

    def has_edge(self, source: NodeID, target: NodeID) -> bool:
        return target in self.node(source).neighbor_ids

    def edges(self) -> List[Edge]:
        """Return every directed edge, sorted by source then target."""
        return [
            (node.node_id, target)
            for node in self._nodes
            for target in sorted(node.neighbor_ids)
        ]

    def validate(self) -> ValidationReport:
        """Re-run the tournament property check on this graph."""
        return check_tournament_property(
            [sorted(node.neighbor_ids) for node in self._nodes]
        )

    def validate_path(self, path: Sequence[NodeID]) -> bool:
        """Check that ``path`` is a Hamiltonian path of this graph.

        True iff ``path`` has exactly ``n`` entries, visits every node once,
        and every consecutive pair ``(a, b)`` has an edge ``a->b``.
        """
        num_nodes = len(self._nodes)
        if len(path) != num_nodes:
            return False
        if any(not 0 <= node_id < num_nodes for node_id in path):
            return False
        if len(set(path)) != num_nodes:
            return False
        return all(
            nxt in self._nodes[cur].neighbor_ids for cur, nxt in zip(path, path[1:])
        )

    # --- Diagnostics ---

    def render(self) -> str:
        """Render the signed adjacency matrix, one row per node."""
        rows = []
        for node in self._nodes:
            rows.append(
                RENDER_SEPARATOR.join(
                    RENDER_EDGE_OUT if column in node.neighbor_ids else RENDER_EDGE_IN
                    for column in range(len(self._nodes))
                )
            )
        return "\n".join(rows)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"TournamentGraph(num_nodes={len(self._nodes)})"
