"""Mutable construction phase for tournament graphs.

Edges can only be added through ``TournamentGraphBuilder``. Finalizing the
builder freezes its adjacency lists into an immutable ``TournamentGraph`` and
closes the builder, so no reader ever sees a graph that is still changing.
"""

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

from typing import TYPE_CHECKING, List

from hampath.exceptions import (
    GraphFinalizedException,
    NodeOutOfRangeException,
    SelfEdgeException,
    TournamentValidationException,
)
from hampath.graph.node import Node
from hampath.graph.validation import ValidationReport, check_tournament_property
from hampath.type_hints import Edge, EdgeList, NodeID, RandomBoolSource
from hampath.utils import setup_logger

if TYPE_CHECKING:
    from hampath.graph.tournament import TournamentGraph

logger = setup_logger(__name__)


def random_edges(n: int, source: RandomBoolSource) -> List[Edge]:
    """Draw one direction for every pair of nodes.

    Pairs are visited as ``(i, j)`` with ``i < j``, ``i`` outer. A True draw
    gives ``i->j``, False gives ``j->i``. The result is a tournament by
    construction.
    """
    edges = []
    for i in range(n):
        for j in range(i + 1, n):
            if source():
                edges.append((i, j))
            else:
                edges.append((j, i))
    return edges


class TournamentGraphBuilder:
    """Editable adjacency lists for a graph on ``num_nodes`` nodes."""

    def __init__(self, num_nodes: int):
        if num_nodes < 0:
            raise TournamentValidationException(
                f"Node count must be non-negative, got {num_nodes}"
            )
        self.num_nodes = num_nodes
        self._out_edges: List[List[NodeID]] = [[] for _ in range(num_nodes)]
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _check_node(self, node_id: NodeID) -> None:
        if not 0 <= node_id < self.num_nodes:
            raise NodeOutOfRangeException(
                f"Node {node_id} is outside [0, {self.num_nodes})"
            )

    def add_edge(self, source: NodeID, target: NodeID) -> "TournamentGraphBuilder":
        """Insert the directed edge ``source->target``.

        Raises:
            GraphFinalizedException: If the builder was already finalized
            SelfEdgeException: If ``source == target``
            NodeOutOfRangeException: If either endpoint is outside ``[0, n)``
        """
        if self._finalized:
            raise GraphFinalizedException("Cannot add edges to a finalized graph")
        self._check_node(source)
        self._check_node(target)
        if source == target:
            raise SelfEdgeException(f"Got request to insert self-edge on node {source}")
        self._out_edges[source].append(target)
        return self

    def add_edges(self, edges: EdgeList) -> "TournamentGraphBuilder":
        for source, target in edges:
            self.add_edge(source, target)
        return self

    def validate(self) -> ValidationReport:
        """Check the edges added so far against the tournament property."""
        return check_tournament_property(self._out_edges)

    def finalize(self, validate: bool = True) -> "TournamentGraph":
        """Freeze the edges into a ``TournamentGraph`` and close the builder.

        Args:
            validate: Whether to check the tournament property first

        Raises:
            TournamentValidationException: If ``validate`` is set and the
                edges are not a tournament. The builder stays open.
            GraphFinalizedException: If called twice
        """
        from hampath.graph.tournament import TournamentGraph

        if self._finalized:
            raise GraphFinalizedException("Graph builder was already finalized")

        if validate:
            report = self.validate()
            if not report.is_valid:
                raise TournamentValidationException(report.summary, report=report)

        nodes = tuple(
            Node(node_id, frozenset(targets))
            for node_id, targets in enumerate(self._out_edges)
        )
        self._finalized = True
        self._out_edges = []
        logger.debug(
            "Finalized graph with %s nodes (validated=%s)", len(nodes), validate
        )
        return TournamentGraph(nodes)
