"""Incremental Hamiltonian path construction for tournament graphs.

Nodes are added in ID order. Node ``k`` goes in front of the path when it
beats the head, behind it when the tail beats it, and otherwise right before
the first path node it beats. In the last case ``k`` loses to the head and
beats the tail, so scanning from the head must hit a node that beats ``k``
followed by one that ``k`` beats.
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

from typing import AbstractSet, Iterable, Optional, Tuple

from hampath.exceptions import (
    InsertionPointNotFoundException,
    NodeOutOfRangeException,
)
from hampath.graph.tournament import TournamentGraph
from hampath.path.permutation import PermutationSequence
from hampath.type_hints import HamPath, NodeID
from hampath.utils import setup_logger

logger = setup_logger(__name__)


class HampathBuilder:
    """Builds one Hamiltonian path over a borrowed, read-only graph.

    Attributes:
        num_nodes: Number of nodes in a completed path
        last_node: Highest node ID placed so far
        graph: The tournament being solved
    """

    def __init__(self, graph: TournamentGraph):
        self.graph = graph
        self.num_nodes = len(graph)
        self.last_node = 0
        self._path: Optional[PermutationSequence] = (
            PermutationSequence(self.num_nodes, 0) if self.num_nodes else None
        )

    @property
    def is_complete(self) -> bool:
        return self.last_node + 1 >= self.num_nodes

    def current_path(self) -> HamPath:
        """Return the partial path over nodes ``0..last_node``."""
        return self._path.to_list() if self._path is not None else []

    def solve_path(self) -> HamPath:
        """Place every remaining node and return the full path."""
        while not self.is_complete:
            self.extend()
        path = self.current_path()
        logger.debug("Solved Hamiltonian path over %s nodes", len(path))
        return path

    def solution_pair(self) -> Tuple[HamPath, TournamentGraph]:
        """Solve, then hand back the path together with the graph."""
        path = self.solve_path()
        return path, self.into_graph()

    def into_graph(self) -> TournamentGraph:
        return self.graph

    @staticmethod
    def search_for_insert_point(
        neighbors: AbstractSet[NodeID], path: Iterable[NodeID]
    ) -> NodeID:
        """Return the node the new node should be inserted after.

        Picks the first consecutive pair ``(prev, next)`` from the head where
        the new node has an edge to ``next``.

        Raises:
            InsertionPointNotFoundException: If no such pair exists
        """
        prev_id: Optional[NodeID] = None
        for next_id in path:
            if prev_id is not None and next_id in neighbors:
                return prev_id
            prev_id = next_id
        logger.error("Did not find insertion point in internal search")
        raise InsertionPointNotFoundException(
            "Did not find insertion point in internal search; "
            "the graph is not a tournament"
        )

    def extend(self) -> NodeID:
        """Insert the next unplaced node into the current path.

        Nodes are placed in ID order, so each call places ``last_node + 1``
        and advances ``last_node``.

        Returns:
            The node ID that was placed

        Raises:
            NodeOutOfRangeException: If every node is already placed
        """
        new_id = self.last_node + 1
        if new_id >= self.num_nodes:
            raise NodeOutOfRangeException(
                f"Tried to extend to node {new_id} in a {self.num_nodes} node graph"
            )
        self._place(new_id)
        self.last_node = new_id
        return new_id

    def _place(self, new_id: NodeID) -> None:
        path = self._path
        neighbors = self.graph.neighbor_ids(new_id)

        if path.head in neighbors:
            path.insert_at_start(new_id)
            return

        if self.graph.has_edge(path.tail, new_id):
            path.insert_at_end(new_id)
            return

        insert_after = self.search_for_insert_point(neighbors, path)
        path.insert_after(insert_after, new_id)
