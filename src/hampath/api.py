"""Public entry points for building tournaments and solving paths."""

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

from typing import Sequence

from hampath.graph.tournament import TournamentGraph
from hampath.path.builder import HampathBuilder
from hampath.type_hints import EdgeList, HamPath, NodeID, RandomBoolSource


def build_graph(n: int, edges: EdgeList) -> TournamentGraph:
    """Build a tournament on ``n`` nodes, verifying the tournament property.

    Args:
        n: Number of nodes
        edges: Directed edges ``(source, target)``

    Returns:
        The finalized graph

    Raises:
        TournamentValidationException: If a pair is missing, doubled, or an
            edge loops on a single node. No graph is produced.
        NodeOutOfRangeException: If an edge endpoint is outside ``[0, n)``

    Example:
        >>> graph = build_graph(2, [(0, 1)])
        >>> solve_hamiltonian_path(graph)
        [0, 1]
    """
    return TournamentGraph.from_edges(n, edges)


def build_graph_unchecked(n: int, edges: EdgeList) -> TournamentGraph:
    """Build a graph without checking the tournament property."""
    return TournamentGraph.from_edges_unchecked(n, edges)


def random_graph(n: int, source: RandomBoolSource) -> TournamentGraph:
    """Build a random tournament, drawing one boolean from ``source`` per pair."""
    return TournamentGraph.random(n, source)


def solve_hamiltonian_path(graph: TournamentGraph) -> HamPath:
    """Return a Hamiltonian path of ``graph``.

    The result is deterministic for a given graph.

    Raises:
        InternalConsistencyException: If the graph turns out not to be a
            tournament while solving
    """
    return HampathBuilder(graph).solve_path()


def validate_path(graph: TournamentGraph, candidate: Sequence[NodeID]) -> bool:
    """Return whether ``candidate`` is a Hamiltonian path of ``graph``."""
    return graph.validate_path(candidate)
