"""Hamiltonian paths in tournament graphs.

Every tournament has a Hamiltonian path; this package builds one
incrementally in O(n^2) time.

Use the unified CLI for generation and benchmarking: hampath-test
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

from hampath.api import (
    build_graph,
    build_graph_unchecked,
    random_graph,
    solve_hamiltonian_path,
    validate_path,
)
from hampath.exceptions import (
    HampathException,
    InternalConsistencyException,
    TournamentValidationException,
)
from hampath.graph import TournamentGraph, TournamentGraphBuilder
from hampath.path import HampathBuilder, PermutationSequence

__all__ = [
    "build_graph",
    "build_graph_unchecked",
    "random_graph",
    "solve_hamiltonian_path",
    "validate_path",
    "HampathException",
    "InternalConsistencyException",
    "TournamentValidationException",
    "TournamentGraph",
    "TournamentGraphBuilder",
    "HampathBuilder",
    "PermutationSequence",
]
