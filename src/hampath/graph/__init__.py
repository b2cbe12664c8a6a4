"""Tournament graph construction, validation and querying."""

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

from hampath.graph.builder import TournamentGraphBuilder, random_edges
from hampath.graph.node import Node
from hampath.graph.tournament import TournamentGraph
from hampath.graph.validation import (
    TournamentViolation,
    ValidationReport,
    ViolationKind,
    check_tournament_property,
)

__all__ = [
    "Node",
    "TournamentGraph",
    "TournamentGraphBuilder",
    "TournamentViolation",
    "ValidationReport",
    "ViolationKind",
    "check_tournament_property",
    "random_edges",
]
