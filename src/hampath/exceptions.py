"""Exceptions for use in Hampath"""

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

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from hampath.graph.validation import ValidationReport


# ========== Base Application Exception ==========


class HampathException(Exception):
    """Base exception for all Hampath errors.

    All custom exceptions in the library should inherit from this class.
    This enables catching all library-specific errors with a single except clause.
    """

    pass


# ========== Graph Exceptions ==========


class GraphException(HampathException):
    """Base exception for graph construction errors."""

    pass


class TournamentValidationException(GraphException):
    """Raised when caller-supplied edges do not form a tournament.

    Attributes:
        report: The ``ValidationReport`` describing every violation found,
            or None when the input was rejected before any edge was checked.
    """

    def __init__(self, message: str, report: Optional["ValidationReport"] = None):
        super().__init__(message)
        self.report = report


class SelfEdgeException(TournamentValidationException):
    """Raised when an edge from a node to itself is inserted."""

    pass


class GraphFinalizedException(GraphException):
    """Raised when a graph builder is edited after it has been finalized."""

    pass


# ========== Internal Consistency Exceptions ==========


class InternalConsistencyException(HampathException):
    """Base exception for logic defects and malformed graphs.

    These are not recoverable: the operation is abandoned rather than
    returning a partially correct path.
    """

    pass


class NodeOutOfRangeException(InternalConsistencyException):
    """Raised when a node ID falls outside ``[0, n)``."""

    pass


class InsertionPointNotFoundException(InternalConsistencyException):
    """Raised when the interior scan finds no place to insert a node."""

    pass
