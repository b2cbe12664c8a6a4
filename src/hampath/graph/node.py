"""Node value type for tournament graphs."""

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

from dataclasses import dataclass, field
from typing import FrozenSet

from hampath.type_hints import NodeID


@dataclass(frozen=True)
class Node:
    """A vertex and the targets of its outgoing edges.

    Attributes:
        node_id: Position of the node in its graph
        neighbor_ids: IDs this node has an outgoing edge to

    Equality and hashing use ``node_id`` only.
    """

    node_id: NodeID
    neighbor_ids: FrozenSet[NodeID] = field(
        default_factory=frozenset, compare=False, repr=False
    )

    @property
    def out_degree(self) -> int:
        return len(self.neighbor_ids)

    def has_edge_to(self, other: NodeID) -> bool:
        return other in self.neighbor_ids
