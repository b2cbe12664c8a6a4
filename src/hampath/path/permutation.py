"""Permutation sequence: a linked ordering over a fixed ID universe.

The final path is always a permutation of ``0..n-1``, so each ID can own one
slot in a successor list. That gives O(1) splicing after any known ID, which
an ordinary list or deque cannot offer mid-traversal.
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

from typing import Iterator, List, Optional

from hampath.type_hints import NodeID


class PermutationSequence:
    """Ordered chain over the IDs ``0..length-1``.

    Every new ID must not have been placed before, and every anchor ID must
    already be placed. Misuse is not detected; the caller owns correctness.

    Attributes:
        links: Successor of each ID, or None for the tail and unplaced IDs
    """

    __slots__ = ("_head", "_tail", "_count", "links")

    def __init__(self, length: int, first: NodeID):
        self._head = first
        self._tail = first
        self._count = 1
        self.links: List[Optional[NodeID]] = [None] * length

    @property
    def head(self) -> NodeID:
        return self._head

    @property
    def tail(self) -> NodeID:
        return self._tail

    def successor(self, cur: NodeID) -> Optional[NodeID]:
        """Return the ID following ``cur``, or None at the end."""
        return self.links[cur]

    def insert_after(self, cur: NodeID, new: NodeID) -> None:
        """Splice ``new`` directly after ``cur``."""
        self.links[new] = self.links[cur]
        self.links[cur] = new
        if cur == self._tail:
            self._tail = new
        self._count += 1

    def insert_at_start(self, new: NodeID) -> None:
        self.links[new] = self._head
        self._head = new
        self._count += 1

    def insert_at_end(self, new: NodeID) -> None:
        self.links[self._tail] = new
        self._tail = new
        self._count += 1

    def __iter__(self) -> Iterator[NodeID]:
        cur: Optional[NodeID] = self._head
        while cur is not None:
            yield cur
            cur = self.links[cur]

    def __len__(self) -> int:
        return self._count

    def to_list(self) -> List[NodeID]:
        """Read the sequence out from head to tail."""
        return list(self)

    def __repr__(self) -> str:
        return f"PermutationSequence({self.to_list()!r})"
