"""Tournament property checker.

Verifies that an adjacency structure describes a tournament: no self-edges,
no duplicate edges, and exactly one directed edge between every pair of
nodes. This is reference-correctness code and is not on any hot path.
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

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Sequence, Tuple

from hampath.type_hints import NodeID
from hampath.utils import setup_logger

logger = setup_logger(__name__)


class ViolationKind(Enum):
    """Ways an edge set can fail to be a tournament."""

    SELF_EDGE = "SELF_EDGE"
    DUPLICATE_EDGE = "DUPLICATE_EDGE"
    MISSING_PAIR = "MISSING_PAIR"  # neither i->j nor j->i
    BIDIRECTIONAL_PAIR = "BIDIRECTIONAL_PAIR"  # both i->j and j->i


@dataclass
class TournamentViolation:
    """A single broken tournament invariant."""

    kind: ViolationKind
    nodes: Tuple[NodeID, ...]
    description: str = ""

    def to_dict(self) -> Dict[str, object]:
        return {
            "kind": self.kind.value,
            "nodes": list(self.nodes),
            "description": self.description,
        }


@dataclass
class ValidationReport:
    """Complete result of a tournament property check."""

    num_nodes: int
    pairs_checked: int = 0
    violations: List[TournamentViolation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def __bool__(self) -> bool:
        """Allow using report in boolean context: if report: ..."""
        return self.is_valid

    @property
    def summary(self) -> str:
        if self.is_valid:
            return (
                f"Valid tournament on {self.num_nodes} nodes "
                f"({self.pairs_checked} pairs checked)"
            )
        counts = Counter(v.kind.value for v in self.violations)
        details = ", ".join(f"{kind}: {count}" for kind, count in sorted(counts.items()))
        return (
            f"Invalid tournament on {self.num_nodes} nodes: "
            f"{len(self.violations)} violation(s) ({details})"
        )

    def violations_of(self, kind: ViolationKind) -> List[TournamentViolation]:
        return [v for v in self.violations if v.kind == kind]

    def to_dict(self) -> Dict[str, object]:
        return {
            "num_nodes": self.num_nodes,
            "pairs_checked": self.pairs_checked,
            "is_valid": self.is_valid,
            "summary": self.summary,
            "violations": [v.to_dict() for v in self.violations],
        }


def _check_edge_uniqueness(
    adjacency: Sequence[Sequence[NodeID]],
) -> List[TournamentViolation]:
    violations = []
    for source, targets in enumerate(adjacency):
        if len(set(targets)) == len(targets) and source not in targets:
            continue
        for target, count in Counter(targets).items():
            if target == source:
                violations.append(
                    TournamentViolation(
                        ViolationKind.SELF_EDGE,
                        (source,),
                        f"Node {source} has an edge to itself",
                    )
                )
            elif count > 1:
                violations.append(
                    TournamentViolation(
                        ViolationKind.DUPLICATE_EDGE,
                        (source, target),
                        f"Edge {source}->{target} appears {count} times",
                    )
                )
    return violations


def _check_pairs(
    adjacency: Sequence[Sequence[NodeID]],
) -> Tuple[int, List[TournamentViolation]]:
    violations = []
    pairs_checked = 0
    num_nodes = len(adjacency)
    for i in range(num_nodes):
        for j in range(i + 1, num_nodes):
            pairs_checked += 1
            i_to_j = j in adjacency[i]
            j_to_i = i in adjacency[j]
            if i_to_j ^ j_to_i:
                continue
            if i_to_j:
                violations.append(
                    TournamentViolation(
                        ViolationKind.BIDIRECTIONAL_PAIR,
                        (i, j),
                        f"Both {i}->{j} and {j}->{i} are present",
                    )
                )
            else:
                violations.append(
                    TournamentViolation(
                        ViolationKind.MISSING_PAIR,
                        (i, j),
                        f"Neither {i}->{j} nor {j}->{i} is present",
                    )
                )
    return pairs_checked, violations


def check_tournament_property(
    adjacency: Sequence[Sequence[NodeID]],
) -> ValidationReport:
    """Check that ``adjacency`` describes a tournament.

    Args:
        adjacency: Outgoing edge targets of each node, indexed by node ID.
            Targets are assumed to lie in ``[0, len(adjacency))``.

    Returns:
        ValidationReport listing every violation found
    """
    report = ValidationReport(num_nodes=len(adjacency))
    report.violations.extend(_check_edge_uniqueness(adjacency))
    pairs_checked, pair_violations = _check_pairs(adjacency)
    report.pairs_checked = pairs_checked
    report.violations.extend(pair_violations)

    if report.is_valid:
        logger.debug(report.summary)
    else:
        logger.warning(report.summary)
    return report
