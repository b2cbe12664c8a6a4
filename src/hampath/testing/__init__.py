"""Testing module for Hampath.

This module provides:
- Random Graph Generator (RGG) with reproducible coin sources
- Benchmarking of the path solver

Use the unified CLI: hampath-test
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

from hampath.testing.benchmark import (
    BenchmarkConfig,
    BenchmarkReport,
    SizeTiming,
    run_benchmark,
)
from hampath.testing.rgg import (
    RandomGraphGenerator,
    RGGConfig,
    bool_source,
    seeded_bool_source,
)

__all__ = [
    "BenchmarkConfig",
    "BenchmarkReport",
    "SizeTiming",
    "run_benchmark",
    "RandomGraphGenerator",
    "RGGConfig",
    "bool_source",
    "seeded_bool_source",
]
