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

# --- Constants ---

# Adjacency matrix rendering
RENDER_EDGE_OUT = "+1"  # row node has an edge to column node
RENDER_EDGE_IN = "-1"  # no edge from row node to column node
RENDER_SEPARATOR = " "

# Logging
LOG_LEVEL_ENV_VAR = "HAMPATH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Random graph generation
DEFAULT_SEED = 42
DEFAULT_NUM_NODES = 5

# Benchmarking
DEFAULT_BENCHMARK_SIZES = [10, 50, 100, 200]
DEFAULT_BENCHMARK_ITERATIONS = 10

# Edge file keys (JSON)
KEY_NUM_NODES = "n"
KEY_EDGES = "edges"
