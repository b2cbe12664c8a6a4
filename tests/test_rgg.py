import itertools
import json

import pytest

from hampath import random_graph
from hampath.graph import random_edges
from hampath.testing import RandomGraphGenerator, RGGConfig, seeded_bool_source
from hampath.testing.rgg import create_rgg_generator, export_json_format


@pytest.mark.parametrize("seed", [0, 1, 42, 999])
def test_random_graph_is_tournament(seed):
    source = seeded_bool_source(seed)
    for n in [1, 2, 3, 10, 100]:
        graph = random_graph(n, source)
        report = graph.validate()
        assert report.is_valid, report.summary


@pytest.mark.parametrize("n", [2, 3, 4])
def test_every_coin_sequence_gives_tournament(n):
    num_pairs = n * (n - 1) // 2
    for flips in itertools.product([True, False], repeat=num_pairs):
        coins = iter(flips)
        graph = random_graph(n, lambda: next(coins))
        assert graph.validate().is_valid


def test_random_edges_direction_follows_coin():
    assert random_edges(3, lambda: True) == [(0, 1), (0, 2), (1, 2)]
    assert random_edges(3, lambda: False) == [(1, 0), (2, 0), (2, 1)]


def test_random_edges_draws_once_per_pair():
    draws = []

    def source():
        draws.append(True)
        return len(draws) % 2 == 0

    random_edges(6, source)

    assert len(draws) == 15


def test_seeded_source_is_reproducible():
    first = random_graph(40, seeded_bool_source(3))
    second = random_graph(40, seeded_bool_source(3))

    assert first.edges() == second.edges()


def test_generator_uses_one_stream():
    generator = RandomGraphGenerator(RGGConfig(num_nodes=12, seed=5))
    graphs = list(generator.generate_many(3))

    assert [len(graph) for graph in graphs] == [12, 12, 12]
    assert graphs[0].edges() != graphs[1].edges()

    replay = list(create_rgg_generator(12, seed=5).generate_many(3))
    assert [graph.edges() for graph in graphs] == [graph.edges() for graph in replay]


def test_generator_size_override():
    generator = create_rgg_generator(4, seed=1)

    assert len(generator.generate(9)) == 9
    assert len(generator.generate()) == 4


def test_config_round_trip():
    config = RGGConfig(num_nodes=7, seed=11)

    assert RGGConfig.from_dict(config.to_dict()) == config
    assert RGGConfig.from_dict({}).seed is None


def test_export_json_format():
    graph = create_rgg_generator(6, seed=2).generate()

    data = json.loads(export_json_format(graph))

    assert data["n"] == 6
    assert len(data["edges"]) == 15
    assert [tuple(edge) for edge in data["edges"]] == graph.edges()
