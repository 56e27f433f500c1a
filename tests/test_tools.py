"""Tests for the generator, networkx helpers and benchmark plumbing."""

import random

import networkx as nx
import numpy as np
import pytest

import graphgen
import mstbench
import nx_utils
from backyard import dig, read_backyard
from kruskal import Edge, kruskal, read_edge_list


class TestGraphgen:
    """Tests for random backyard generation."""

    def test_upper_triangular(self) -> None:
        m = graphgen.generate(3, 3, density=0.5, rng=random.Random(1))
        assert m.shape == (9, 9)
        assert not np.tril(m).any()
        assert np.count_nonzero(m) == int(0.5 * 9 * 8 / 2)

    def test_weights_in_range(self) -> None:
        m = graphgen.generate(4, 4, density=0.3, min_weight=5, max_weight=7, rng=random.Random(2))
        weights = m[m != 0]
        assert weights.min() >= 5
        assert weights.max() <= 7

    def test_seeded_is_reproducible(self) -> None:
        a = graphgen.generate(3, 4, rng=random.Random(42))
        b = graphgen.generate(3, 4, rng=random.Random(42))
        assert np.array_equal(a, b)

    def test_connected_grid_lays_neighbours(self) -> None:
        m = graphgen.generate(2, 3, density=0.0, connected=True, rng=random.Random(0))
        # 2x3 grid has 3 + 4 neighbour pairs
        assert np.count_nonzero(m) == 7
        assert m[0, 1] and m[0, 3] and m[4, 5]

    def test_density_capped_by_free_pairs(self) -> None:
        m = graphgen.generate(2, 2, density=1.0, connected=True, rng=random.Random(0))
        assert np.count_nonzero(m) == 6

    @pytest.mark.parametrize("low,high", [(0, 10), (-3, 10), (5, 4)])
    def test_rejects_bad_weight_range(self, low: int, high: int) -> None:
        with pytest.raises(ValueError):
            graphgen.generate(2, 2, min_weight=low, max_weight=high)

    def test_written_file_digs(self, tmp_path) -> None:
        m = graphgen.generate(4, 5, density=0.2, connected=True, rng=random.Random(3))
        fname = str(tmp_path / "backyard.txt")
        nedges = graphgen.write_backyard(m, 4, 5, fname)

        backyard = read_backyard(fname)
        assert len(backyard.edges) == nedges
        assert backyard.n_vertices == 20

        mst, total = dig(backyard)
        assert len(mst) == 19
        assert total == nx_utils.nx_mst_weight(backyard.edges)


class TestNxUtils:
    """Tests for the networkx helpers."""

    def test_arbitrary_weight_seeded(self) -> None:
        a = nx_utils.arbitrary_weight(1, 100, seed=7)
        b = nx_utils.arbitrary_weight(1, 100, seed=7)
        assert [a(0, 0) for _ in range(10)] == [b(0, 0) for _ in range(10)]

    def test_edges_from_graph(self) -> None:
        g = nx.Graph()
        g.add_edge(0, 1, weight=3)
        g.add_edge(1, 2)
        assert sorted(nx_utils.edges_from_graph(g), key=lambda e: e.u) == [Edge(0, 1, 3), Edge(1, 2, 1)]

    def test_to_graph_keeps_cheapest_parallel(self) -> None:
        g = nx_utils.to_graph([Edge(0, 1, 5), Edge(1, 0, 2)])
        assert g[0][1]["weight"] == 2

    def test_nx_mst_weight(self, square_with_diagonal: list[Edge]) -> None:
        assert nx_utils.nx_mst_weight(square_with_diagonal) == 6

    def test_to_output_file(self, tmp_path) -> None:
        g = nx.circulant_graph(6, [1, 2])
        fname = str(tmp_path / "circ.txt")
        nx_utils.to_output_file(g, nx_utils.arbitrary_weight(1, 9), fname)

        edges, n = read_edge_list(fname)
        assert n == 6
        assert len(edges) == g.number_of_edges()
        assert len(kruskal(edges, n)) == 5

    def test_to_backyard_file(self, tmp_path) -> None:
        g = nx.grid_2d_graph(3, 4)
        fname = str(tmp_path / "grid.txt")
        nx_utils.to_backyard_file(g, lambda a, b: 1, fname, 3, 4)

        backyard = read_backyard(fname)
        assert backyard.n_vertices == 12
        mst, total = dig(backyard)
        assert total == 11


class TestMstbench:
    """Tests for the benchmark helpers."""

    def test_implementations_agree(self) -> None:
        g = nx.connected_caveman_graph(5, 4)
        decide_weight = nx_utils.arbitrary_weight(1, 30, 0)
        for a, b in g.edges:
            g[a][b]["weight"] = decide_weight(a, b)
        edges = nx_utils.edges_from_graph(g)
        n = g.number_of_nodes()

        assert mstbench.run_kruskal(edges, n) == mstbench.run_networkx(edges, n)

    def test_time_impl(self, square_with_diagonal: list[Edge]) -> None:
        metrics = mstbench.time_impl(mstbench.run_kruskal, square_with_diagonal, 4, reps=3)
        assert metrics["weights"] == [6, 6, 6]
        assert len(metrics["compute_times"]) == 3
        assert all(t >= 0 for t in metrics["compute_times"])

    def test_print_stats(self, capsys) -> None:
        all_metrics = {
            "base": {"t": {"avg_compute_time": 2.0, "weight": 6, "compute_times": [2.0]}},
            "fast": {"t": {"avg_compute_time": 1.0, "weight": 6, "compute_times": [1.0]}},
            "wrong": {"t": {"avg_compute_time": 1.0, "weight": 7, "compute_times": [1.0]}},
        }
        mstbench.print_stats(all_metrics, "base")
        out = capsys.readouterr().out
        assert "Average speedup of fast: 2.00" in out
        assert "Inconsistent result" in out
