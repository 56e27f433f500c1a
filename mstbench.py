## Tester comparing our Kruskal against networkx on generated graphs

import time

from typing import Any, Callable

import networkx as nx

from kruskal import Edge, kruskal, mst_weight
import nx_utils


def run_kruskal(edges: list[Edge], nvertices: int) -> int:
    return mst_weight(kruskal(edges, nvertices))

def run_networkx(edges: list[Edge], _nvertices: int) -> int:
    return nx_utils.nx_mst_weight(edges)

def time_impl(impl: Callable[[list[Edge], int], int],
              edges: list[Edge],
              nvertices: int,
              reps: int) -> dict[str, Any]:
    compute_times = []
    weights = []
    for _ in range(reps):
        start = time.perf_counter()
        weights.append(impl(edges, nvertices))
        compute_times.append(time.perf_counter() - start)

    return {
        'compute_times': compute_times,
        'weights': weights,
    }

def print_stats(all_metrics: dict[Any, Any], baseline: str) -> None:
    for impl in all_metrics:
        if impl == baseline:
            continue

        print(f'Performance of {impl}:')
        all_tests = all_metrics[impl]
        speedups = []
        for (test, metrics) in all_tests.items():
            print(f'  {test} ({len(metrics["compute_times"])} runs):')

            if 'weight' not in metrics or metrics['weight'] != all_metrics[baseline][test].get('weight'):
                print('Inconsistent result on this test')
                continue

            compute_time = metrics['avg_compute_time']
            speedup = all_metrics[baseline][test]['avg_compute_time'] / compute_time
            speedups.append(speedup)

            print(f'    Compute time = {compute_time:0.4f}s,  MST weight = {metrics["weight"]}')
            print(f'    Speedup vs {baseline} = {speedup:0.2f}x')
            print()

        if speedups:
            print(f'Average speedup of {impl}: {sum(speedups)/len(speedups):0.2f}')
        print()

if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(prog='mstbench',
                                     description='Benchmark and cross-check MST implementations')
    parser.add_argument('-r', '--reps',
                        default=3,
                        help='the number of times to repeat each experiment',
                        type=int)
    parser.add_argument('-s', '--seed',
                        default=0,
                        help='the seed value to use for generating random graphs',
                        type=int)
    parser.add_argument('--min-weight',
                        default=1,
                        help='the minimum edge weight in random graphs',
                        type=int)
    parser.add_argument('--max-weight',
                        default=1000,
                        help='the maximum edge weight in random graphs',
                        type=int)

    args = parser.parse_args()

    def create_arb_weight_test(g_fxn: Callable[..., nx.classes.graph.Graph],
                               g_args: tuple[Any, ...],
                               nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> Callable[[], tuple[list[Edge], int]]:
        def inner():
            g = g_fxn(*g_args)
            decide_weight = nx_utils.arbitrary_weight(args.min_weight, args.max_weight, args.seed)
            for (a, b) in g.edges:
                g[a][b]['weight'] = decide_weight(a, b)
            return nx_utils.edges_from_graph(g, nodename_to_idx), g.number_of_nodes()

        return inner

    # Which impl is the one being benchmarked against
    BASELINE = 'networkx'

    impls = {
        BASELINE: run_networkx,
        'MinPQ + DisjointSet Kruskal': run_kruskal,
    }

    tests = {
        '2-degree Circulant n=50000':
            create_arb_weight_test(nx.circulant_graph,
                                   (50000, [1, 2]),
            ),

        'Grid backyard 200x200':
            create_arb_weight_test(nx.grid_2d_graph,
                                   (200, 200),
                                   lambda node: node[0] * 200 + node[1],
            ),

        'Connected Caveman Graph, 1000 groups of size k=20, n=20000':
            create_arb_weight_test(nx.connected_caveman_graph,
                                   (1000, 20),
            ),
    }

    all_metrics = {
        impl: {} for impl in impls.keys()
    }

    for (test_name, test_gen) in tests.items():
        print(f'Generating graph for test "{test_name}"...')
        edges, nvertices = test_gen()

        for (impl, fn) in impls.items():
            print(f'  Running {impl} impl on test "{test_name}"...')

            metrics = time_impl(fn, edges, nvertices, args.reps)
            metrics['avg_compute_time'] = sum(metrics['compute_times'])/len(metrics['compute_times'])

            if min(metrics['weights']) == max(metrics['weights']):
                metrics['weight'] = min(metrics['weights'])
                del metrics['weights']
            else:
                print(f'!!! Error on {impl}: inconsistent outputs')

            all_metrics[impl][test_name] = metrics

            print('   ', metrics)
            print()
        print()

    print_stats(all_metrics, BASELINE)
