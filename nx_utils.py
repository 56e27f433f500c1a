import networkx as nx
import random

from typing import Any, Callable, Iterable

from kruskal import Edge

def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rng = random.Random(seed)
    return lambda _a, _b: rng.randint(low, high)

def to_output_file(g: nx.classes.graph.Graph,
                   decide_weight: Callable[[Any, Any], int],
                   fname: str,
                   nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> None:
    with open(fname, 'w') as f:
        f.write(f'{g.number_of_nodes()} {g.number_of_edges()}\n')

        for edge in g.edges:
            # Convert edge names to index
            u = nodename_to_idx(edge[0])
            v = nodename_to_idx(edge[1])
            f.write(f'{u} {v} {decide_weight(edge[0], edge[1])}\n')

def to_backyard_file(g: nx.classes.graph.Graph,
                     decide_weight: Callable[[Any, Any], int],
                     fname: str,
                     rows: int,
                     cols: int) -> None:
    '''Write a graph whose nodes are (row, col) pairs, e.g. nx.grid_2d_graph.'''
    with open(fname, 'w') as f:
        f.write(f'{rows} {cols}\n')
        f.write(f'{g.number_of_edges()}\n')

        for (a, b) in g.edges:
            f.write(f'({a[0]},{a[1]}) ({b[0]},{b[1]}) {decide_weight(a, b)}\n')

def edges_from_graph(g: nx.classes.graph.Graph,
                     nodename_to_idx: Callable[[Any], int]= lambda x: int(x),
                     weight: str='weight') -> list[Edge]:
    return [Edge(nodename_to_idx(a), nodename_to_idx(b), w)
            for (a, b, w) in g.edges(data=weight, default=1)]

def to_graph(edges: Iterable[Edge]) -> nx.Graph:
    g = nx.Graph()
    for e in edges:
        # keep the cheapest of any parallel edges
        if not g.has_edge(e.u, e.v) or g[e.u][e.v]['weight'] > e.weight:
            g.add_edge(e.u, e.v, weight=e.weight)
    return g

def nx_mst_weight(edges: Iterable[Edge]) -> int:
    '''Reference MST weight computed by networkx.'''
    t = nx.minimum_spanning_tree(to_graph(edges), algorithm='kruskal')
    return sum(w for (_u, _v, w) in t.edges(data='weight'))


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(prog='nx_utils',
                                     description='Write a fully tunnelled grid backyard with random costs')
    parser.add_argument('rows', type=int)
    parser.add_argument('cols', type=int)
    parser.add_argument('-o', '--outfile', default='grid.txt')
    parser.add_argument('-s', '--seed', default=0, type=int)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=500, type=int)

    args = parser.parse_args()

    grid = nx.grid_2d_graph(args.rows, args.cols)
    to_backyard_file(grid,
                     arbitrary_weight(args.min_weight, args.max_weight, args.seed),
                     args.outfile,
                     args.rows,
                     args.cols)
