import logging
import sys

from dataclasses import dataclass
from typing import Iterable

from minpq import MinPQ, Underflow
from union_find import DisjointSet

logger = logging.getLogger(__name__)


class DisconnectedGraphError(Underflow):
    '''Ran out of edges before every vertex was spanned.'''


@dataclass(frozen=True)
class Edge:
    u: int
    v: int
    weight: int

    # Edges are ordered by weight alone; equality still compares all fields
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight < other.weight

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight <= other.weight

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight > other.weight

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight >= other.weight

    @classmethod
    def from_line(cls, s: str) -> 'Edge':
        parts = s.split()
        if len(parts) != 3:
            raise ValueError(f'expected "u v weight", got {s!r}')
        return cls(*[int(token) for token in parts])

    def __repr__(self):
        return f'({self.u}, {self.v}, {self.weight})'

    __str__ = __repr__


def kruskal(edges: Iterable[Edge], n_vertices: int) -> list[Edge]:
    '''
    Minimum spanning tree of a connected graph by Kruskal's algorithm.

    Edges come off a min-heap cheapest first and are kept whenever their
    endpoints are still in different components. Stops as soon as
    n_vertices - 1 edges have been accepted, so the remaining heap is never
    drained.

    Vertex ids must lie in [0, n_vertices).

    Raises DisconnectedGraphError if the edges run out first.
    '''
    pq = MinPQ.from_keys(edges)
    uf = DisjointSet(n_vertices)
    mst = []

    logger.debug('running kruskal on %d edges, %d vertices', pq.size(), n_vertices)

    while len(mst) < n_vertices - 1:
        try:
            edge = pq.extract_min()
        except Underflow:
            raise DisconnectedGraphError(
                f'graph is disconnected: only {len(mst)} of {n_vertices - 1} '
                'spanning edges found') from None

        uset = uf.find(edge.u)
        vset = uf.find(edge.v)
        if uset != vset:
            # accept the edge
            mst.append(edge)
            uf.union(uset, vset)

    logger.debug('accepted %d edges, %d left unexamined', len(mst), pq.size())
    return mst


def mst_weight(mst: Iterable[Edge]) -> int:
    return sum(e.weight for e in mst)


def read_edge_list(fname: str) -> tuple[list[Edge], int]:
    '''Read the plain format: "<nvertices> <nedges>" then one "u v w" per line.'''
    with open(fname, 'r') as f:
        header = f.readline().split()
        nvertices = int(header[0])

        edges = []

        for line in f:
            if line.strip():
                edges.append(Edge.from_line(line))

    return edges, nvertices


if __name__ == '__main__':
    if len(sys.argv) < 2:
        print(f'Usage: {sys.argv[0]} <filename> [verbose]')
        sys.exit(1)

    fname = sys.argv[1]
    verbose = (len(sys.argv) > 2)

    edges, nvertices = read_edge_list(fname)

    try:
        mst = kruskal(edges, nvertices)
    except DisconnectedGraphError as e:
        print(f'Error: {e}')
        sys.exit(1)

    print('Final MST sum:', mst_weight(mst))
    if verbose:
        print(mst)
