'''
Find the cheapest network of tunnels connecting every buried car in a
backyard.

Input file format:

<rows> <cols>
<ignored line>
(r1,c1) (r2,c2) <cost>
(r1,c1) (r2,c2) <cost>
...

Output: the total cost, a blank line, then one "(r,c) (r,c)" line per tunnel.
'''

import logging
import re
import sys

from typing import Iterable, NamedTuple, Optional, TextIO

from kruskal import DisconnectedGraphError, Edge, kruskal, mst_weight

logger = logging.getLogger(__name__)

# parentheses and commas are just separators
SEPARATORS = re.compile(r'[(),\s]+')


class BackyardFormatError(ValueError):
    pass


class Grid(NamedTuple):
    rows: int
    cols: int

    def check(self, r: int, c: int) -> tuple[int, int]:
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise ValueError(f'location ({r},{c}) is outside a {self.rows}x{self.cols} grid')
        return r, c


class Backyard(NamedTuple):
    grid: Grid
    edges: list[Edge]
    # vertex id -> (row, col), ids handed out in order of first appearance
    locations: list[tuple[int, int]]

    @property
    def n_vertices(self) -> int:
        return len(self.locations)


def parse_backyard(lines: Iterable[str]) -> Backyard:
    lines = iter(lines)

    try:
        header = next(lines).split()
        grid = Grid(int(header[0]), int(header[1]))
    except (StopIteration, IndexError, ValueError):
        raise BackyardFormatError('line 1: expected "<rows> <cols>"') from None

    if grid.rows < 0 or grid.cols < 0:
        raise BackyardFormatError(f'line 1: negative grid dimensions {grid.rows}x{grid.cols}')

    # the second line carries nothing we need
    next(lines, None)

    edges = []
    ids: dict[tuple[int, int], int] = {}
    locations: list[tuple[int, int]] = []

    def vertex_id(loc: tuple[int, int]) -> int:
        if loc not in ids:
            ids[loc] = len(locations)
            locations.append(loc)
        return ids[loc]

    for lineno, line in enumerate(lines, start=3):
        tokens = SEPARATORS.split(line.strip())
        tokens = [t for t in tokens if t]
        if not tokens:
            continue

        try:
            r1, c1, r2, c2, weight = [int(t) for t in tokens]
            a = grid.check(r1, c1)
            b = grid.check(r2, c2)
        except ValueError as e:
            raise BackyardFormatError(f'line {lineno}: {e}: {line.strip()!r}') from None

        edges.append(Edge(vertex_id(a), vertex_id(b), weight))

    logger.debug('read %d edges over %d locations on a %dx%d grid',
                 len(edges), len(locations), grid.rows, grid.cols)

    return Backyard(grid, edges, locations)


def read_backyard(fname: str) -> Backyard:
    with open(fname, 'r') as f:
        return parse_backyard(f)


def dig(backyard: Backyard) -> tuple[list[Edge], int]:
    '''Tunnels to dig and their total cost.'''
    mst = kruskal(backyard.edges, backyard.n_vertices)
    return mst, mst_weight(mst)


def format_tunnels(locations: list[tuple[int, int]], mst: Iterable[Edge], total: int) -> str:
    out = [f'{total}\n\n']
    for e in mst:
        (r1, c1), (r2, c2) = locations[e.u], locations[e.v]
        out.append(f'({r1},{c1}) ({r2},{c2})\n')
    return ''.join(out)


def write_tunnels(f: TextIO, locations: list[tuple[int, int]], mst: Iterable[Edge], total: int) -> None:
    f.write(format_tunnels(locations, mst, total))


def main(argv: Optional[list[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(prog='backyard-dig',
                                     description='Find the cheapest tunnel network linking every buried car')
    parser.add_argument('infile')
    parser.add_argument('outfile')
    parser.add_argument('-v', '--verbose', action='store_true')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    try:
        backyard = read_backyard(args.infile)
        mst, total = dig(backyard)

        with open(args.outfile, 'w') as f:
            write_tunnels(f, backyard.locations, mst, total)
    except (OSError, BackyardFormatError, DisconnectedGraphError) as e:
        print(f'{parser.prog}: error: {e}', file=sys.stderr)
        return 1

    if args.verbose:
        print(f'Dug {len(mst)} tunnels, total cost {total}')

    return 0


if __name__ == '__main__':
    sys.exit(main())
