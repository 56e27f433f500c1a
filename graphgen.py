import argparse
import random

from typing import Optional

import numpy as np


def generate(rows: int, cols: int,
             density: float = 0.5,
             min_weight: int = 1,
             max_weight: int = 100,
             connected: bool = False,
             rng: Optional[random.Random] = None) -> np.ndarray:
    '''
    Random backyard as an upper-triangular weight matrix over the rows*cols
    cells; entry [i, j] (i < j) is the cost of a tunnel between cells i and j,
    0 meaning no tunnel. With connected=True every pair of 4-neighbours gets a
    tunnel first, so the result always has a spanning tree.
    '''
    if min_weight < 1:
        raise ValueError(f'min_weight must be at least 1 (0 marks a missing tunnel), got {min_weight}')
    if max_weight < min_weight:
        raise ValueError(f'max_weight {max_weight} is below min_weight {min_weight}')

    if rng is None:
        rng = random.Random()

    nvertices = rows * cols
    total_edges = int(density * nvertices * (nvertices-1) / 2)

    adj_matrix = np.zeros((nvertices, nvertices), dtype=int)

    if connected:
        for r in range(rows):
            for c in range(cols):
                i = r * cols + c
                if c + 1 < cols:
                    adj_matrix[i, i+1] = rng.randint(min_weight, max_weight)
                if r + 1 < rows:
                    adj_matrix[i, i+cols] = rng.randint(min_weight, max_weight)

    # never ask for more tunnels than there are free pairs
    free = nvertices * (nvertices-1) // 2 - int(np.count_nonzero(adj_matrix))
    total_edges = min(total_edges, free)

    for _ in range(total_edges):
        # Generate a random edge
        new_spot = False

        # keep trying until an unoccupied spot is found
        while not new_spot:
            i = rng.randint(0, nvertices-2)
            j = rng.randint(i+1, nvertices-1) # ensure no self-loops
            if adj_matrix[i, j] == 0:
                new_spot = True

        # Only bother filling upper triangle for undirected graphs
        adj_matrix[i, j] = rng.randint(min_weight, max_weight)

    return adj_matrix


def write_backyard(adj_matrix: np.ndarray, rows: int, cols: int, fname: str) -> int:
    '''Write the matrix in backyard format, returning the number of tunnels.'''
    nvertices = rows * cols
    nedges = int(np.count_nonzero(adj_matrix))

    with open(fname, 'w') as f:
        f.write(f'{rows} {cols}\n')
        f.write(f'{nedges}\n')
        for i in range(nvertices):
            for j in range(i+1, nvertices):
                if adj_matrix[i,j] != 0:
                    r1, c1 = divmod(i, cols)
                    r2, c2 = divmod(j, cols)
                    f.write(f'({r1},{c1}) ({r2},{c2}) {adj_matrix[i,j]}\n')

    return nedges


if __name__ == '__main__':
    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate random backyards for benchmarking')
    parser.add_argument('rows', type=int)
    parser.add_argument('cols', type=int)
    parser.add_argument('-o', '--outfile', default='backyard.txt')
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-s', '--seed', default=None, type=int)
    parser.add_argument('-c', '--connected', action='store_true',
                        help='always include tunnels between neighbouring cells')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args()

    if not args.quiet:
        print(f'Generating a {args.rows}x{args.cols} backyard...')
        print(f'  Density: {args.density}')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    try:
        adj_matrix = generate(args.rows, args.cols,
                              density=args.density,
                              min_weight=args.min_weight,
                              max_weight=args.max_weight,
                              connected=args.connected,
                              rng=random.Random(args.seed))
    except ValueError as e:
        parser.error(str(e))

    if args.verbose:
        print()
        print('Backyard adjacency matrix:')
        print(adj_matrix)

    nedges = write_backyard(adj_matrix, args.rows, args.cols, args.outfile)

    if not args.quiet:
        print(f'  Wrote {nedges} tunnels to {args.outfile}')

'''
File format:

<rows> <cols>
<ntunnels>
(r1,c1) (r2,c2) <w>
(r1,c1) (r2,c2) <w>
...

'''
