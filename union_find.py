class DisjointSet:
    '''
    Union-find forest over the integers 0..n-1.

    self.parent[i] < 0 means i is a root and -self.parent[i] is the size of
    its set; otherwise self.parent[i] is i's parent. Unions attach the smaller
    tree under the larger one and finds compress the whole path, so both run
    in effectively constant amortized time.
    '''

    def __init__(self, n_elems: int) -> None:
        if n_elems < 0:
            raise ValueError(f'number of elements must be non-negative, got {n_elems}')

        self.parent = [-1] * n_elems

    def __len__(self) -> int:
        return len(self.parent)

    def _check(self, x: int) -> None:
        if x < 0:
            raise ValueError(f'element must be non-negative, got {x}')
        if x >= len(self.parent):
            raise ValueError(f'element {x} out of range for {len(self.parent)} elements')

    def find(self, x: int) -> int:
        self._check(x)

        root = x
        while self.parent[root] >= 0:
            root = self.parent[root]

        # second pass: point everything on the path straight at the root
        while x != root:
            next_x = self.parent[x]
            self.parent[x] = root
            x = next_x

        return root

    def union(self, a: int, b: int) -> bool:
        '''
        Merge the sets containing a and b.

        Returns False if they were already in the same set.
        '''
        self._check(a)
        self._check(b)

        a_root = self.find(a)
        b_root = self.find(b)
        if a_root == b_root:
            return False

        # sizes are stored negated, so the more negative root is bigger
        if self.parent[a_root] <= self.parent[b_root]:
            bigger, smaller = a_root, b_root
        else:
            bigger, smaller = b_root, a_root

        self.parent[bigger] += self.parent[smaller]
        self.parent[smaller] = bigger
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def set_size(self, x: int) -> int:
        return -self.parent[self.find(x)]

    def num_subsets(self) -> int:
        return sum(1 for p in self.parent if p < 0)

    def current_state(self) -> str:
        '''Dump of the raw parent/size array, one "i: parent[i]" line per element.'''
        return ''.join(f'{i}: {p}\n' for i, p in enumerate(self.parent))

    def __repr__(self) -> str:
        return f'DisjointSet(n={len(self.parent)}, subsets={self.num_subsets()})'
