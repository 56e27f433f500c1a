from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

T = TypeVar('T')

# shrink the backing array once it is only this full
SHRINK_FRACTION = 4


class Underflow(IndexError):
    '''Raised when taking from an empty priority queue.'''

    def __init__(self, msg: str = 'Priority queue underflow') -> None:
        super().__init__(msg)


class MinPQ(Generic[T]):
    '''
    Priority queue of generic keys backed by a binary min-heap.

    Keys live in self._pq[1..n]; slot 0 is unused. insert and extract_min
    take logarithmic amortized time, peek_min/size/is_empty constant time.
    The backing array doubles when full and halves when it drops to a
    quarter full.

    Ordering is the keys' natural `<`, unless a `key` function is given, in
    which case keys are compared by `key(x)` (the same convention as sorted()).
    '''

    def __init__(self, capacity: int = 1, key: Optional[Callable[[T], Any]] = None) -> None:
        if capacity < 1:
            raise ValueError(f'capacity must be at least 1, got {capacity}')

        self._pq: list[Optional[T]] = [None] * (capacity + 1)
        self._n = 0
        self._key = key

    @classmethod
    def from_keys(cls, keys: Iterable[T], key: Optional[Callable[[T], Any]] = None) -> 'MinPQ[T]':
        '''Heapify `keys` in linear time using sink-based construction.'''
        items = list(keys)
        pq = cls(max(len(items), 1), key=key)
        pq._n = len(items)
        pq._pq[1:len(items)+1] = items

        for k in range(pq._n // 2, 0, -1):
            pq._sink(k)

        assert pq.is_min_heap()
        return pq

    def is_empty(self) -> bool:
        return self._n == 0

    def size(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def __bool__(self) -> bool:
        return self._n > 0

    @property
    def capacity(self) -> int:
        return len(self._pq) - 1

    def peek_min(self) -> T:
        if self.is_empty():
            raise Underflow()
        return self._pq[1]

    def insert(self, x: T) -> None:
        # double size of array if necessary
        if self._n == len(self._pq) - 1:
            self._resize(2 * len(self._pq))

        self._n += 1
        self._pq[self._n] = x
        self._swim(self._n)

    def extract_min(self) -> T:
        if self.is_empty():
            raise Underflow()

        self._exch(1, self._n)
        smallest = self._pq[self._n]
        self._pq[self._n] = None
        self._n -= 1
        self._sink(1)

        if self._n > 0 and self._n == (len(self._pq) - 1) // SHRINK_FRACTION:
            self._resize(max(len(self._pq) // 2, 2))

        return smallest

    def _resize(self, length: int) -> None:
        assert length > self._n
        temp: list[Optional[T]] = [None] * length
        temp[1:self._n+1] = self._pq[1:self._n+1]
        self._pq = temp

    def _swim(self, k: int) -> None:
        while k > 1 and self._greater(k // 2, k):
            self._exch(k, k // 2)
            k //= 2

    def _sink(self, k: int) -> None:
        while 2 * k <= self._n:
            j = 2 * k
            if j < self._n and self._greater(j, j + 1):
                j += 1
            if not self._greater(k, j):
                break
            self._exch(k, j)
            k = j

    def _greater(self, i: int, j: int) -> bool:
        if self._key is None:
            return self._pq[j] < self._pq[i]
        return self._key(self._pq[j]) < self._key(self._pq[i])

    def _exch(self, i: int, j: int) -> None:
        self._pq[i], self._pq[j] = self._pq[j], self._pq[i]

    def is_min_heap(self) -> bool:
        '''Check the heap invariant over pq[1..n]. O(n), meant for tests.'''
        # iterative so large heaps don't hit the recursion limit
        for k in range(1, self._n // 2 + 1):
            left, right = 2 * k, 2 * k + 1
            if self._greater(k, left):
                return False
            if right <= self._n and self._greater(k, right):
                return False
        return True

    def __repr__(self) -> str:
        return f'MinPQ(size={self._n}, capacity={self.capacity})'
