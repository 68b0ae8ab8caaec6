from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

IndexVector = Tuple[int, ...]


def first_index_vector(n: int, k: int) -> Optional[IndexVector]:
    """Lexicographically first selection [0, 1, ..., k-1], or None if k > n."""
    if k > n:
        return None
    return tuple(range(k))


def _rightmost_incrementable(indices: Sequence[int], n: int, k: int) -> int:
    i = k - 1
    while i >= 0 and indices[i] >= n - k + i:
        i -= 1
    return i


def successor(indices: Sequence[int], n: int, k: int) -> Optional[IndexVector]:
    """
    Pure variant of the advance rule.
    indices: strictly increasing vector of length k, values in [0, n)
    Returns the next vector in lexicographic order, or None after [n-k, ..., n-1].
    """
    i = _rightmost_incrementable(indices, n, k)
    if i < 0:
        return None
    out = list(indices)
    out[i] += 1
    for j in range(i + 1, k):
        out[j] = out[j - 1] + 1
    return tuple(out)


class IndexCursor:
    """
    Owns the current k-index vector into an n-length sequence and steps it
    forward in lexicographic order. Never reset; once exhausted it stays so.
    """

    def __init__(self, n: int, k: int):
        self._n: int = n
        self._k: int = k
        self._indices: List[int] = list(range(k))
        self._first: bool = True
        # k > n: no valid selection at all
        self._exhausted: bool = k > n

    @property
    def n(self) -> int:
        return self._n

    @property
    def k(self) -> int:
        return self._k

    @property
    def indices(self) -> IndexVector:
        return tuple(self._indices)

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def advance(self) -> bool:
        # an explicit step also consumes the initial vector
        self._first = False
        if self._exhausted:
            return False

        r = self._indices
        i = _rightmost_incrementable(r, self._n, self._k)
        if i < 0:
            self._exhausted = True
            return False

        r[i] += 1
        for j in range(i + 1, self._k):
            r[j] = r[j - 1] + 1
        return True

    def next_index_vector(self) -> Optional[IndexVector]:
        if self._exhausted:
            return None

        if self._first:
            self._first = False
            return self.indices

        if not self.advance():
            return None
        return self.indices

    def __repr__(self) -> str:
        state = "exhausted" if self._exhausted else str(self.indices)
        return f"IndexCursor(n={self._n}, k={self._k}, {state})"
