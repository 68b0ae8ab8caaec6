from __future__ import annotations
import math
import numpy as np

from choosek.combinatorics.index_cursor import IndexCursor


def n_choose_k(n: int, k: int) -> int:
    """Number of k-combinations of n elements; 0 if k > n."""
    if n < 0 or k < 0:
        raise ValueError(f"n and k must be >= 0 (got n={n}, k={k})")
    return math.comb(n, k)


def index_matrix(n: int, k: int) -> np.ndarray:
    """
    All index vectors of C(n, k) stacked row by row in lexicographic order.
    Returns int64 array of shape (C(n, k), k).
    """
    total = n_choose_k(n, k)
    out = np.empty((total, k), dtype=np.int64)
    cursor = IndexCursor(n, k)
    row = 0
    while True:
        vec = cursor.next_index_vector()
        if vec is None:
            break
        out[row, :] = np.asarray(vec, dtype=np.int64)
        row += 1
    return out
