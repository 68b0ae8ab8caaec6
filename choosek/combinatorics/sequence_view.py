from __future__ import annotations
from typing import Any, Optional, Sequence, Tuple, Union
import numpy as np


def _to_array(items: Sequence[Any]) -> np.ndarray:
    items = list(items)
    try:
        return np.asarray(items)
    except ValueError:
        # ragged elements
        out = np.empty(len(items), dtype=object)
        for i, x in enumerate(items):
            out[i] = x
        return out


class SequenceView:
    """
    Read-only access to the n source elements.

    copy=False borrows the source: the caller must not mutate it while a
    generator built on this view is alive. copy=True keeps a private list
    (or ndarray copy) instead.

    as_array=True converts a non-ndarray source to an array once, up front;
    an ndarray source is used as is (by reference when borrowing).
    """

    def __init__(self, source: Sequence[Any], copy: bool = False, as_array: bool = False):
        if copy:
            if isinstance(source, np.ndarray):
                source = np.array(source, copy=True)
            else:
                source = list(source)
        self.source = source
        self.copy = copy
        self.as_array = as_array

        self._array: Optional[np.ndarray] = None
        if as_array:
            self._array = source if isinstance(source, np.ndarray) else _to_array(source)

    def __len__(self) -> int:
        return len(self.source)

    def materialize(self, indices: Sequence[int]) -> Union[Tuple[Any, ...], np.ndarray]:
        # indices come from IndexCursor and are always in bounds
        if self._array is not None:
            return np.take(self._array, np.asarray(indices, dtype=np.intp), axis=0)
        src = self.source
        return tuple(src[i] for i in indices)
