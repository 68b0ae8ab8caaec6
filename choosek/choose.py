from __future__ import annotations
from typing import Any, Iterator, Optional, Sequence, Tuple

from choosek.choose_conf import ChooseConfig
from choosek.combinatorics.binomial import n_choose_k
from choosek.combinatorics.index_cursor import IndexCursor
from choosek.combinatorics.sequence_view import SequenceView


class Choose:
    """
    Forward-only, single-pass producer of the k-combinations of `source`
    in lexicographic order of positions. Not restartable: once consumed,
    iterating again yields nothing.
    """

    def __init__(self, source: Sequence[Any], cfg: ChooseConfig):
        cfg.validate()
        self.cfg = cfg
        self.view = SequenceView(source, copy=cfg.copy_source, as_array=cfg.as_array)
        self.cursor = IndexCursor(len(self.view), int(cfg.k))
        self.produced: int = 0
        self._done: bool = False
        if cfg.verbose:
            print(f"[Choose] n={self.n} k={self.k} total={self.total} "
                  f"({'copy' if cfg.copy_source else 'borrow'})")

    @property
    def n(self) -> int:
        return self.cursor.n

    @property
    def k(self) -> int:
        return self.cursor.k

    @property
    def total(self) -> int:
        return n_choose_k(self.n, self.k)

    def produce_next(self) -> Optional[Tuple[Any, ...]]:
        if self._done:
            return None

        vec = self.cursor.next_index_vector()
        if vec is None:
            self._done = True
            if self.cfg.verbose:
                print(f"[Choose] exhausted after {self.produced} combinations")
            return None

        self.produced += 1
        return self.view.materialize(vec)

    def __iter__(self) -> Iterator[Tuple[Any, ...]]:
        return self

    def __next__(self) -> Tuple[Any, ...]:
        item = self.produce_next()
        if item is None:
            raise StopIteration
        return item

    def __repr__(self) -> str:
        return f"Choose(n={self.n}, k={self.k}, produced={self.produced})"


def choose(
        source: Sequence[Any],
        k: int,
        *,
        copy_source: bool = False,
        as_array: bool = False,
        verbose: bool = False,
) -> Choose:
    return Choose(source, ChooseConfig(k=k, copy_source=copy_source, as_array=as_array, verbose=verbose))


class Chooseable:
    """Mixin for indexable sequence types: adds `.choose(k)`."""

    def choose(self, k: int, **kwargs) -> Choose:
        return choose(self, k, **kwargs)


class ChooseableList(Chooseable, list):
    pass
