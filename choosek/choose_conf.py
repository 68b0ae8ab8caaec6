from __future__ import annotations
from dataclasses import dataclass
import numpy as np


@dataclass
class ChooseConfig:
    k: int
    copy_source: bool = False  # False -> borrow, caller must not mutate the source meanwhile
    as_array: bool = False  # materialize as numpy array instead of tuple
    verbose: bool = False

    def validate(self) -> None:
        if isinstance(self.k, bool) or not isinstance(self.k, (int, np.integer)):
            raise TypeError(f"k must be an int, got {type(self.k).__name__}.")
        if self.k < 0:
            raise ValueError("k must be >= 0.")
