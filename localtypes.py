"""
Type definitions shared by the search and propagation algorithms.

Organized by the component that primarily uses them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple, TypeVar

from typing_extensions import TypeAliasType

import numpy as np
import numpy.typing as npt

# Basic type variables for generic operations
T = TypeVar("T")

# Search inputs
Index = TypeAliasType("Index", int)
SortedSequence = TypeAliasType(
    "SortedSequence", Sequence[int] | npt.NDArray[np.integer]
)  # non-decreasing


class SearchRange(NamedTuple):
    """Inclusive bounds; start > end is the empty range."""

    start: Index
    end: Index

    @property
    def is_empty(self) -> bool:
        return self.start > self.end


class SearchStep(NamedTuple):
    """A single bisection probe."""

    start: Index
    end: Index
    mid: Index
    probe: int
