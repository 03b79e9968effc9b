# atom_chain/core/protocols.py
"""
Protocol interfaces for the pluggable pieces of the chain.

Right now that is only the random source used by Chain.sample. Depending on
a Protocol lets tests hand in a seeded or scripted source without touching
the process-wide generator.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """Anything able to draw a uniform integer in [0, stop)."""

    def randrange(self, stop: int) -> int:
        ...


class NumpyRandomSource:
    """
    RandomSource backed by a numpy Generator.

    Example:
        src = NumpyRandomSource(seed=7)
        src.randrange(10)  # -> int in [0, 10)
    """

    __slots__ = ("_gen",)

    def __init__(self, seed: Optional[int] = None, generator: Optional[np.random.Generator] = None) -> None:
        self._gen = generator if generator is not None else np.random.default_rng(seed)

    def randrange(self, stop: int) -> int:
        if stop <= 0:
            raise ValueError(f"empty range for randrange: stop={stop}")
        # numpy returns np.int64, callers expect a plain int
        return int(self._gen.integers(0, stop))


def default_source() -> RandomSource:
    """Process-wide source: the stdlib `random` module's shared instance."""
    return random  # type: ignore[return-value]
