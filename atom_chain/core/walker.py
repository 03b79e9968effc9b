# walker.py - lazy, single-pass generation of atoms from a trained chain.

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple

if TYPE_CHECKING:
    from .chain import Chain

logger = logging.getLogger(__name__)


class SequenceWalker:
    """
    Iterator that keeps sampling from `chain`, feeding each drawn atom back
    into its own cursor (newest first, oldest dropped).

    It stops for good the first time the cursor is a context the chain has
    never seen. It is not restartable: once exhausted it stays exhausted.
    If the learned transitions contain a reachable cycle it may never stop,
    so bound it with take(), until() or itertools.islice.

    The initial state is not validated here; a wrong length surfaces as
    PreconditionViolation on the first pull.
    """

    __slots__ = ("_chain", "_state")

    def __init__(self, chain: "Chain", initial: Iterable[int]) -> None:
        self._chain = chain
        # None once exhausted
        self._state: Optional[Tuple[int, ...]] = tuple(initial)

    @property
    def state(self) -> Optional[Tuple[int, ...]]:
        return self._state

    @property
    def exhausted(self) -> bool:
        return self._state is None

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self._state is None:
            raise StopIteration
        atom = self._chain.sample(self._state)
        if atom is None:
            logger.debug("Walker reached unseen context %r, stopping", self._state)
            self._state = None
            raise StopIteration
        self._state = (atom,) + self._state[:-1]
        return atom

    # convenience -------------------------------------------------------
    def take(self, n: int) -> List[int]:
        """Pull at most n atoms."""
        out: List[int] = []
        if n <= 0:
            return out
        for atom in self:
            out.append(atom)
            if len(out) >= n:
                break
        return out

    def until(self, stop_atom: int) -> Iterator[int]:
        """Yield atoms until `stop_atom` is drawn (it is consumed, not yielded)."""
        for atom in self:
            if atom == stop_atom:
                return
            yield atom
