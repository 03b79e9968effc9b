# chain.py
# variable-order Markov chain over integer atoms, trained incrementally
# and sampled one step at a time.

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING, Dict, Iterable, Optional, Sequence, Tuple

from .errors import InternalInvariantError, InvalidConfiguration, PreconditionViolation
from .protocols import NumpyRandomSource, RandomSource, default_source
from .walker import SequenceWalker
from ..utils.logger_utils import time_block

if TYPE_CHECKING:
    from ..utils.config_manager import ChainConfig

logger = logging.getLogger(__name__)

Atom = int
History = Tuple[Atom, ...]

# reserved sentence-boundary atom; every fresh history is filled with it
BOUNDARY: Atom = 0


class TransitionStats:
    """
    Counts observed after one history.
    counts: destination atom -> occurrences (insertion ordered)
    total: sum of counts, kept alongside so sampling needs no re-sum
    """

    __slots__ = ("counts", "total")

    def __init__(self) -> None:
        self.counts: Counter = Counter()
        self.total = 0

    def add(self, atom: Atom) -> None:
        self.counts[atom] += 1
        self.total += 1


class Chain:
    """
    Markov chain of fixed order over integer atoms.

    Training walks a sliding window (the history) over the input: each
    add_atom records "history -> atom" and then pushes atom onto the front
    of the window, dropping the oldest atom at the back. end_sentence puts
    the window back to all-BOUNDARY so the next sequence is learned
    independently.

    Sampling never mutates the chain; sample_seq hands out a walker with
    its own cursor.
    """

    def __init__(self, order: int, rng: Optional[RandomSource] = None) -> None:
        if isinstance(order, bool) or not isinstance(order, int) or order < 1:
            raise InvalidConfiguration(f"Chain order must be a positive integer, got {order!r}")
        self._order = order
        self._rng: RandomSource = rng if rng is not None else default_source()
        # history -> stats for whatever followed it
        self._transitions: Dict[History, TransitionStats] = {}
        self._history: History = ()
        self.end_sentence()
        logger.debug("Created chain of order %d", order)

    @classmethod
    def from_config(cls, cfg: "ChainConfig", rng: Optional[RandomSource] = None) -> "Chain":
        """Build a chain from config; a configured seed gives a numpy-backed source."""
        if rng is None and cfg.seed is not None:
            rng = NumpyRandomSource(seed=cfg.seed)
        return cls(cfg.order, rng=rng)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def order(self) -> int:
        return self._order

    @property
    def history(self) -> History:
        """Current training cursor, most recent atom first."""
        return self._history

    def contexts(self) -> int:
        """Number of distinct histories seen during training."""
        return len(self._transitions)

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def add_atom(self, atom: Atom) -> None:
        stats = self._transitions.get(self._history)
        if stats is None:
            stats = self._transitions[self._history] = TransitionStats()
        stats.add(atom)
        self._history = (atom,) + self._history[:-1]

    def end_sentence(self) -> None:
        self._history = (BOUNDARY,) * self._order

    def train_sequence(self, atoms: Iterable[Atom], end: bool = True) -> int:
        """
        Feed one sequence through add_atom, closing it with end_sentence
        unless `end` is False. Returns how many atoms were added.
        """
        n = 0
        for a in atoms:
            self.add_atom(a)
            n += 1
        if end:
            self.end_sentence()
        return n

    def train_many(self, sequences: Iterable[Iterable[Atom]]) -> int:
        total = 0
        count = 0
        with time_block("train_many", logger):
            for seq in sequences:
                total += self.train_sequence(seq)
                count += 1
        logger.debug("Trained on %d sequences (%d atoms), %d contexts known", count, total, len(self._transitions))
        return total

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------
    def _key(self, state: Sequence[Atom]) -> History:
        key = tuple(state)
        if len(key) != self._order:
            raise PreconditionViolation(
                f"length of state must equal chain order {self._order}, got {len(key)}"
            )
        return key

    def sample(self, state: Sequence[Atom]) -> Optional[Atom]:
        """
        Draw the next atom after `state`, weighted by how often each
        successor followed it in training. Returns None if `state` was
        never seen as a context.
        """
        stats = self._transitions.get(self._key(state))
        if stats is None:
            return None

        index = self._rng.randrange(stats.total)
        low = 0
        for dest, count in stats.counts.items():
            high = low + count
            if low <= index < high:
                return dest
            low = high

        logger.error("Draw %d fell outside all intervals (total=%d, summed=%d)", index, stats.total, low)
        raise InternalInvariantError(
            f"index {index} not covered: total={stats.total} but counts sum to {low}"
        )

    def sample_seq(self, initial: Iterable[Atom]) -> SequenceWalker:
        """Lazy walk starting at `initial`; its length is checked on first pull."""
        return SequenceWalker(self, initial)

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    def transitions_from(self, state: Sequence[Atom]) -> Dict[Atom, int]:
        """Copy of destination counts after `state` (empty if unseen)."""
        stats = self._transitions.get(self._key(state))
        return dict(stats.counts) if stats is not None else {}

    def probabilities(self, state: Sequence[Atom]) -> Dict[Atom, float]:
        stats = self._transitions.get(self._key(state))
        if stats is None:
            return {}
        return {dest: c / stats.total for dest, c in stats.counts.items()}

    def check_invariants(self) -> None:
        """Raise InternalInvariantError if any stored accounting is off."""
        if len(self._history) != self._order:
            raise InternalInvariantError(f"history length {len(self._history)} != order {self._order}")
        for key, stats in self._transitions.items():
            if len(key) != self._order:
                raise InternalInvariantError(f"context {key!r} has wrong length")
            summed = sum(stats.counts.values())
            if summed != stats.total:
                raise InternalInvariantError(
                    f"context {key!r}: total {stats.total} != sum of counts {summed}"
                )

    def __repr__(self) -> str:
        return f"Chain(order={self._order}, contexts={len(self._transitions)})"
