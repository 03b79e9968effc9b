# errors.py - exception types raised by the chain and its walkers.

from __future__ import annotations


class ChainError(Exception):
    """Base class for every error raised by atom_chain."""


class InvalidConfiguration(ChainError, ValueError):
    """Raised when a chain or config is built with unusable values (e.g. order 0)."""


class PreconditionViolation(ChainError, ValueError):
    """Raised when a caller passes a state whose length differs from the chain order."""


class InternalInvariantError(ChainError, AssertionError):
    """
    Transition accounting is corrupt: a context's total no longer matches
    the sum of its destination counts. Not recoverable.
    """
