"""
atom_chain.core

The model itself:
 - Chain: variable-order Markov chain over integer atoms (training + sampling)
 - SequenceWalker: lazy generator of atoms driven by a Chain
 - error types and the RandomSource protocol
"""

from .errors import ChainError, InternalInvariantError, InvalidConfiguration, PreconditionViolation
from .protocols import NumpyRandomSource, RandomSource
from .walker import SequenceWalker
from .chain import BOUNDARY, Chain

__all__ = [
    "BOUNDARY",
    "Chain",
    "SequenceWalker",
    "ChainError",
    "InvalidConfiguration",
    "PreconditionViolation",
    "InternalInvariantError",
    "RandomSource",
    "NumpyRandomSource",
]
