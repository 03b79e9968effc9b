"""
atom_chain - variable-order Markov chains over integer-coded atoms.

Example:
    from atom_chain import Chain

    chain = Chain(order=2)
    chain.train_sequence([5, 6, 7])
    chain.train_sequence([5, 6, 8])
    chain.sample([6, 5])           # -> 7 or 8
    list(chain.sample_seq([0, 0])) # -> e.g. [5, 6, 8]
"""

from .core import (
    BOUNDARY,
    Chain,
    ChainError,
    InternalInvariantError,
    InvalidConfiguration,
    NumpyRandomSource,
    PreconditionViolation,
    RandomSource,
    SequenceWalker,
)
from .utils.config_manager import ChainConfig, load_config

__all__ = [
    "BOUNDARY",
    "Chain",
    "ChainConfig",
    "load_config",
    "SequenceWalker",
    "ChainError",
    "InvalidConfiguration",
    "PreconditionViolation",
    "InternalInvariantError",
    "RandomSource",
    "NumpyRandomSource",
]

__version__ = "0.1.0"
