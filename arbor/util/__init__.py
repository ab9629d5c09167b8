"""Shared utilities for the tree generator."""

from arbor.util.rng import MissingRNGError, create_rng, require_rng_param

__all__ = [
    "MissingRNGError",
    "create_rng",
    "require_rng_param",
]
