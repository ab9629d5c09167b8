"""RNG utilities for deterministic tree generation.

Every genome draws from an explicitly injected ``random.Random``. These
helpers fail loudly when one is missing rather than silently falling back
to the process-wide generator, which would make regenerations impossible
to reproduce.
"""

import random
import secrets
from typing import Optional, Tuple


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but not available.

    This indicates a setup bug: genomes must be handed the lineage's RNG.
    """


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None

    Example:
        def __init__(self, generation: int, rng: Optional[random.Random] = None):
            self._rng = require_rng_param(rng, "Genome.__init__")
    """
    if rng is None:
        raise MissingRNGError(f"RNG required: {context}. Pass the lineage RNG explicitly.")
    return rng


def create_rng(seed: Optional[int] = None) -> Tuple[random.Random, int]:
    """Build an explicitly seeded RNG.

    When no seed is given a fresh one is drawn from the OS so that the
    caller can still log it and reproduce the run later.

    Returns:
        The seeded RNG and the seed that was used
    """
    if seed is None:
        seed = secrets.randbits(64)
    return random.Random(seed), seed
