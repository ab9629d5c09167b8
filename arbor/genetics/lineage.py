"""Ordered set of genomes, one per generation level."""

from __future__ import annotations

import logging
import random
from typing import Iterator, List, Optional

from arbor.config.tree import GENERATION_COUNT
from arbor.exceptions import GenomeError
from arbor.genetics.genome import Genome
from arbor.genetics.profile import SegmentProfile
from arbor.util.rng import require_rng_param

logger = logging.getLogger(__name__)


class GenomeLineage:
    """Genomes indexed 0..N-1 by increasing generation age.

    Index ``i`` holds the genome of generation ``i + 1``; the last index is
    the oldest generation and owns the trunk. The renderer walks the index
    downward, so index 0 is always the leaf level.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        generation_count: int = GENERATION_COUNT,
    ) -> None:
        if generation_count < 1:
            raise GenomeError(f"A lineage needs at least one generation, got {generation_count}")
        self._rng = require_rng_param(rng, "GenomeLineage.__init__")
        self._genomes: List[Genome] = [
            Genome(generation, self._rng) for generation in range(1, generation_count + 1)
        ]

    @property
    def oldest_index(self) -> int:
        return len(self._genomes) - 1

    def regenerate(self) -> None:
        """Resample every genome's parameters, youngest first."""
        for genome in self._genomes:
            genome.regenerate()
            logger.debug("Regenerated %r", genome)

    def root_profile(self) -> SegmentProfile:
        """Profile for the trunk, taken from the oldest generation."""
        return self._genomes[-1].get_profile()

    def __len__(self) -> int:
        return len(self._genomes)

    def __getitem__(self, index: int) -> Genome:
        return self._genomes[index]

    def __iter__(self) -> Iterator[Genome]:
        return iter(self._genomes)
