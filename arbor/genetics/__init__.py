"""Genetics for the tree generator.

Exports:
    Genome: Randomized parameters for one generation level
    GenomeLineage: Ordered genomes, index 0 (leaves) to N-1 (trunk)
    SegmentProfile: Immutable per-branch values derived from a genome
"""

from arbor.genetics.genome import Genome
from arbor.genetics.lineage import GenomeLineage
from arbor.genetics.profile import SegmentProfile

__all__ = [
    "Genome",
    "GenomeLineage",
    "SegmentProfile",
]
