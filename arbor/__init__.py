"""Genome-driven recursive fractal tree generation."""

from arbor.canvas import CircleCommand, CircleSink, RecordingCanvas
from arbor.exceptions import ArborError, GeneticsError, GenomeError, RenderError
from arbor.genetics import Genome, GenomeLineage, SegmentProfile
from arbor.scene import TreeScene
from arbor.tree_renderer import BranchTip, TreeRenderer

__all__ = [
    "ArborError",
    "BranchTip",
    "CircleCommand",
    "CircleSink",
    "GeneticsError",
    "Genome",
    "GenomeError",
    "GenomeLineage",
    "RecordingCanvas",
    "RenderError",
    "SegmentProfile",
    "TreeRenderer",
    "TreeScene",
]
