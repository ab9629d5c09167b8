"""One frame of tree work, shared by the pygame viewer and headless mode."""

from __future__ import annotations

import logging
from typing import Tuple

from arbor.config.display import ROOT_ANCHOR, ROOT_HEADING
from arbor.genetics.lineage import GenomeLineage
from arbor.math_utils import Vector2
from arbor.tree_renderer import TreeRenderer

logger = logging.getLogger(__name__)


class TreeScene:
    """Frame loop body: optional regeneration, then a full render.

    The scene has no states beyond Idle; a regenerate request is a
    momentary transition that completes before the frame is drawn.

    Attributes:
        lineage: Genomes driving the tree
        renderer: Renderer bound to the frame's draw sink
        anchor: Trunk base in world coordinates
        heading: Trunk starting heading (radians)
        frame_count: Frames rendered so far
        regeneration_count: Regenerations performed so far
    """

    def __init__(
        self,
        lineage: GenomeLineage,
        renderer: TreeRenderer,
        anchor: Tuple[float, float] = ROOT_ANCHOR,
        heading: float = ROOT_HEADING,
    ) -> None:
        self.lineage = lineage
        self.renderer = renderer
        self.anchor = Vector2(*anchor)
        self.heading = heading
        self.frame_count = 0
        self.regeneration_count = 0

    def regenerate(self) -> None:
        self.lineage.regenerate()
        self.regeneration_count += 1
        logger.info("Regenerated tree genomes (regeneration #%d)", self.regeneration_count)

    def step(self, regenerate_requested: bool = False) -> None:
        """Run one frame.

        Args:
            regenerate_requested: The frame's sampled regenerate trigger
        """
        if regenerate_requested:
            self.regenerate()

        self.renderer.draw_tree(self.anchor, self.heading)
        self.frame_count += 1
