"""Interactive pygame window for the genome tree.

Each frame polls input, regenerates the genomes if SPACE was pressed,
redraws the whole tree and presents it, in that order.
"""

import logging
import random
from typing import Optional

import pygame

from arbor.constants import (
    BACKGROUND_COLOR,
    FRAME_RATE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SEPARATOR_WIDTH,
    WINDOW_CAPTION,
)
from arbor.genetics import GenomeLineage
from arbor.scene import TreeScene
from arbor.tree_renderer import TreeRenderer
from rendering.pygame_canvas import PygameCanvas

logger = logging.getLogger(__name__)


class TreeViewer:
    """A window showing one procedurally generated tree.

    Attributes:
        lineage: Genomes driving the tree
        screen: Pygame display surface
        canvas: Draw sink wrapping the display surface
        scene: Frame loop body bound to the canvas
        clock: Pygame clock for frame rate
    """

    def __init__(self, rng: random.Random) -> None:
        """Initialize the viewer.

        Args:
            rng: Seeded RNG shared by every genome
        """
        self.lineage = GenomeLineage(rng)
        self.clock: pygame.time.Clock = pygame.time.Clock()
        self.screen: Optional[pygame.Surface] = None
        self.canvas: Optional[PygameCanvas] = None
        self.scene: Optional[TreeScene] = None
        self.regenerate_requested: bool = False

    def setup(self) -> None:
        """Open the window and bind the renderer to it."""
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_CAPTION)

        self.canvas = PygameCanvas(self.screen)
        renderer = TreeRenderer(self.lineage, self.canvas)
        self.scene = TreeScene(self.lineage, renderer)

    def handle_events(self) -> bool:
        """Poll input; returns False once the window should close."""
        self.regenerate_requested = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    self.regenerate_requested = True
                elif event.key == pygame.K_ESCAPE:
                    return False
        return True

    def render(self) -> None:
        """Draw the current tree and present the frame."""
        if self.canvas is None or self.scene is None:
            return

        self.canvas.begin_frame(BACKGROUND_COLOR)
        self.scene.step(self.regenerate_requested)
        pygame.display.flip()

    def run(self) -> None:
        """Run the render loop until the window closes."""
        self.setup()

        logger.info("=" * SEPARATOR_WIDTH)
        logger.info("GENOME TREE")
        logger.info("=" * SEPARATOR_WIDTH)
        logger.info("Controls:")
        logger.info("  SPACE - Regenerate every genome")
        logger.info("  ESC   - Quit")
        logger.info("=" * SEPARATOR_WIDTH)

        while self.handle_events():
            self.render()
            self.clock.tick(FRAME_RATE)

        if self.scene is not None:
            logger.info(
                "Closed after %d frames and %d regenerations",
                self.scene.frame_count,
                self.scene.regeneration_count,
            )


def run_viewer(rng: random.Random) -> None:
    """Open the viewer window; pygame is shut down on exit."""
    pygame.init()
    viewer = TreeViewer(rng)
    try:
        viewer.run()
    finally:
        pygame.quit()
