"""Main entry point for the genome tree.

This module provides command-line options to run the tree generator:
- Window mode (default): interactive pygame window, SPACE regenerates
- Headless mode: renders into a recorder and logs statistics
"""

import argparse
import logging
import random
import sys
from typing import Dict, Optional

from arbor.util.rng import create_rng

logger = logging.getLogger(__name__)


def run_window(rng: random.Random) -> int:
    """Run the interactive pygame window."""
    try:
        import pygame

        from treeviewer import run_viewer
    except ImportError as e:
        logger.error("Error: Required dependencies not installed: %s", e)
        logger.error("Install with: pip install -e .")
        return 1

    try:
        run_viewer(rng)
    except pygame.error as e:
        logger.error("Couldn't set up the display: %s", e)
        return 1
    return 0


def run_headless(
    rng: random.Random,
    max_frames: int,
    stats_interval: int,
    regenerate_every: Optional[int] = None,
) -> Dict[str, int]:
    """Render frames into a recorder without opening a window.

    Args:
        rng: Seeded RNG shared by every genome
        max_frames: Number of frames to render
        stats_interval: Log stats every N frames
        regenerate_every: Fire the regenerate trigger every N frames (optional)

    Returns:
        Totals for the run: frames, regenerations and circles/branches of
        the last frame
    """
    from arbor.canvas import RecordingCanvas
    from arbor.constants import SEPARATOR_WIDTH
    from arbor.genetics import GenomeLineage
    from arbor.scene import TreeScene
    from arbor.tree_renderer import TreeRenderer, count_branches

    lineage = GenomeLineage(rng)
    canvas = RecordingCanvas()
    renderer = TreeRenderer(lineage, canvas)
    scene = TreeScene(lineage, renderer)

    for frame in range(1, max_frames + 1):
        regenerate = bool(regenerate_every) and frame > 1 and (frame - 1) % regenerate_every == 0
        canvas.clear()
        renderer.reset_stats()
        scene.step(regenerate)

        if stats_interval > 0 and frame % stats_interval == 0:
            logger.info("=" * SEPARATOR_WIDTH)
            logger.info("Frame %d", frame)
            logger.info("  Circles:       %d", len(canvas))
            logger.info(
                "  Branches:      %d (expected %d)",
                renderer.branches_drawn,
                count_branches(lineage),
            )
            logger.info("  Regenerations: %d", scene.regeneration_count)

    return {
        "frames": scene.frame_count,
        "regenerations": scene.regeneration_count,
        "circles": len(canvas),
        "branches": renderer.branches_drawn,
        "expected_branches": count_branches(lineage),
    }


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Genome-driven recursive fractal tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Open the window (default)
  python main.py

  # Reproduce a tree you liked
  python main.py --seed 42

  # Headless run, regenerating every 10 frames
  python main.py --headless --max-frames 100 --regenerate-every 10
        """,
    )

    parser.add_argument(
        "--headless", action="store_true", help="Run without a window (stats only)"
    )

    parser.add_argument(
        "--max-frames",
        type=_non_negative_int,
        default=100,
        help="Frames to render in headless mode (default: 100)",
    )

    parser.add_argument(
        "--stats-interval",
        type=_non_negative_int,
        default=25,
        help="Log stats every N frames in headless mode (default: 25)",
    )

    parser.add_argument(
        "--regenerate-every",
        type=_positive_int,
        default=None,
        metavar="N",
        help="Regenerate the genomes every N frames in headless mode (optional)",
    )

    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for a reproducible tree (optional)"
    )

    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv=None) -> int:
    """Parse command-line arguments and run the appropriate mode."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )

    rng, seed = create_rng(args.seed)
    logger.info("Using seed %d", seed)

    if args.headless:
        logger.info(
            "Configuration: %d frames, stats every %d frames", args.max_frames, args.stats_interval
        )
        stats = run_headless(
            rng,
            args.max_frames,
            args.stats_interval,
            regenerate_every=args.regenerate_every,
        )
        logger.info("Finished: %s", stats)
        return 0

    return run_window(rng)


if __name__ == "__main__":
    sys.exit(main())
