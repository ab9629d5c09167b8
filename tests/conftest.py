"""Pytest configuration and fixtures for tree generator tests."""

import random

import pytest


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def lineage(seeded_rng):
    """Provide a full eight-generation lineage."""
    from arbor.genetics import GenomeLineage

    return GenomeLineage(seeded_rng)


@pytest.fixture
def canvas():
    """Provide a recorder for draw requests."""
    from arbor.canvas import RecordingCanvas

    return RecordingCanvas()
