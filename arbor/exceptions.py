"""Tree generator exception hierarchy.

Centralised base classes so callers can catch domain failures narrowly
instead of relying on bare ``except Exception`` blocks.
"""


class ArborError(Exception):
    """Root of all tree generator exceptions."""


class GeneticsError(ArborError):
    """Genome construction or sampling failure."""


class GenomeError(GeneticsError):
    """A genome was asked for an impossible generation level."""


class RenderError(ArborError):
    """The recursive walk was started outside the lineage's bounds."""
