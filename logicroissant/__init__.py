"""Terminal logic puzzle game: collect truth-table values while dodging ghosts."""

__version__ = "0.1.0"
__all__ = ["__version__"]