"""Console simulation of a book publishing workflow."""

__version__ = "0.1.0"
