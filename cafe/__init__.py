"""Console client for the cafe ordering database."""

__version__ = "0.1.0"
