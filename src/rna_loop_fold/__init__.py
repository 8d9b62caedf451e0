"""Approximate loop-centred folding of RNA sequences."""

__version__ = "0.1.0"
