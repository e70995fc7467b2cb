"""Croupier: single-table roulette with timed round resolution."""

__version__ = "0.1.0"
__author__ = "Croupier Team"

__all__ = ["__version__", "__author__"]
