"""Introductory programming exercises: searching, sorting, lists, trees, N-queens and small object models."""

__version__ = "0.1.0"