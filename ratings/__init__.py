"""Ratings service: validated, table-backed user ratings."""
__version__ = "0.1.0"
