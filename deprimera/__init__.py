"""Data access objects for football leagues, championships, people, matches and standings."""

__version__ = "0.1.0"