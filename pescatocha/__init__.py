"""Fishing game model: fish species, hooks, a rod and a small calculator."""

__version__ = "0.1.0"