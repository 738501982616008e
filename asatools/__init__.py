"""Slab-cutting and spread-depth solvers, and random network and toy-factory instance generators."""

__version__ = "0.1.0"
__all__ = ["marble", "spread", "tuganet", "ubiquity"]