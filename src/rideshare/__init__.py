"""
Rideshare: validated driver, rider and trip records.

This package loads flat CSV exports into immutable, validated entities and
answers relational questions about them (which trips a driver made, who
drove a given trip, and so on).
"""

from importlib.metadata import version

__version__ = version("rideshare")

__all__ = ["__version__"]
