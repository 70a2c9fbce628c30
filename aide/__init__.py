"""aide - tasks, notes and configuration values with fuzzy name resolution."""

__version__ = "0.1.0"
