"""finboard - bank data access layer for a personal-finance dashboard."""

__version__ = "0.1.0"
