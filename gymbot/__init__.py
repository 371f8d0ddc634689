"""Gym training tracker bot core: SQLite storage, navigation history, translations and screens."""

__version__ = "0.1.0"