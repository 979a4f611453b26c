"""Netflix catalogue insights: CSV/SQL loading and content analytics."""

__version__ = "0.1.0"
