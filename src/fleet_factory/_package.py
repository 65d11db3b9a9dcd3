"""Package metadata."""

__version__ = "1.0.0"
