"""Display-independent building blocks for two-dimensional games."""

__version__ = "0.1.0"