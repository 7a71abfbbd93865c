"""FileTopPy: top-K files under one or more roots, ranked by size, date or name."""

__version__ = "0.1.0"
