"""dufflectl — locate, cache and drive the duffle CLI."""

__version__ = "0.1.0"
