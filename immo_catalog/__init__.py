"""In-memory real-estate catalog browser: filtering, comparison and galleries."""

__version__ = "0.1.0"
