"""Grid navigation assistant with obstacle detection and voice guidance."""

__version__ = "0.1.0"
