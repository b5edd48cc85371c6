"""Rules engine for two-player chess driven by select / drop commands."""

__version__ = "0.1.0"
