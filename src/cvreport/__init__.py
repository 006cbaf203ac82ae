"""CV evaluation report synthesis."""

__version__ = "0.1.0"
