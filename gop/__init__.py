"""gop: package and release a single-binary Go project."""

__version__ = "0.1.0"
