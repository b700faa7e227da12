"""Package generated campaign images into downloadable ZIP archives."""

__version__ = "0.1.0"
