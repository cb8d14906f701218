"""Dead-link detection for static HTML site trees."""

__version__ = "0.1.0"
