"""Build static HTML blog posts from markdown notes."""

__version__ = "0.1.0"