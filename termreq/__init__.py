"""A terminal client for making HTTP requests with Vim-style keys."""

__version__ = "0.1.8"