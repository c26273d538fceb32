"""hostkit — host-side address, quoting, and path utilities."""

__version__ = "0.1.0"
