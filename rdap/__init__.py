"""RDAP library: bootstrapping, client errors and response data types."""

__version__ = "0.9.1"