"""Distributed MD5 brute-force search with a manager and HTTP workers."""

__version__ = "0.1.0"