"""Rename scanned documents and upload them to object storage."""

__version__ = "0.1.0"
