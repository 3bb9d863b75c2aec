"""Command line interface for dockit."""
