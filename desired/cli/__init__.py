"""Command-line interface for desired."""
