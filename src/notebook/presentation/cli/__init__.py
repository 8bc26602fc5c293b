"""Command-line interface for the notebook backend."""
