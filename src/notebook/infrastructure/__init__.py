"""Infrastructure adapters for the notebook backend."""
