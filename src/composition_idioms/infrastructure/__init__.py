"""Infrastructure layer: logging and shared-instance access."""
