"""Infrastructure layer - registries and logging."""
