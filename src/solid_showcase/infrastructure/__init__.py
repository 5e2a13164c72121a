"""Infrastructure layer - adapters, registry, dependency injection and logging."""
