"""Infrastructure layer - logging, registries, adapters and renderers."""
