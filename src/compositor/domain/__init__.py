"""Domain layer - component trees, parts, builders and blueprints."""
