"""Domain layer: entities, exceptions and pure helpers."""
