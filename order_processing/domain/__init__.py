"""Domain layer: entities, interfaces, repositories and services."""
