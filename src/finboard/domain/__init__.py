"""Domain layer: value objects, ports and domain services."""
