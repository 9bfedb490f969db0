"""Domain layer - Entities, value objects and services for key hygiene."""
