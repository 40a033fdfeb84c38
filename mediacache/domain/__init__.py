"""Domain layer - value objects, resources and exceptions."""
