"""Domain layer - vehicles and exceptions."""
