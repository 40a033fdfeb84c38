"""Base domain layer - ports shared by every component."""
