"""Infrastructure layer - stores, access policy, output and logging."""
