"""Application layer - proxies and facades driving the infrastructure."""
