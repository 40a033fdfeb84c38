"""Version information for the mediacache package."""

__version__ = "1.0.0"
