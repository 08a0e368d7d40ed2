"""Text patterns of stars, numbers and letters, returned as strings."""

__all__ = ["simple", "medium", "hard", "advanced"]