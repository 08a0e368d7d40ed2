"""Small programming drills: arrays, conversions, problems, sorting and patterns."""

__version__ = "0.1.0"
__all__ = ["arrays", "conversion", "problems", "sorting", "patterns"]