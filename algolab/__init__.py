"""Classic introductory algorithms: basics, maths, recursion, sorting, hashing, containers and patterns."""

__version__ = "0.1.0"
__all__ = ["basics", "containers", "hashing", "maths", "patterns", "recursion", "sorting"]