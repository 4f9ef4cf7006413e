"""Keep a list of installed games, launch them, and check their sources for new versions."""

__version__ = "0.1.0"
__all__ = [
    "cli",
    "console",
    "launcher",
    "library",
    "models",
    "monitor",
    "pathfix",
    "storage",
    "versioning",
]