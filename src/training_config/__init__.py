"""Training configuration management package."""

__all__ = [
    "config",
    "core",
    "storage",
]
