from . import health, search  # noqa: F401

__all__ = [
    "health",
    "search",
]
