from .storage import InMemoryStorage

__all__ = [
    "InMemoryStorage",
]
