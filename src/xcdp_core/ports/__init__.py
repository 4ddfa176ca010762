from .storage import IStorage

__all__ = [
    "IStorage",
]
