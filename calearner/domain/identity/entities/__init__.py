from .user import Identity

__all__ = ["Identity"]
