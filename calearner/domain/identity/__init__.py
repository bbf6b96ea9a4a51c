"""Identity domain module."""

from .entities.user import Identity

__all__ = ["Identity"]
