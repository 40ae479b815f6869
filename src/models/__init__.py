from .base import BaseModel, TimeStamp

__all__ = [
    "BaseModel",
    "TimeStamp",
]
