"""
Pydantic schemas for request validation and response serialization.
"""

from .villains import MAX_IDENTIFIER, MAX_LEVEL, MIN_LEVEL, VillainBase, VillainCreate, VillainUpdate, Villain

__all__ = [
    "MAX_IDENTIFIER",
    "MAX_LEVEL",
    "MIN_LEVEL",
    "VillainBase",
    "VillainCreate",
    "VillainUpdate",
    "Villain",
]
