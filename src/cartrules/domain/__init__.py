"""Domain layer base classes."""
from cartrules.domain.value_object import ValueObject

__all__ = [
    "ValueObject",
]
