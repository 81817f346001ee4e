"""ValueObject — value without identity; equality by fields, immutable."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObject:
    """Value object: equality by all fields (via dataclass), no mutation after creation."""
    pass
