"""Query — CQRS read marker."""
from dataclasses import dataclass


@dataclass
class Query:
    """Query: intent to read. One handler per query type."""
    pass
