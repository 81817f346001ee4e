from cartrules.ddd.domain_module import DomainModule
from cartrules.ddd.queries import Query

__all__ = ["DomainModule", "Query"]
