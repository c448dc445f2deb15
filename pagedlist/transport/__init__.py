"""Page resolvers: HTTP, mapping and callable backed."""

from pagedlist.transport.http_resolver import HttpPageResolver
from pagedlist.transport.callable_resolver import CallableResolver, MappingResolver

__all__ = [
    "HttpPageResolver",
    "CallableResolver",
    "MappingResolver",
]
