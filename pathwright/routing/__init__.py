"""
Routing - route registry and resolver.

Routes are registered during start-up, then the registry is frozen and
shared read-only by every request.
"""

from .registry import RouteRegistry, load_routes, read_route_table, normalize_methods
from .resolver import Resolver

__all__ = [
    "RouteRegistry",
    "Resolver",
    "load_routes",
    "read_route_table",
    "normalize_methods",
]
