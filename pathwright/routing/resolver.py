"""
Resolver - (method, path) to route, and route name back to a URL.
"""

import logging
from typing import Any, Mapping, Optional

from ..config import RouterConfig
from ..faults import GenerationFault, RouteNameNotFoundFault
from ..patterns import RouteTemplate, RouteMatch, match_first
from .registry import RouteRegistry


logger = logging.getLogger("pathwright.routing")


class Resolver:
    """
    Resolves requests against a registry and reverse-generates URLs.

    Resolution is first-match-wins in registration order. Reverse
    generation never raises unless ``strict_generation`` is configured: a
    failure degrades to the base URL and is logged.
    """

    def __init__(self, registry: RouteRegistry, config: Optional[RouterConfig] = None):
        self.registry = registry
        self.config = config or RouterConfig()

    def resolve(self, method: str, path: str) -> Optional[RouteTemplate]:
        """First template registered for ``method`` that matches ``path``."""
        result = self.resolve_match(method, path)
        return result.template if result else None

    def resolve_match(self, method: str, path: str) -> Optional[RouteMatch]:
        """Like ``resolve`` but keeps the raw parameter text."""
        routes = self.registry.routes_for_method(method)
        return match_first(routes.values(), path)

    def find_by_name(self, name: str) -> Optional[RouteTemplate]:
        """Scan every method's routes for ``name``; the first hit wins."""
        for method in self.registry.methods():
            template = self.registry.routes_for_method(method).get(name)
            if template is not None:
                return template
        return None

    def url_prefix(self, with_host: bool = False) -> str:
        if with_host and self.config.app_url:
            return self.config.app_url.rstrip("/") + self.config.base_uri
        return self.config.base_uri

    def reverse_generate(
        self,
        name: str,
        values: Optional[Mapping[str, Any]] = None,
        with_host: bool = False,
    ) -> str:
        """
        Build the URL of a named route.

        Returns ``[app_url] + base_uri + path``. When the name is unknown or
        generation fails the bare ``[app_url] + base_uri`` is returned.
        """
        prefix = self.url_prefix(with_host)
        strict = self.config.strict_generation

        template = self.find_by_name(name)
        if template is None:
            fault = RouteNameNotFoundFault(name)
            if strict:
                raise fault
            logger.warning(fault.message)
            return prefix

        try:
            path = template.generate(values, strict=strict)
        except GenerationFault as fault:
            if strict:
                raise
            logger.warning(fault.message)
            return prefix

        return prefix + path.lstrip("/")
