"""
Route registry - compiled templates keyed by HTTP method and by name.

Populated once during application start-up, then read-only. Names are
unique across the whole registry, whatever methods they were registered
for.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Union

from ..faults import (
    DuplicateRouteNameFault,
    InvalidMethodFault,
    RegistryFrozenFault,
    ConfigInvalidFault,
)
from ..patterns import RouteTemplate, compile_template, SUPPORTED_METHODS
from ..patterns.grammar import METHOD_SEPARATOR


logger = logging.getLogger("pathwright.routing")

_EMPTY: Mapping[str, RouteTemplate] = MappingProxyType({})


def normalize_methods(methods: Union[str, Iterable[str]]) -> List[str]:
    """
    Upper-case and validate HTTP method tokens.

    Accepts an iterable of tokens or a single ``"GET|POST"`` string.

    Raises:
        InvalidMethodFault: If a token is not a supported method.
    """
    if isinstance(methods, str):
        methods = methods.split(METHOD_SEPARATOR)

    normalized: List[str] = []
    for method in methods:
        if not isinstance(method, str):
            raise InvalidMethodFault(str(method), list(SUPPORTED_METHODS))
        token = method.strip().upper()
        if token not in SUPPORTED_METHODS:
            raise InvalidMethodFault(token, list(SUPPORTED_METHODS))
        if token not in normalized:
            normalized.append(token)

    if not normalized:
        raise InvalidMethodFault("", list(SUPPORTED_METHODS))
    return normalized


class RouteRegistry:
    """
    Stores compiled route templates by method and name.

    Usage::

        registry = RouteRegistry()
        registry.register("GET", "/users/{i:id}", "users/show.py", "user_show")
        registry.freeze()
        registry.routes_for_method("GET")["user_show"]
    """

    def __init__(self):
        self._routes: Dict[str, Dict[str, RouteTemplate]] = {}
        self._templates: Dict[str, RouteTemplate] = {}
        self._frozen = False

    def register(
        self,
        methods: Union[str, Iterable[str]],
        raw: str,
        endpoint: Any,
        name: str,
    ) -> RouteTemplate:
        """
        Compile a template and store it under every requested method.

        All checks run before anything is stored, so a failed call leaves
        the registry unchanged.

        Raises:
            RegistryFrozenFault: If the registry was frozen.
            DuplicateRouteNameFault: If ``name`` is already registered.
            InvalidMethodFault: If a method is not supported.
            PatternInvalidFault: If the template does not compile.
        """
        if self._frozen:
            raise RegistryFrozenFault(name)

        if name in self._templates:
            raise DuplicateRouteNameFault(name, self.methods_for(name))

        method_list = normalize_methods(methods)
        template = compile_template(raw, endpoint=endpoint, name=name)

        for method in method_list:
            self._routes.setdefault(method, {})[name] = template
        self._templates[name] = template

        logger.debug(f"Registered route '{name}' {'|'.join(method_list)} {raw}")
        return template

    def routes_for_method(self, method: str) -> Mapping[str, RouteTemplate]:
        """Read-only view of the routes for ``method``, in registration order."""
        routes = self._routes.get(method.upper())
        if routes is None:
            return _EMPTY
        return MappingProxyType(routes)

    def find(self, name: str) -> Optional[RouteTemplate]:
        return self._templates.get(name)

    def methods_for(self, name: str) -> List[str]:
        return [method for method, routes in self._routes.items() if name in routes]

    def methods(self) -> List[str]:
        return list(self._routes)

    def names(self) -> List[str]:
        return list(self._templates)

    def freeze(self):
        """Refuse further registrations."""
        self._frozen = True
        logger.debug(f"Registry frozen with {len(self._templates)} routes")

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __iter__(self) -> Iterator[RouteTemplate]:
        return iter(self._templates.values())

    def __repr__(self) -> str:
        return f"RouteRegistry(routes={len(self)}, frozen={self._frozen})"


# ============================================================================
# Route tables
# ============================================================================

def read_route_table(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a YAML or JSON route table from disk."""
    path = Path(path)
    if not path.exists():
        raise ConfigInvalidFault(str(path), "route table file does not exist")

    import yaml

    try:
        with open(path) as f:
            if path.suffix == ".json":
                table = json.load(f) or {}
            else:
                table = yaml.safe_load(f) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigInvalidFault(str(path), f"route table could not be parsed: {exc}") from exc

    if not isinstance(table, dict):
        raise ConfigInvalidFault(str(path), "route table must be a mapping with a 'routes' list")
    return table


def load_routes(
    registry: RouteRegistry,
    source: Union[str, Path, Mapping[str, Any]],
) -> List[RouteTemplate]:
    """
    Register every route of a route table.

    The table is a mapping with a ``routes`` list; each entry has ``name``,
    ``methods`` (list or ``"GET|POST"``), ``template`` and ``endpoint``.

    Raises:
        ConfigInvalidFault: If the table or an entry is malformed.
        Any registration fault raised by ``RouteRegistry.register``.
    """
    if isinstance(source, (str, Path)):
        table = read_route_table(source)
    elif isinstance(source, Mapping):
        table = source
    else:
        raise ConfigInvalidFault("routes", "route table must be a mapping with a 'routes' list")

    entries = table.get("routes") or []
    if not isinstance(entries, list):
        raise ConfigInvalidFault("routes", "expected a list of route entries")

    registered = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise ConfigInvalidFault(f"routes[{index}]", "expected a mapping")
        for key in ("name", "template"):
            if key not in entry:
                raise ConfigInvalidFault(f"routes[{index}].{key}", "required key is missing")
            if not isinstance(entry[key], str):
                raise ConfigInvalidFault(f"routes[{index}].{key}", "expected a string")

        methods = entry.get("methods", "GET")
        if not isinstance(methods, (str, list, tuple)):
            raise ConfigInvalidFault(f"routes[{index}].methods", "expected a method string or a list of methods")

        registered.append(registry.register(
            methods,
            entry["template"],
            entry.get("endpoint"),
            entry["name"],
        ))

    logger.debug(f"Loaded {len(registered)} routes")
    return registered
