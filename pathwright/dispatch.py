"""
Dispatcher - turns a request line into a routing decision.

The dispatcher does not talk HTTP. It cleans the request URI, resolves
it, decodes the parameters and classifies the endpoint, returning a
``DispatchResult`` the server integration acts on (status code, redirect
target, file to include or serve, handler to call).

Features:
- Request URI cleaning against the configured base URI
- 404 when nothing resolves or a file endpoint is missing
- 400 when a matched parameter cannot be decoded
- Endpoint classification: handler, script (``.py``) or static file
- Content-type detection via mimetypes + custom mappings
"""

from __future__ import annotations

import logging
import mimetypes
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from .config import RouterConfig
from .faults import (
    EndpointNotFoundFault,
    Fault,
    ParameterParseFault,
    RouteNotFoundFault,
)
from .patterns import RouteTemplate
from .routing import Resolver
from .utils.urls import clean_uri, join_paths


logger = logging.getLogger("pathwright.dispatch")

# ─── Custom MIME types beyond stdlib ──────────────────────────────────────────
_EXTRA_MIME_TYPES: Dict[str, str] = {
    ".woff2": "font/woff2",
    ".woff": "font/woff",
    ".ttf": "font/ttf",
    ".otf": "font/otf",
    ".eot": "font/eot",
    ".ico": "image/x-icon",
    ".js": "text/javascript",
    ".7z": "application/x-7z-compressed",
    ".rar": "application/x-rar-compressed",
    ".flv": "video/x-flv",
    ".ics": "text/calendar",
    ".webm": "video/webm",
    ".mp4": "video/mp4",
}

# Ensure stdlib knows these
for _ext, _mime in _EXTRA_MIME_TYPES.items():
    mimetypes.add_type(_mime, _ext)


def detect_content_type(path: str | os.PathLike) -> str:
    """Detect the MIME type of a file from its extension."""
    mime, _ = mimetypes.guess_type(str(path))
    return mime or "application/octet-stream"


class EndpointKind(str, Enum):
    """How the server integration should run an endpoint."""
    HANDLER = "handler"   # call it
    SCRIPT = "script"     # execute/include the Python file
    FILE = "file"         # send the file with its content type


@dataclass(frozen=True)
class DispatchResult:
    """Routing decision for one request."""
    status: int
    method: str
    path: str
    route: Optional[RouteTemplate] = None
    params: Dict[str, Any] = field(default_factory=dict)
    endpoint: Any = None
    kind: Optional[EndpointKind] = None
    content_type: Optional[str] = None
    redirect: Optional[str] = None
    fault: Optional[Fault] = None

    @property
    def ok(self) -> bool:
        return self.status == 200

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "method": self.method,
            "path": self.path,
            "route": self.route.name if self.route else None,
            "params": self.params,
            "endpoint": str(self.endpoint) if self.endpoint is not None else None,
            "kind": self.kind.value if self.kind else None,
            "content_type": self.content_type,
            "redirect": self.redirect,
            "fault": self.fault.to_dict() if self.fault else None,
        }


class Dispatcher:
    """
    Resolves request lines to ``DispatchResult`` objects.

    Usage::

        dispatcher = Dispatcher(Resolver(registry, config))
        result = dispatcher.dispatch("GET", "/users/42?tab=posts")
        if result.ok and result.kind is EndpointKind.HANDLER:
            result.endpoint(**result.params)
    """

    def __init__(self, resolver: Resolver, config: Optional[RouterConfig] = None):
        self.resolver = resolver
        self.config = config or resolver.config

    def clean_uri(self, request_uri: str) -> str:
        return clean_uri(request_uri, self.config.base_uri)

    def dispatch(self, method: str, request_uri: str) -> DispatchResult:
        method = method.upper()
        path = self.clean_uri(request_uri)

        match = self.resolver.resolve_match(method, path)
        if match is None:
            return self._fail(404, method, path, RouteNotFoundFault(path, method), self.config.error_404_route)

        route = match.template
        try:
            params = match.decode()
        except ParameterParseFault as fault:
            logger.warning(f"{fault.message} for route '{route.name}'")
            return self._fail(400, method, path, fault, self.config.error_400_route, route=route)

        endpoint = route.endpoint
        if endpoint is None:
            fault = EndpointNotFoundFault("<none>", route.name)
            logger.warning(fault.message)
            return self._fail(404, method, path, fault, self.config.error_404_route, route=route)

        if not isinstance(endpoint, (str, os.PathLike)):
            return DispatchResult(
                status=200, method=method, path=path, route=route, params=params,
                endpoint=endpoint, kind=EndpointKind.HANDLER,
            )

        file_path = Path(self.config.pages_directory) / endpoint
        if not file_path.is_file():
            fault = EndpointNotFoundFault(str(file_path), route.name)
            logger.warning(fault.message)
            return self._fail(404, method, path, fault, self.config.error_404_route, route=route)

        if file_path.suffix == ".py":
            return DispatchResult(
                status=200, method=method, path=path, route=route, params=params,
                endpoint=file_path, kind=EndpointKind.SCRIPT,
            )

        return DispatchResult(
            status=200, method=method, path=path, route=route, params=params,
            endpoint=file_path, kind=EndpointKind.FILE,
            content_type=detect_content_type(file_path),
        )

    def _fail(
        self,
        status: int,
        method: str,
        path: str,
        fault: Fault,
        redirect: str,
        route: Optional[RouteTemplate] = None,
    ) -> DispatchResult:
        return DispatchResult(
            status=status,
            method=method,
            path=path,
            route=route,
            redirect=redirect or None,
            fault=fault,
        )

    # ------------------------------------------------------------------
    # Helpers for templates and handlers
    # ------------------------------------------------------------------

    def static_file_path(self, path: str) -> str:
        """Public URL of a file inside the static directory."""
        return join_paths(self.config.base_uri, self.config.static_directory_uri, path)

    def called_url(self, request_uri: str) -> str:
        """Absolute URL of the current request."""
        return self.config.app_url + request_uri.lstrip("/")

    def called_route_name(self, method: str, request_uri: str) -> Optional[str]:
        template = self.resolver.resolve(method.upper(), self.clean_uri(request_uri))
        return template.name if template else None
