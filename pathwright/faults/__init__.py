"""
Pathwright faults - typed fault signals.

Every failure the router can report is a ``Fault``: a structured exception
with a stable code, a domain, a severity and the HTTP status the dispatch
layer should answer with. Configuration-time faults are raised; request-time
and generation-time faults are returned or logged so the caller decides.

Core exports:
- Fault: Base fault class
- FaultDomain: Domain enumeration
- Severity: Severity levels
"""

from .core import (
    Fault,
    FaultDomain,
    Severity,
    DOMAIN_DEFAULTS,
)

from .domains import (
    ConfigFault,
    ConfigInvalidFault,
    RegistryFault,
    DuplicateRouteNameFault,
    InvalidMethodFault,
    RegistryFrozenFault,
    RoutingFault,
    RouteNotFoundFault,
    PatternInvalidFault,
    ParameterParseFault,
    GenerationFault,
    UnknownParameterFault,
    InvalidParameterTypeFault,
    MissingParametersFault,
    RouteNameNotFoundFault,
    EndpointNotFoundFault,
)

__all__ = [
    # Core types
    "Fault",
    "FaultDomain",
    "Severity",
    "DOMAIN_DEFAULTS",

    # Config
    "ConfigFault",
    "ConfigInvalidFault",

    # Registry
    "RegistryFault",
    "DuplicateRouteNameFault",
    "InvalidMethodFault",
    "RegistryFrozenFault",

    # Routing
    "RoutingFault",
    "RouteNotFoundFault",
    "PatternInvalidFault",
    "ParameterParseFault",

    # Generation
    "GenerationFault",
    "UnknownParameterFault",
    "InvalidParameterTypeFault",
    "MissingParametersFault",
    "RouteNameNotFoundFault",

    # IO
    "EndpointNotFoundFault",
]
