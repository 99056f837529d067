"""
Pathwright - typed route templates for Python web applications.

Complete integration of:
- Patterns: ``/users/{i:id}`` templates compiled to matchers and generators
- Routing: method-keyed registry, first-match resolution, reverse URLs
- Dispatch: request URI cleaning and endpoint classification
- Faults: structured error handling with fault domains
- Config: layered typed configuration (files, .env, environment)
"""

__version__ = "0.1.0"

from .patterns import (
    ParameterType,
    TypedValue,
    RouteTemplate,
    RouteMatch,
    GenerationResult,
    TemplateSyntaxError,
    TemplateSemanticError,
    compile_template,
    parse_template,
)
from .routing import RouteRegistry, Resolver, load_routes
from .config import RouterConfig, ConfigLoader, ConfigError
from .dispatch import Dispatcher, DispatchResult, EndpointKind
from .faults import (
    Fault,
    FaultDomain,
    Severity,
    PatternInvalidFault,
    DuplicateRouteNameFault,
    InvalidMethodFault,
    RegistryFrozenFault,
    UnknownParameterFault,
    InvalidParameterTypeFault,
    MissingParametersFault,
    RouteNameNotFoundFault,
    ParameterParseFault,
    RouteNotFoundFault,
    EndpointNotFoundFault,
    ConfigInvalidFault,
)

__all__ = [
    # Patterns
    "ParameterType",
    "TypedValue",
    "RouteTemplate",
    "RouteMatch",
    "GenerationResult",
    "TemplateSyntaxError",
    "TemplateSemanticError",
    "compile_template",
    "parse_template",
    # Routing
    "RouteRegistry",
    "Resolver",
    "load_routes",
    # Config
    "RouterConfig",
    "ConfigLoader",
    "ConfigError",
    # Dispatch
    "Dispatcher",
    "DispatchResult",
    "EndpointKind",
    # Faults
    "Fault",
    "FaultDomain",
    "Severity",
    "PatternInvalidFault",
    "DuplicateRouteNameFault",
    "InvalidMethodFault",
    "RegistryFrozenFault",
    "UnknownParameterFault",
    "InvalidParameterTypeFault",
    "MissingParametersFault",
    "RouteNameNotFoundFault",
    "ParameterParseFault",
    "RouteNotFoundFault",
    "EndpointNotFoundFault",
    "ConfigInvalidFault",
]
