"""
Pathwright faults - Domain-specific fault types.

Provides concrete fault classes for each domain:
- CONFIG faults
- REGISTRY faults
- ROUTING faults
- GENERATION faults
- IO faults
"""

from typing import Any, Optional
from .core import Fault, FaultDomain, Severity


# ============================================================================
# CONFIG Faults
# ============================================================================

class ConfigFault(Fault):
    """Base class for configuration faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.FATAL,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.CONFIG,
            severity=severity,
            public=False,
            metadata=metadata,
        )


class ConfigInvalidFault(ConfigFault):
    """Configuration value is invalid."""

    def __init__(self, key: str, reason: str, **kwargs):
        super().__init__(
            code="CONFIG_INVALID",
            message=f"Configuration key '{key}' is invalid: {reason}",
            metadata={"key": key, "reason": reason, **kwargs.get("metadata", {})},
        )


# ============================================================================
# REGISTRY Faults
# ============================================================================

class RegistryFault(Fault):
    """Base class for route registration faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.FATAL,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.REGISTRY,
            severity=severity,
            public=False,
            metadata=metadata,
        )


class DuplicateRouteNameFault(RegistryFault):
    """Route name is already registered."""

    def __init__(self, name: str, methods: list[str], **kwargs):
        super().__init__(
            code="ROUTE_NAME_DUPLICATE",
            message=f"Route name '{name}' already registered for {', '.join(methods)}",
            metadata={"name": name, "methods": methods, **kwargs.get("metadata", {})},
        )


class InvalidMethodFault(RegistryFault):
    """HTTP method token is not supported."""

    def __init__(self, method: str, supported: list[str], **kwargs):
        super().__init__(
            code="METHOD_INVALID",
            message=f"Invalid HTTP method '{method}' (supported: {', '.join(supported)})",
            metadata={"method": method, "supported": supported, **kwargs.get("metadata", {})},
        )


class RegistryFrozenFault(RegistryFault):
    """Registration attempted after the registry was frozen."""

    def __init__(self, name: str, **kwargs):
        super().__init__(
            code="REGISTRY_FROZEN",
            message=f"Cannot register route '{name}': registry is frozen",
            metadata={"name": name, **kwargs.get("metadata", {})},
        )


# ============================================================================
# ROUTING Faults
# ============================================================================

class RoutingFault(Fault):
    """Base class for routing faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.ERROR,
        http_status: Optional[int] = None,
        public: bool = True,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.ROUTING,
            severity=severity,
            http_status=http_status,
            public=public,
            metadata=metadata,
        )


class RouteNotFoundFault(RoutingFault):
    """No registered route matches the request."""

    def __init__(self, path: str, method: str, **kwargs):
        super().__init__(
            code="ROUTE_NOT_FOUND",
            message=f"Route not found: {method} {path}",
            http_status=404,
            metadata={"path": path, "method": method, **kwargs.get("metadata", {})},
        )


class PatternInvalidFault(RoutingFault):
    """Route template is invalid."""

    def __init__(self, pattern: str, reason: str, **kwargs):
        super().__init__(
            code="PATTERN_INVALID",
            message=f"Invalid route template '{pattern}': {reason}",
            severity=Severity.FATAL,
            http_status=500,
            public=False,
            metadata={"pattern": pattern, "reason": reason, **kwargs.get("metadata", {})},
        )


class ParameterParseFault(RoutingFault):
    """Matched path text could not be decoded to the parameter's type."""

    def __init__(self, raw: str, expected_type: str, param_name: Optional[str] = None, **kwargs):
        subject = f"parameter '{param_name}'" if param_name else "value"
        super().__init__(
            code="PARAMETER_PARSE_FAILED",
            message=f"Could not parse {subject} with value '{raw}' to type {expected_type}",
            severity=Severity.WARN,
            http_status=400,
            metadata={
                "raw": raw,
                "expected_type": expected_type,
                "param_name": param_name,
                **kwargs.get("metadata", {}),
            },
        )


# ============================================================================
# GENERATION Faults
# ============================================================================

class GenerationFault(Fault):
    """Base class for reverse URL generation faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.WARN,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.GENERATION,
            severity=severity,
            public=False,
            metadata=metadata,
        )


class UnknownParameterFault(GenerationFault):
    """A value was supplied for a parameter the template does not declare."""

    def __init__(self, param_name: str, route: str, **kwargs):
        super().__init__(
            code="PARAMETER_UNKNOWN",
            message=f"Unknown parameter '{param_name}' for route '{route}'",
            metadata={"param_name": param_name, "route": route, **kwargs.get("metadata", {})},
        )


class InvalidParameterTypeFault(GenerationFault):
    """A supplied value does not fit the declared parameter type."""

    def __init__(self, param_name: str, expected_type: str, actual_type: str, **kwargs):
        super().__init__(
            code="PARAMETER_TYPE_INVALID",
            message=(
                f"Invalid parameter type for parameter '{param_name}': "
                f"expected {expected_type}, got {actual_type}"
            ),
            metadata={
                "param_name": param_name,
                "expected_type": expected_type,
                "actual_type": actual_type,
                **kwargs.get("metadata", {}),
            },
        )


class MissingParametersFault(GenerationFault):
    """Declared parameters were left without a value."""

    def __init__(self, route: str, missing: list[str], **kwargs):
        super().__init__(
            code="PARAMETERS_MISSING",
            message=f"Missing parameters for route '{route}': {', '.join(missing)}",
            severity=Severity.ERROR,
            metadata={"route": route, "missing": missing, **kwargs.get("metadata", {})},
        )
        self.missing = missing


class RouteNameNotFoundFault(GenerationFault):
    """No registered route carries the requested name."""

    def __init__(self, name: str, **kwargs):
        super().__init__(
            code="ROUTE_NAME_NOT_FOUND",
            message=f"No route registered with name '{name}'",
            metadata={"name": name, **kwargs.get("metadata", {})},
        )


# ============================================================================
# IO Faults
# ============================================================================

class EndpointNotFoundFault(Fault):
    """The file a route points to does not exist."""

    def __init__(self, endpoint: str, route: str, **kwargs):
        super().__init__(
            code="ENDPOINT_NOT_FOUND",
            message=f"Could not find file '{endpoint}' for route '{route}'",
            domain=FaultDomain.IO,
            http_status=404,
            public=False,
            metadata={"endpoint": endpoint, "route": route, **kwargs.get("metadata", {})},
        )
