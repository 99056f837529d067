"""
Pathwright faults - Core types and fault taxonomy.

Defines:
- Fault base class (structured fault objects)
- FaultDomain (explicit fault domains)
- Severity levels
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


# ============================================================================
# Severity & Domain
# ============================================================================

class Severity(str, Enum):
    """
    Fault severity levels.

    Determines logging level and whether the caller should abort.
    """
    INFO = "info"       # Informational, no action needed
    WARN = "warn"       # Degraded result, should be reviewed
    ERROR = "error"     # Operation failed
    FATAL = "fatal"     # Start-up must abort

    # Aliases
    LOW = INFO
    MEDIUM = WARN
    HIGH = ERROR
    CRITICAL = FATAL


class FaultDomain:
    """
    Fault domains (taxonomy).

    Identifies the functional area where a fault occurred.
    """

    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.value = name  # For compatibility with Enum consumers
        self.description = description

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"FaultDomain(name='{self.name}')"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, FaultDomain):
            return self.name == other.name
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(self.name)


# Standard Domains
FaultDomain.CONFIG = FaultDomain("config", "Configuration errors")
FaultDomain.REGISTRY = FaultDomain("registry", "Route registration errors")
FaultDomain.ROUTING = FaultDomain("routing", "Template compilation and route matching errors")
FaultDomain.GENERATION = FaultDomain("generation", "Reverse URL generation errors")
FaultDomain.IO = FaultDomain("io", "Endpoint lookup on disk")


# Domain defaults
DOMAIN_DEFAULTS = {
    FaultDomain.CONFIG: {"severity": Severity.FATAL, "http_status": 500},
    FaultDomain.REGISTRY: {"severity": Severity.FATAL, "http_status": 500},
    FaultDomain.ROUTING: {"severity": Severity.ERROR, "http_status": 404},
    FaultDomain.GENERATION: {"severity": Severity.WARN, "http_status": 500},
    FaultDomain.IO: {"severity": Severity.WARN, "http_status": 404},
}


# ============================================================================
# Fault - Base Class
# ============================================================================

class Fault(Exception):
    """
    Base fault class - structured, typed fault object.

    A fault is a first-class value with:
    - Stable machine-readable code
    - Human-readable message
    - Severity level
    - Domain classification
    - HTTP status the dispatch layer should answer with
    - Public exposure control

    Faults may be raised (configuration time) or returned as diagnostics
    (generation and dispatch), so callers decide how severe they are.

    Example:
        ```python
        raise Fault(
            code="ROUTE_NOT_FOUND",
            message="No route matches GET /missing",
            domain=FaultDomain.ROUTING,
            public=True,
        )
        ```
    """

    def __init__(
        self,
        code: str | None = None,
        message: str | None = None,
        *,
        domain: FaultDomain | None = None,
        severity: Optional[Severity] = None,
        http_status: Optional[int] = None,
        public: bool = False,
        metadata: Optional[dict[str, Any]] = None,
    ):
        # Fallback to class attributes if not provided
        self.code = code if code is not None else getattr(self, "code", None)
        self.message = message if message is not None else getattr(self, "message", None)
        self.domain = domain if domain is not None else getattr(self, "domain", None)

        if self.code is None or self.message is None or self.domain is None:
            raise TypeError(f"{self.__class__.__name__} missing required code, message, or domain")

        super().__init__(self.message)

        # Default to ERROR/500 for custom domains
        defaults = DOMAIN_DEFAULTS.get(self.domain, {"severity": Severity.ERROR, "http_status": 500})
        self.severity = severity or defaults["severity"]
        self.http_status = http_status if http_status is not None else defaults["http_status"]

        self.public = public
        self.metadata = metadata or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"Fault(code={self.code!r}, domain={self.domain.value}, "
            f"severity={self.severity.value}, public={self.public})"
        )

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize fault to dictionary.

        Returns:
            Dictionary representation suitable for logging/serialization
        """
        return {
            "code": self.code,
            "message": self.message,
            "domain": self.domain.value,
            "severity": self.severity.value,
            "http_status": self.http_status,
            "public": self.public,
            "metadata": self.metadata,
        }
