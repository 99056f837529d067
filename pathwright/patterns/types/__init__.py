"""Parameter types package."""

from .parameter import ParameterType, TypedValue, Scalar

__all__ = [
    "ParameterType",
    "TypedValue",
    "Scalar",
]
