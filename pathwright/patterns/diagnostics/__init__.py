"""Diagnostics package."""

from .errors import (
    TemplateDiagnostic,
    TemplateSyntaxError,
    TemplateSemanticError,
)

__all__ = [
    "TemplateDiagnostic",
    "TemplateSyntaxError",
    "TemplateSemanticError",
]
