"""Compiler package for route templates."""

from .parser import TemplateParser, parse_template
from .ast_nodes import *
from .compiler import (
    TemplateCompiler,
    RouteTemplate,
    RouteMatch,
    GenerationResult,
    compile_template,
)

__all__ = [
    "TemplateParser",
    "parse_template",
    "TemplateCompiler",
    "RouteTemplate",
    "RouteMatch",
    "GenerationResult",
    "compile_template",
]
