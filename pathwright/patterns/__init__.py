"""
Route templates - typed path placeholders compiled to matchers and generators.

This module provides:
- A small template grammar: ``/users/{i:id}/posts/{s:slug}``
- A closed set of parameter types with URL encode/decode rules
- Compilation to an anchored matcher with ordered capture groups
- Reverse generation from typed values with structured diagnostics
"""

from .compiler.parser import TemplateParser, parse_template
from .compiler.ast_nodes import (
    TemplateAST,
    StaticSegment,
    ParamSegment,
    Span,
)
from .compiler.compiler import (
    TemplateCompiler,
    RouteTemplate,
    RouteMatch,
    GenerationResult,
    compile_template,
)
from .types import ParameterType, TypedValue
from .diagnostics.errors import (
    TemplateDiagnostic,
    TemplateSyntaxError,
    TemplateSemanticError,
)
from .grammar import SUPPORTED_METHODS
from .matcher import match_first, match_all

__all__ = [
    # Parser
    "TemplateParser",
    "parse_template",
    # AST
    "TemplateAST",
    "StaticSegment",
    "ParamSegment",
    "Span",
    # Compiler
    "TemplateCompiler",
    "RouteTemplate",
    "RouteMatch",
    "GenerationResult",
    "compile_template",
    # Types
    "ParameterType",
    "TypedValue",
    # Diagnostics
    "TemplateDiagnostic",
    "TemplateSyntaxError",
    "TemplateSemanticError",
    # Grammar
    "SUPPORTED_METHODS",
    # Matcher
    "match_first",
    "match_all",
]
