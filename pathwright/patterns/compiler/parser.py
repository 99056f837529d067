"""
Parser for route templates.

Splits a template on the path separator and classifies each segment as a
literal or a typed placeholder, tracking spans for diagnostics.
"""

from typing import Dict, List, Optional

from .ast_nodes import (
    TemplateAST,
    StaticSegment,
    ParamSegment,
    BaseSegment,
    Span,
)
from ..diagnostics.errors import TemplateSyntaxError, TemplateSemanticError
from ..grammar import PLACEHOLDER_RE, NAME_RE, SEPARATOR
from ..types import ParameterType


class TemplateParser:
    """Parser for route templates following the grammar in ``grammar.py``."""

    def __init__(self, source: str):
        self.source = source

    def error(self, message: str, span: Span, suggestions: Optional[List[str]] = None) -> TemplateSyntaxError:
        """Create syntax error for a segment."""
        return TemplateSyntaxError(self.source, message, span=span, suggestions=suggestions)

    def parse(self) -> TemplateAST:
        """Parse the template into an AST."""
        raw = self.source
        trailing_slash = raw.endswith(SEPARATOR)
        body = raw[:-1] if trailing_slash else raw

        segments: List[BaseSegment] = []
        seen: Dict[str, Span] = {}
        pos = 0

        for part in body.split(SEPARATOR):
            span = Span(pos, pos + len(part), 1, pos + 1)
            pos += len(part) + 1

            segment = self.parse_segment(part, span)
            if isinstance(segment, ParamSegment):
                if segment.name in seen:
                    raise TemplateSemanticError(
                        raw,
                        f"Duplicate parameter name '{segment.name}'",
                        span=span,
                        suggestions=[
                            f"Rename one of the '{segment.name}' placeholders "
                            f"(first declared at column {seen[segment.name].column})",
                        ],
                    )
                seen[segment.name] = span
            segments.append(segment)

        return TemplateAST(raw=raw, segments=segments, trailing_slash=trailing_slash)

    def parse_segment(self, part: str, span: Span) -> BaseSegment:
        """Parse a single segment between separators."""
        match = PLACEHOLDER_RE.fullmatch(part)
        if match is None:
            if "{" in part or "}" in part:
                raise self.error(
                    f"Malformed placeholder '{part}'",
                    span,
                    suggestions=[
                        "Placeholders fill a whole segment: {<type>:<name>}",
                        f"<type> is one of {', '.join(ParameterType.discriminators())}",
                    ],
                )
            return StaticSegment(value=part, span=span)

        code = match.group("type")
        name = match.group("name")

        param_type = ParameterType.from_discriminator(code)
        if param_type is None:
            raise self.error(
                f"Unknown parameter type '{code}'",
                span,
                suggestions=[
                    f"{member.value} ({member.label})" for member in ParameterType
                ],
            )

        if not NAME_RE.fullmatch(name):
            raise self.error(
                f"Invalid parameter name '{name}'",
                span,
                suggestions=["Parameter names use letters and digits only: [A-Za-z0-9]+"],
            )

        return ParamSegment(name=name, param_type=param_type, span=span)


def parse_template(source: str) -> TemplateAST:
    """Parse a route template into an AST."""
    return TemplateParser(source).parse()
