"""
Compiler that turns a template AST into an executable RouteTemplate.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Pattern, Tuple

from .ast_nodes import TemplateAST, StaticSegment, ParamSegment, BaseSegment
from .parser import parse_template
from ..grammar import SEPARATOR
from ..types import ParameterType, TypedValue
from ...faults import (
    GenerationFault,
    InvalidParameterTypeFault,
    MissingParametersFault,
    ParameterParseFault,
    PatternInvalidFault,
    UnknownParameterFault,
)


logger = logging.getLogger("pathwright.patterns")


@dataclass(frozen=True)
class RouteMatch:
    """A template that accepted a path, with the raw text of each parameter."""
    template: "RouteTemplate"
    raw_params: Dict[str, str]

    def decode(self) -> Dict[str, Any]:
        """Decode the raw parameter text with each parameter's type."""
        return self.template.decode_parameters(self.raw_params)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "route": self.template.name,
            "template": self.template.raw,
            "params": dict(self.raw_params),
        }


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of reverse generation: the path (if any) plus diagnostics."""
    path: Optional[str]
    diagnostics: Tuple[GenerationFault, ...] = ()

    @property
    def ok(self) -> bool:
        return self.path is not None

    @property
    def missing(self) -> Optional[MissingParametersFault]:
        for fault in self.diagnostics:
            if isinstance(fault, MissingParametersFault):
                return fault
        return None


@dataclass(frozen=True, eq=False)
class RouteTemplate:
    """
    Fully compiled route template, immutable once built.

    The matcher has exactly one capture group per parameter, in the order
    the parameters appear in ``raw``.
    """
    raw: str
    name: str
    endpoint: Any
    parameters: Mapping[str, ParameterType]
    segments: Tuple[BaseSegment, ...]
    trailing_slash: bool
    pattern: Pattern = field(repr=False)

    @classmethod
    def compile(cls, raw: str, endpoint: Any = None, name: Optional[str] = None) -> "RouteTemplate":
        return TemplateCompiler().compile(parse_template(raw), endpoint=endpoint, name=name)

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def matcher_pattern(self) -> str:
        """Regex source of the matcher (anchoring is done by ``fullmatch``)."""
        return self.pattern.pattern

    def matches(self, path: str) -> bool:
        return self.pattern.fullmatch(path) is not None

    def match(self, path: str) -> Optional[RouteMatch]:
        found = self.pattern.fullmatch(path)
        if found is None:
            return None
        raw_params = {
            name: found.group(index)
            for index, name in enumerate(self.parameters, start=1)
        }
        return RouteMatch(template=self, raw_params=raw_params)

    def extract_parameters(self, path: str) -> Dict[str, str]:
        """Raw matched text keyed by parameter name; empty if the path does not match."""
        result = self.match(path)
        return result.raw_params if result else {}

    def decode_parameters(self, raw_params: Mapping[str, str]) -> Dict[str, Any]:
        """
        Decode raw parameter text into typed values.

        Raises:
            ParameterParseFault: If a value cannot be parsed for its type.
            MissingParametersFault: If a declared parameter has no raw text.
        """
        missing = [name for name in self.parameters if name not in raw_params]
        if missing:
            raise MissingParametersFault(self.name, missing)

        values: Dict[str, Any] = {}
        for name, param_type in self.parameters.items():
            raw = raw_params[name]
            try:
                values[name] = param_type.decode_from_string(raw)
            except ParameterParseFault as exc:
                raise ParameterParseFault(
                    raw, param_type.label, param_name=name,
                    metadata={"route": self.name},
                ) from exc
        return values

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def build(self, values: Optional[Mapping[str, Any]] = None) -> GenerationResult:
        """
        Substitute typed values into the template.

        Unknown names and wrongly typed values are reported and skipped;
        any declared parameter left without a value makes the path None.
        """
        diagnostics: List[GenerationFault] = []
        rendered: Dict[str, str] = {}

        for name, value in (values or {}).items():
            param_type = self.parameters.get(name)
            if param_type is None:
                diagnostics.append(UnknownParameterFault(name, self.name))
                continue

            actual = value.kind.label if isinstance(value, TypedValue) else type(value).__name__
            if not param_type.is_valid_typed(value):
                diagnostics.append(InvalidParameterTypeFault(name, param_type.label, actual))
                continue

            try:
                text = param_type.encode_for_url(value)
            except ValueError:
                # int beyond the interpreter's str conversion limit
                text = None

            # Negative numbers and empty strings have no matchable form
            if text is None or not param_type.accepts_text(text):
                diagnostics.append(InvalidParameterTypeFault(
                    name, param_type.label, f"{actual} outside the matchable range",
                ))
                continue

            rendered[name] = text

        missing = [name for name in self.parameters if name not in rendered]
        if missing:
            diagnostics.append(MissingParametersFault(self.name, missing))
            return GenerationResult(path=None, diagnostics=tuple(diagnostics))

        return GenerationResult(path=self._render(rendered), diagnostics=tuple(diagnostics))

    def generate(self, values: Optional[Mapping[str, Any]] = None, strict: bool = False) -> str:
        """
        Build a concrete path from typed values.

        In the default lenient mode unknown and mistyped values are logged
        and ignored. With ``strict`` the first diagnostic is raised.

        Raises:
            MissingParametersFault: If a declared parameter has no valid value.
        """
        result = self.build(values)

        for fault in result.diagnostics:
            if strict:
                raise fault
            if not isinstance(fault, MissingParametersFault):
                logger.warning(fault.message)

        if result.path is None:
            raise result.missing

        return result.path

    def _render(self, rendered: Mapping[str, str]) -> str:
        parts = []
        for segment in self.segments:
            if isinstance(segment, ParamSegment):
                parts.append(rendered[segment.name])
            else:
                parts.append(segment.value)

        path = SEPARATOR.join(parts)
        if self.trailing_slash:
            path += SEPARATOR
        return path

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        endpoint = self.endpoint
        if not isinstance(endpoint, (str, type(None))):
            endpoint = getattr(endpoint, "__qualname__", repr(endpoint))

        return {
            "name": self.name,
            "raw": self.raw,
            "endpoint": endpoint,
            "parameters": {name: t.label for name, t in self.parameters.items()},
            "pattern": self.matcher_pattern(),
            "segments": [seg.to_dict() for seg in self.segments],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


class TemplateCompiler:
    """Compiles a template AST into a RouteTemplate."""

    def compile(self, ast: TemplateAST, endpoint: Any = None, name: Optional[str] = None) -> RouteTemplate:
        parameters = {seg.name: seg.param_type for seg in ast.params()}
        pattern = self._compile_regex(ast)

        template = RouteTemplate(
            raw=ast.raw,
            name=name if name is not None else ast.raw,
            endpoint=endpoint,
            parameters=MappingProxyType(parameters),
            segments=tuple(ast.segments),
            trailing_slash=ast.trailing_slash,
            pattern=pattern,
        )
        logger.debug(f"Compiled template '{ast.raw}' -> {pattern.pattern}")
        return template

    def _compile_regex(self, ast: TemplateAST) -> Pattern:
        """
        Compile AST into a regex.

        Literals compare case-insensitively; each type fragment is scoped
        back to case-sensitive matching.
        """
        parts = []
        for segment in ast.segments:
            if isinstance(segment, StaticSegment):
                parts.append(re.escape(segment.value))
            elif isinstance(segment, ParamSegment):
                parts.append(f"((?-i:{segment.param_type.match_fragment()}))")

        regex = re.escape(SEPARATOR).join(parts)
        if ast.trailing_slash:
            regex += re.escape(SEPARATOR) + "?"

        compiled = re.compile(regex, re.IGNORECASE)
        if compiled.groups != len(ast.params()):
            raise PatternInvalidFault(
                ast.raw, f"compiled to {compiled.groups} groups for {len(ast.params())} parameters"
            )
        return compiled


def compile_template(raw: str, endpoint: Any = None, name: Optional[str] = None) -> RouteTemplate:
    """Parse and compile a route template."""
    return RouteTemplate.compile(raw, endpoint=endpoint, name=name)
