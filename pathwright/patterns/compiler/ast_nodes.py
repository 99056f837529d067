"""
AST node definitions for route templates.

These nodes represent the parsed structure of a template: an ordered list
of literal and parameter segments between separators.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from enum import Enum

from ..types import ParameterType


class SegmentKind(str, Enum):
    """Kind of path segment."""
    STATIC = "static"
    PARAM = "param"


@dataclass
class Span:
    """Source span for diagnostics (columns are 1-based)."""
    start: int
    end: int
    line: int = 1
    column: int = 1

    def __repr__(self) -> str:
        return f"Line {self.line}:{self.column} (pos {self.start}-{self.end})"


@dataclass
class BaseSegment:
    """Base class for all segments."""
    kind: SegmentKind = field(default=SegmentKind.STATIC, init=False)
    span: Optional[Span] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value}


@dataclass
class StaticSegment(BaseSegment):
    """Literal text segment."""
    value: str = ""

    def __post_init__(self):
        self.kind = SegmentKind.STATIC

    def to_dict(self) -> Dict[str, Any]:
        return {
            **super().to_dict(),
            "value": self.value,
        }


@dataclass
class ParamSegment(BaseSegment):
    """Typed placeholder segment ``{<type>:<name>}``."""
    name: str = ""
    param_type: ParameterType = ParameterType.STRING

    def __post_init__(self):
        self.kind = SegmentKind.PARAM

    @property
    def placeholder(self) -> str:
        return f"{{{self.param_type.value}:{self.name}}}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            **super().to_dict(),
            "name": self.name,
            "type": self.param_type.label,
        }


@dataclass
class TemplateAST:
    """Complete AST for a route template."""
    raw: str
    segments: List[BaseSegment] = field(default_factory=list)
    trailing_slash: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "raw": self.raw,
            "segments": [s.to_dict() for s in self.segments],
            "trailing_slash": self.trailing_slash,
        }

    def params(self) -> List[ParamSegment]:
        """Parameter segments in left-to-right order."""
        return [seg for seg in self.segments if isinstance(seg, ParamSegment)]

    def get_param_names(self) -> List[str]:
        return [seg.name for seg in self.params()]
