"""
Diagnostic errors for route templates.
"""

from typing import List, Optional

from ...faults import PatternInvalidFault
from ..compiler.ast_nodes import Span


class TemplateDiagnostic(PatternInvalidFault):
    """Base class for template compilation diagnostics."""

    def __init__(
        self,
        pattern: str,
        reason: str,
        *,
        span: Optional[Span] = None,
        suggestions: Optional[List[str]] = None,
    ):
        metadata = {"suggestions": list(suggestions or [])}
        if span is not None:
            metadata["span"] = {"start": span.start, "end": span.end, "column": span.column}
        super().__init__(pattern, reason, metadata=metadata)
        self.pattern = pattern
        self.reason = reason
        self.span = span
        self.suggestions = list(suggestions or [])

    def format(self) -> str:
        """Format diagnostic for display."""
        parts = [f"{self.__class__.__name__}: {self.reason}"]

        if self.span:
            parts.append(f"  --> {self.pattern}")
            parts.append("      " + " " * (self.span.column - 1) + "^" * max(1, self.span.end - self.span.start))
        else:
            parts.append(f"  --> {self.pattern}")

        if self.suggestions:
            parts.append("\nSuggestions:")
            for i, suggestion in enumerate(self.suggestions, 1):
                parts.append(f"  {i}) {suggestion}")

        return "\n".join(parts)


class TemplateSyntaxError(TemplateDiagnostic):
    """Malformed placeholder or unknown type discriminator."""
    pass


class TemplateSemanticError(TemplateDiagnostic):
    """Well-formed template that breaks an invariant (e.g. duplicate names)."""
    pass
