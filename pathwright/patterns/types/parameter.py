"""
Parameter types and typed values for route placeholders.

A placeholder ``{i:id}`` names its type with a one-character
discriminator. Each type owns how it is matched in a path, which Python
values it accepts for generation, and how it is encoded into and decoded
from a URL segment.
"""

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union
from urllib.parse import quote, unquote

from ...faults import ParameterParseFault


Scalar = Union[bool, int, float, str]

_BOOLEAN_STRINGS = {
    "1": True, "true": True, "yes": True, "on": True,
    "0": False, "false": False, "no": False, "off": False,
}

_INTEGER_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class ParameterType(str, Enum):
    """Closed set of placeholder types, valued by their discriminator."""
    BOOLEAN = "b"
    FLOAT = "f"
    INTEGER = "i"
    STRING = "s"

    @classmethod
    def from_discriminator(cls, code: str) -> Optional["ParameterType"]:
        """Map a discriminator (``b``, ``f``, ``i``, ``s``) to its type, or None."""
        try:
            return cls(code)
        except ValueError:
            return None

    @classmethod
    def discriminators(cls) -> str:
        return "".join(member.value for member in cls)

    @property
    def label(self) -> str:
        """Human readable type name used in diagnostics."""
        return self.name.lower()

    def match_fragment(self) -> str:
        """Regex fragment accepting the textual form of this type.

        Fragments never contain capturing groups; the compiler wraps each
        one in exactly one group.
        """
        if self is ParameterType.BOOLEAN:
            return r"true|false"
        if self is ParameterType.FLOAT:
            return r"\d+(?:\.\d+)?"
        if self is ParameterType.INTEGER:
            return r"\d+"
        return r"(?:[A-Za-z0-9._~\-]|%[0-9A-Fa-f]{2})+"

    def is_valid_typed(self, value: Any) -> bool:
        """Check that an in-memory value can fill a placeholder of this type."""
        if isinstance(value, TypedValue):
            return value.kind is self
        return _accepts(self, value)

    def accepts_text(self, text: str) -> bool:
        """True if ``text`` is matched by this type's fragment."""
        return re.fullmatch(self.match_fragment(), text) is not None

    def encode_for_url(self, value: Any) -> str:
        """Render a valid typed value as URL-safe path text."""
        if isinstance(value, TypedValue):
            value = value.value

        if self is ParameterType.BOOLEAN:
            return "true" if value else "false"
        if self is ParameterType.INTEGER:
            return str(value)
        if self is ParameterType.FLOAT:
            # Positional notation only; the matcher has no exponent syntax
            return format(Decimal(repr(value)), "f")
        return quote(value, safe="")

    def decode_from_string(self, raw: str) -> Scalar:
        """
        Parse matched path text into a typed value.

        Raises:
            ParameterParseFault: If the text is not a valid representation.
        """
        if self is ParameterType.BOOLEAN:
            parsed = _BOOLEAN_STRINGS.get(raw.lower())
            if parsed is None:
                raise ParameterParseFault(raw, self.label)
            return parsed

        if self is ParameterType.INTEGER:
            if not _INTEGER_RE.fullmatch(raw):
                raise ParameterParseFault(raw, self.label)
            try:
                return int(raw)
            except ValueError:
                # Longer than the interpreter's int string conversion limit
                raise ParameterParseFault(raw[:32] + "...", self.label)

        if self is ParameterType.FLOAT:
            if not _FLOAT_RE.fullmatch(raw):
                raise ParameterParseFault(raw, self.label)
            parsed = float(raw)
            if not math.isfinite(parsed):
                raise ParameterParseFault(raw, self.label)
            return parsed

        return unquote(raw)


def _accepts(kind: ParameterType, value: Any) -> bool:
    if kind is ParameterType.BOOLEAN:
        return isinstance(value, bool)
    if kind is ParameterType.INTEGER:
        return isinstance(value, int) and not isinstance(value, bool)
    if kind is ParameterType.FLOAT:
        return isinstance(value, float) and math.isfinite(value)
    return isinstance(value, str)


@dataclass(frozen=True)
class TypedValue:
    """
    A value tagged with the parameter type it is meant for.

    Generation accepts plain Python values too; a ``TypedValue`` makes the
    intended type explicit so validation is a tag comparison.
    """
    kind: ParameterType
    value: Scalar

    def __post_init__(self):
        if not _accepts(self.kind, self.value):
            raise TypeError(
                f"{type(self.value).__name__} value {self.value!r} "
                f"is not a valid {self.kind.label}"
            )

    @classmethod
    def boolean(cls, value: bool) -> "TypedValue":
        return cls(ParameterType.BOOLEAN, value)

    @classmethod
    def floating(cls, value: float) -> "TypedValue":
        return cls(ParameterType.FLOAT, value)

    @classmethod
    def integer(cls, value: int) -> "TypedValue":
        return cls(ParameterType.INTEGER, value)

    @classmethod
    def string(cls, value: str) -> "TypedValue":
        return cls(ParameterType.STRING, value)

    @classmethod
    def of(cls, value: Scalar) -> "TypedValue":
        """Tag a plain Python value with the type it structurally belongs to."""
        # bool before int: bool is an int subclass
        for kind in (ParameterType.BOOLEAN, ParameterType.INTEGER,
                     ParameterType.FLOAT, ParameterType.STRING):
            if _accepts(kind, value):
                return cls(kind, value)
        raise TypeError(f"No parameter type accepts {type(value).__name__} value {value!r}")
