"""
Ordered template matching.

Templates are tried in the order given (registration order) and the first
one whose matcher accepts the path wins. No specificity ranking is applied:
an earlier, broader template shadows a later, narrower one.
"""

from typing import Iterable, List, Optional

from .compiler.compiler import RouteTemplate, RouteMatch


def match_first(templates: Iterable[RouteTemplate], path: str) -> Optional[RouteMatch]:
    """Return the match of the first template accepting ``path``, or None."""
    for template in templates:
        result = template.match(path)
        if result is not None:
            return result
    return None


def match_all(templates: Iterable[RouteTemplate], path: str) -> List[RouteMatch]:
    """Every template accepting ``path``, in order. The first entry is the winner."""
    matches = []
    for template in templates:
        result = template.match(path)
        if result is not None:
            matches.append(result)
    return matches
