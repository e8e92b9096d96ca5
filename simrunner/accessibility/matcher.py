# accessibility/matcher.py
from enum import Enum
from typing import Iterable, List, Optional
from ..errors import AmbiguousMatchError, NoMatchError
from .element import AccessibilityElement

class QueryKind(str, Enum):
    IDENTIFIER = "identifier"
    LABEL = "label"

    def __str__(self) -> str:
        return self.value

def flatten(forest: Iterable[AccessibilityElement]) -> List[AccessibilityElement]:
    """
    Pre-order walk of every root, roots in the order given.
    Each node appears exactly once.
    """
    result: List[AccessibilityElement] = []
    stack = list(reversed(list(forest)))
    while stack:
        node = stack.pop()
        result.append(node)
        if node.children:
            stack.extend(reversed(node.children))
    return result

def _field(element: AccessibilityElement, kind: QueryKind) -> Optional[str]:
    if kind is QueryKind.IDENTIFIER:
        return element.normalized_identifier
    return element.normalized_label

def find_matches(elements: Iterable[AccessibilityElement], kind: QueryKind, value: str) -> List[AccessibilityElement]:
    query = value.strip()
    return [el for el in elements if _field(el, kind) == query]

def match(elements: Iterable[AccessibilityElement], kind: QueryKind, value: str) -> AccessibilityElement:
    """
    Resolve a query to exactly one element. Exact, case-sensitive comparison
    on the normalized field; zero or several matches are errors.
    """
    matches = find_matches(elements, kind, value)
    if not matches:
        raise NoMatchError(kind, value)
    if len(matches) > 1:
        raise AmbiguousMatchError(kind, value, len(matches), matches)
    return matches[0]
