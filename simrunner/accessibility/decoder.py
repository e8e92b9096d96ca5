# accessibility/decoder.py
from typing import List, Union
from pydantic import TypeAdapter, ValidationError
from ..errors import MalformedTreeError
from ..logger import log
from .element import AccessibilityElement

_FOREST = TypeAdapter(List[AccessibilityElement])

def decode_forest(payload: Union[bytes, str]) -> List[AccessibilityElement]:
    """
    Decode a snapshot payload into a forest of root elements.

    The snapshot source reports either a JSON array of roots or a single root
    object, without any discriminator. The array shape is tried first and a
    single object is wrapped into a one-element forest.
    """
    try:
        roots = _FOREST.validate_json(payload)
        log("DEBUG", "tree_decoded", "Decoded accessibility forest", shape="array", roots=len(roots))
        return roots
    except ValidationError:
        pass

    try:
        root = AccessibilityElement.model_validate_json(payload)
    except ValidationError as e:
        raise MalformedTreeError(
            f"Accessibility snapshot is neither an element nor an array of elements: {e.error_count()} error(s)"
        ) from e
    log("DEBUG", "tree_decoded", "Decoded accessibility forest", shape="object", roots=1)
    return [root]
