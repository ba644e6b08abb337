from __future__ import annotations
from typing import Any, Iterator, List, Tuple

def _children(obj: Any) -> List[Tuple[str, Any]]:
    if isinstance(obj, dict):
        return list(obj.items())
    if isinstance(obj, list):
        return [(str(i), v) for i, v in enumerate(obj)]
    return []

def walk_object(obj: Any) -> Iterator[Tuple[str, Any, List[str], Any]]:
    """Depth-first walk yielding (name, value, path, parent) for every key.

    List items are visited with their index as the name, so paths line up
    with what the path resolver expects. Iterative, so nesting depth is not
    bounded by the interpreter's recursion limit.
    """
    stack = [((), obj, iter(_children(obj)))]
    while stack:
        path, parent, items = stack[-1]
        step = next(items, None)
        if step is None:
            stack.pop()
            continue
        name, value = step
        here = path + (name,)
        yield name, value, list(here), parent
        if isinstance(value, (dict, list)):
            stack.append((here, value, iter(_children(value))))
