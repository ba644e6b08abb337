# -*- coding: utf-8 -*-
"""
Map a JSON-LD validator path back onto a line of the pretty-printed original.

Validator paths are written against the *expanded* document but use short
property names, e.g. `/author/0/name`. The original document may instead key
the property by a full IRI (`http://schema.org/author`) and may hold a single
object where expansion produced a one-element array.

Rather than tracking source positions while parsing, we drop a unique
sentinel string at the addressed value, pretty-print the document and look
for the line containing it. Line numbers therefore refer to `pretty_print()`
output (2-space indent), not to the user's own formatting.
"""
from __future__ import annotations
import json, uuid
from typing import Any, Iterator, List, Optional, Tuple

from .errors import PathNotFoundError
from .io import clone_json

INDENT = 2

def relative_name(key: str) -> str:
    """`http://schema.org/author` -> `author`; keys without a slash are returned as-is."""
    return key.rsplit("/", 1)[-1]

def split_path(path: str) -> List[str]:
    return [p for p in path.split("/") if p]

def pretty_print(doc: Any) -> str:
    return json.dumps(doc, indent=INDENT, ensure_ascii=False)

def _entries(node: Any) -> Iterator[Tuple[Any, str]]:
    """Yield (container key, string key) pairs in document order."""
    if isinstance(node, dict):
        for key in node:
            yield key, key
    elif isinstance(node, list):
        for i in range(len(node)):
            yield i, str(i)

def set_value_at_path(doc: Any, path: str, value: Any) -> None:
    """Overwrite the value addressed by `path` in place.

    A `0` segment that meets a non-list is treated as an array wrapper added
    by expansion and skipped. Raises PathNotFoundError when a segment matches
    no key.
    """
    parts = split_path(path)
    cursor = doc
    for i, part in enumerate(parts):
        if part == "0" and not isinstance(cursor, list):
            continue
        for key, name in _entries(cursor):
            if relative_name(name) == part:
                break
        else:
            raise PathNotFoundError(part, path)
        if i == len(parts) - 1:
            cursor[key] = value
        else:
            cursor = cursor[key]

def resolve_line_number(doc: Any, path: str) -> Optional[int]:
    """1-based line of `path`'s value in `pretty_print(doc)`, or None.

    `doc` is not modified. Raises PathNotFoundError when the path does not
    exist in `doc`.
    """
    marker = uuid.uuid4().hex
    scratch = clone_json(doc)
    set_value_at_path(scratch, path, marker)
    for lineno, line in enumerate(pretty_print(scratch).splitlines(), 1):
        if marker in line:
            return lineno
    return None

def candidate_paths(doc: Any, path: str) -> List[str]:
    """`path` plus the spellings it may have in the original document.

    Expansion lifts the nodes of a top-level `@graph` to the document root and
    unwraps a one-node result, so a node index may be missing from `path`
    (single node) or may stand in for `@graph/N`.
    """
    out = [path]
    parts = split_path(path)
    lead = parts[0] if parts else None
    if isinstance(doc, dict) and isinstance(doc.get("@graph"), list):
        if lead is not None and lead.isdigit():
            out.append("/@graph/" + "/".join(parts))
        else:
            out.append("/@graph/0/" + "/".join(parts))
    elif isinstance(doc, list) and len(doc) == 1 and not (lead or "").isdigit():
        out.append("/0/" + "/".join(parts))
    return out

def locate_line_number(doc: Any, path: str) -> Optional[int]:
    """resolve_line_number over `candidate_paths`; raises the first miss if none resolve."""
    first_miss: Optional[PathNotFoundError] = None
    for candidate in candidate_paths(doc, path):
        try:
            return resolve_line_number(doc, candidate)
        except PathNotFoundError as e:
            first_miss = first_miss or e
    raise first_miss
