# -*- coding: utf-8 -*-
"""
Schema.org conformance check over an expanded JSON-LD document.

Every node that declares `@type` must use known Schema.org types, and every
Schema.org property on it must be defined by one of those types or their
ancestors. Paths in the reported problems use short names (the schema.org
prefix is stripped per segment) so they can be resolved against the original,
unexpanded document.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

from .vocabulary import Vocabulary, load_vocabulary
from .walk import walk_object

SCHEMA_ORG_PREFIXES = ("http://schema.org/", "https://schema.org/")
TYPE_KEYWORD = "@type"

@dataclass(frozen=True)
class SchemaProblem:
    message: str
    path: Optional[str] = None
    invalid_types: Tuple[str, ...] = ()

def clean_name(name: str) -> str:
    for prefix in SCHEMA_ORG_PREFIXES:
        if name.startswith(prefix):
            return name[len(prefix):]
    return name

def _type_problems(types: Sequence[str], keys: Sequence[str], vocab: Vocabulary) -> List[Tuple[str, str, Tuple[str, ...]]]:
    """(key, message, invalid types) for a single node."""
    names = [clean_name(t) for t in types]
    unknown = tuple(n for n in names if not vocab.has_type(n))
    if unknown:
        plural = "s" if len(unknown) > 1 else ""
        return [(TYPE_KEYWORD, f"Unrecognized schema.org type{plural}: {', '.join(unknown)}", unknown)]

    allowed = set()
    for n in names:
        allowed |= vocab.properties_for(n)
    out = []
    for key in keys:
        if not key.startswith(SCHEMA_ORG_PREFIXES):
            continue
        prop = clean_name(key)
        if prop not in allowed:
            out.append((prop, f"Unexpected property \"{prop}\"", ()))
    return out

def validate_schema_org(expanded: Any, vocabulary: Optional[Vocabulary] = None) -> List[SchemaProblem]:
    vocab = vocabulary or load_vocabulary()
    errs: List[SchemaProblem] = []
    if expanded is None:
        return errs
    if isinstance(expanded, list) and len(expanded) == 1:
        expanded = expanded[0]

    for name, value, path, node in walk_object(expanded):
        if name != TYPE_KEYWORD or not isinstance(node, dict) or "@value" in node:
            continue
        types = value if isinstance(value, list) else [value]
        for key, message, invalid in _type_problems([t for t in types if isinstance(t, str)], list(node), vocab):
            # drop the trailing @type: the problem belongs to the node
            parts = [clean_name(p) for p in path[:-1]] + [key]
            errs.append(SchemaProblem(message=message, path="/" + "/".join(parts), invalid_types=invalid))
    return errs
