# -*- coding: utf-8 -*-
"""
Schema.org vocabulary loading.

The vocabulary is a YAML file of the form

  version: "..."
  types:
    Thing:
      properties: [name, url, ...]
    CreativeWork:
      parents: [Thing]
      properties: [author, ...]

It is checked against a JSON Schema and for dangling parent references before
use. Properties are inherited from every ancestor type.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional

import yaml
from jsonschema import Draft202012Validator

from ..config import DEFAULT_VOCABULARY
from ..errors import VocabularyError

_VOCABULARY_SCHEMA: Dict[str, Any] = {
  "title": "Schema.org vocabulary subset",
  "type": "object",
  "required": ["types"],
  "additionalProperties": False,
  "properties": {
    "version": {"type": "string"},
    "types": {
      "type": "object",
      "minProperties": 1,
      "propertyNames": {"pattern": "^[A-Za-z][A-Za-z0-9_]*$"},
      "additionalProperties": {"$ref": "#/$defs/type"}
    }
  },
  "$defs": {
    "type": {
      "type": ["object", "null"],
      "additionalProperties": False,
      "properties": {
        "parents": {"type": "array", "items": {"type": "string"}, "uniqueItems": True},
        "properties": {"type": "array", "items": {"type": "string"}, "uniqueItems": True}
      }
    }
  }
}

@dataclass
class Vocabulary:
    parents: Dict[str, List[str]]
    own_properties: Dict[str, FrozenSet[str]]
    version: Optional[str] = None
    _inherited: Dict[str, FrozenSet[str]] = field(default_factory=dict, repr=False)

    def has_type(self, name: str) -> bool:
        return name in self.parents

    def ancestors(self, name: str) -> List[str]:
        """`name` followed by all of its ancestors, each listed once."""
        seen: List[str] = []
        stack = [name]
        while stack:
            cur = stack.pop()
            if cur in seen:
                continue
            seen.append(cur)
            stack.extend(reversed(self.parents.get(cur, [])))
        return seen

    def properties_for(self, name: str) -> FrozenSet[str]:
        if name not in self._inherited:
            props = set()
            for t in self.ancestors(name):
                props |= self.own_properties.get(t, frozenset())
            self._inherited[name] = frozenset(props)
        return self._inherited[name]

def _schema_errors(spec: Any) -> List[str]:
    validator = Draft202012Validator(_VOCABULARY_SCHEMA)
    errors = sorted(validator.iter_errors(spec), key=lambda e: list(e.absolute_path))
    return [f"{'/'.join(str(p) for p in e.absolute_path) or '<root>'}: {e.message}" for e in errors]

def parse_vocabulary(spec: Any) -> Vocabulary:
    errs = _schema_errors(spec)
    if errs:
        raise VocabularyError("invalid vocabulary: " + "; ".join(errs))

    types = {name: (body or {}) for name, body in spec["types"].items()}
    parents = {name: list(body.get("parents", [])) for name, body in types.items()}
    dangling = sorted(
        f"{name} -> {p}" for name, ps in parents.items() for p in ps if p not in types
    )
    if dangling:
        raise VocabularyError("unknown parent type(s): " + ", ".join(dangling))

    return Vocabulary(
        parents=parents,
        own_properties={name: frozenset(body.get("properties", [])) for name, body in types.items()},
        version=spec.get("version"),
    )

def _read_vocabulary(path: Path) -> Vocabulary:
    try:
        spec = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise VocabularyError(f"{path}: invalid YAML: {e}") from e
    return parse_vocabulary(spec)

@lru_cache(maxsize=8)
def _cached_vocabulary(path: str) -> Vocabulary:
    return _read_vocabulary(Path(path))

def load_vocabulary(path: Optional[Path] = None) -> Vocabulary:
    """Load (once per path) and validate a vocabulary file; defaults to the bundled one."""
    return _cached_vocabulary(str(Path(path or DEFAULT_VOCABULARY).resolve()))
