from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List

from .walk import walk_object

# JSON-LD 1.1, section 1.7 "Syntax Tokens and Keywords"
VALID_KEYWORDS = frozenset({
    "@base", "@container", "@context", "@direction", "@graph", "@id", "@import",
    "@included", "@index", "@json", "@language", "@list", "@nest", "@none",
    "@prefix", "@propagate", "@protected", "@reverse", "@set", "@type",
    "@value", "@version", "@vocab",
})

@dataclass(frozen=True)
class KeywordProblem:
    path: str
    message: str

def validate_keywords(doc: Any) -> List[KeywordProblem]:
    """Flag every `@`-prefixed key that is not a JSON-LD keyword."""
    errs: List[KeywordProblem] = []
    for name, _value, path, _parent in walk_object(doc):
        if name.startswith("@") and name not in VALID_KEYWORDS:
            errs.append(KeywordProblem(path="/" + "/".join(path), message=f"Unknown keyword \"{name}\""))
    return errs
