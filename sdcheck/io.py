from __future__ import annotations
import json, sys
from pathlib import Path
from typing import Any

def read_text(p: str | Path) -> str:
    """Read a document from disk, or from stdin when the path is '-'."""
    if str(p) == "-":
        return sys.stdin.read()
    return Path(p).read_text(encoding="utf-8")

def read_json(p: Path) -> Any:
    return json.loads(Path(p).read_text(encoding="utf-8"))

def write_json(p: Path, obj: Any) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(obj, ensure_ascii=False, indent=2), encoding="utf-8")

def clone_json(obj: Any) -> Any:
    """Deep copy of a JSON value through the C encoder/decoder (no Python-level recursion)."""
    return json.loads(json.dumps(obj))
