from __future__ import annotations
import json, re
from dataclasses import dataclass
from typing import Any, Optional

# strings are matched first so a "NaN" inside a string value is never reported
_CONSTANT_RE = re.compile(r'"(?:\\.|[^"\\])*"|(-?Infinity|NaN)')

@dataclass(frozen=True)
class SyntaxProblem:
    line_number: int
    message: str

class NonStandardConstant(ValueError):
    def __init__(self, name: str):
        super().__init__(f"{name} is not valid JSON")
        self.name = name

def _reject_constant(name: str) -> Any:
    raise NonStandardConstant(name)

def load_json(text: str) -> Any:
    """json.loads, minus the NaN / Infinity / -Infinity extensions."""
    return json.loads(text, parse_constant=_reject_constant)

def _constant_line(text: str) -> int:
    for m in _CONSTANT_RE.finditer(text):
        if m.group(1):
            return text.count("\n", 0, m.start(1)) + 1
    return 1

def parse_json(text: str) -> Optional[SyntaxProblem]:
    """Return the first syntax problem in `text`, or None when it parses."""
    if not text.strip():
        return SyntaxProblem(line_number=1, message="Empty input: expected a JSON value")
    try:
        load_json(text)
    except json.JSONDecodeError as e:
        return SyntaxProblem(line_number=e.lineno, message=f"{e.msg} (line {e.lineno}, column {e.colno})")
    except NonStandardConstant as e:
        return SyntaxProblem(line_number=_constant_line(text), message=f"Unexpected token {e.name}: {e}")
    except RecursionError:
        return SyntaxProblem(line_number=1, message="Nesting too deep to parse")
    return None
