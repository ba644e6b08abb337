# -*- coding: utf-8 -*-
"""
Issue types reported by the validation pipeline, plus the library's exceptions.

Every pipeline stage has its own issue class carrying only the fields that
stage can fill in. `to_dict()` gives the wire shape used by the CLI's JSON
output: {validator, message, lineNumber?, path?, invalidTypes?}.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

JSON = "json"
JSON_LD = "json-ld"
JSON_LD_EXPAND = "json-ld-expand"
SCHEMA_ORG = "schema-org"

class SdcheckError(Exception):
    """Base class for sdcheck exceptions."""

class PathNotFoundError(SdcheckError, LookupError):
    """A validator path names a key the original document does not have."""

    def __init__(self, segment: str, path: str):
        super().__init__(f"Key not found: {segment} (path {path})")
        self.segment = segment
        self.path = path

class ExpansionError(SdcheckError):
    """JSON-LD expansion failed; `message` is the most specific cause."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class VocabularyError(SdcheckError):
    pass

@dataclass(frozen=True)
class JsonIssue:
    line_number: int
    message: str
    validator: ClassVar[str] = JSON

    def to_dict(self) -> Dict[str, Any]:
        return {"validator": self.validator, "lineNumber": self.line_number, "message": self.message}

@dataclass(frozen=True)
class JsonLdIssue:
    path: str
    message: str
    line_number: Optional[int] = None
    validator: ClassVar[str] = JSON_LD

    def to_dict(self) -> Dict[str, Any]:
        return {
            "validator": self.validator,
            "path": self.path,
            "message": self.message,
            "lineNumber": self.line_number,
        }

@dataclass(frozen=True)
class ExpandIssue:
    message: str
    validator: ClassVar[str] = JSON_LD_EXPAND

    def to_dict(self) -> Dict[str, Any]:
        return {"validator": self.validator, "message": self.message}

@dataclass(frozen=True)
class SchemaOrgIssue:
    message: str
    path: Optional[str] = None
    # None when there is no path or the path could not be located
    line_number: Optional[int] = None
    invalid_types: Tuple[str, ...] = ()
    validator: ClassVar[str] = SCHEMA_ORG

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "validator": self.validator,
            "message": self.message,
            "lineNumber": self.line_number,
        }
        if self.path is not None:
            out["path"] = self.path
        if self.invalid_types:
            out["invalidTypes"] = list(self.invalid_types)
        return out

ValidationError = Union[JsonIssue, JsonLdIssue, ExpandIssue, SchemaOrgIssue]
