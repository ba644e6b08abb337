# -*- coding: utf-8 -*-
"""
sdcheck: validate JSON-LD structured data against JSON, JSON-LD and Schema.org rules.
"""
from .errors import (
    ExpandIssue, ExpansionError, JsonIssue, JsonLdIssue, PathNotFoundError,
    SchemaOrgIssue, SdcheckError, ValidationError, VocabularyError,
)
from .paths import pretty_print, relative_name, resolve_line_number
from .pipeline import Pipeline, PipelineReport, validate, validate_sync

__all__ = [
    "validate", "validate_sync", "Pipeline", "PipelineReport",
    "resolve_line_number", "relative_name", "pretty_print",
    "ValidationError", "JsonIssue", "JsonLdIssue", "ExpandIssue", "SchemaOrgIssue",
    "SdcheckError", "PathNotFoundError", "ExpansionError", "VocabularyError",
]

__version__ = "0.1.0"
