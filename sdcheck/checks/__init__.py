# -*- coding: utf-8 -*-
"""
The four checks the pipeline runs, in order.
"""
from .syntax import SyntaxProblem, parse_json
from .keywords import KeywordProblem, validate_keywords
from .expander import expand
from .schema_org import SchemaProblem, validate_schema_org

__all__ = [
    "SyntaxProblem", "parse_json",
    "KeywordProblem", "validate_keywords",
    "expand",
    "SchemaProblem", "validate_schema_org",
]
