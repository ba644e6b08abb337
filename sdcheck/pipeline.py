# -*- coding: utf-8 -*-
"""
Validation pipeline: JSON syntax -> JSON-LD keywords -> expansion -> Schema.org.

Stages run one at a time. The first stage that reports anything ends the run
and its issues are the whole result; later stages are marked skipped. Every
failure caused by the input is returned as an issue, never raised.
"""
from __future__ import annotations
import asyncio, time
from dataclasses import asdict, dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence

from .checks import expand, parse_json, validate_keywords, validate_schema_org
from .checks.keywords import KeywordProblem
from .checks.schema_org import SchemaProblem
from .checks.syntax import SyntaxProblem, load_json
from .checks.vocabulary import load_vocabulary
from .config import SdcheckConfig
from .errors import (
    JSON, JSON_LD, JSON_LD_EXPAND, SCHEMA_ORG,
    ExpandIssue, ExpansionError, JsonIssue, JsonLdIssue, PathNotFoundError,
    SchemaOrgIssue, ValidationError,
)
from .logging import log
from .paths import locate_line_number

STAGES = [
    (JSON, "JSON syntax"),
    (JSON_LD, "JSON-LD keywords"),
    (JSON_LD_EXPAND, "JSON-LD expansion"),
    (SCHEMA_ORG, "Schema.org conformance"),
]

SyntaxCheck = Callable[[str], Optional[SyntaxProblem]]
KeywordCheck = Callable[[Any], Sequence[KeywordProblem]]
Expander = Callable[[Any], Awaitable[Any]]
SchemaCheck = Callable[[Any], Sequence[SchemaProblem]]

@dataclass
class StageResult:
    id: str
    name: str
    status: str  # ok | error | skipped
    duration_ms: float = 0.0
    issue_count: int = 0

@dataclass
class PipelineReport:
    errors: List[ValidationError] = field(default_factory=list)
    stages: List[StageResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.ok,
            "errors": [e.to_dict() for e in self.errors],
            "stages": [asdict(s) for s in self.stages],
        }

def _line_number(doc: Any, path: str) -> Optional[int]:
    try:
        return locate_line_number(doc, path)
    except PathNotFoundError as e:
        log().warning(f"no line number for {path}: {e}")
        return None
    except RecursionError:
        log().warning(f"no line number for {path}: document nested too deeply to render")
        return None

class Pipeline:
    def __init__(
        self,
        config: Optional[SdcheckConfig] = None,
        syntax_check: Optional[SyntaxCheck] = None,
        keyword_check: Optional[KeywordCheck] = None,
        expander: Optional[Expander] = None,
        schema_check: Optional[SchemaCheck] = None,
    ):
        self.config = config or SdcheckConfig()
        self.syntax_check = syntax_check or parse_json
        self.keyword_check = keyword_check or validate_keywords
        self.expander = expander or (lambda doc: expand(doc, self.config))
        self.schema_check = schema_check or self._default_schema_check

    def _default_schema_check(self, expanded: Any) -> Sequence[SchemaProblem]:
        return validate_schema_org(expanded, load_vocabulary(self.config.vocabulary_path))

    async def run(self, text: str) -> PipelineReport:
        report = PipelineReport()
        started = time.perf_counter()

        def finish(stage_id: str, issues: List[ValidationError]) -> bool:
            nonlocal started
            name = dict(STAGES)[stage_id]
            elapsed = round((time.perf_counter() - started) * 1000, 1)
            status = "error" if issues else "ok"
            report.stages.append(StageResult(stage_id, name, status, elapsed, len(issues)))
            log().debug(f"stage {stage_id}: {status} ({len(issues)} issue(s), {elapsed}ms)")
            started = time.perf_counter()
            if not issues:
                return False
            report.errors = issues
            done = {s.id for s in report.stages}
            report.stages.extend(StageResult(sid, n, "skipped") for sid, n in STAGES if sid not in done)
            return True

        # 1) JSON syntax
        problem = self.syntax_check(text)
        issues: List[ValidationError] = []
        if problem is not None:
            issues = [JsonIssue(line_number=problem.line_number, message=problem.message)]
        if finish(JSON, issues):
            return report

        doc = load_json(text)

        # 2) JSON-LD keywords
        issues = [
            JsonLdIssue(path=p.path, message=p.message, line_number=_line_number(doc, p.path))
            for p in self.keyword_check(doc)
        ]
        if finish(JSON_LD, issues):
            return report

        # 3) expansion
        expanded = None
        try:
            expanded = await self.expander(doc)
        except ExpansionError as e:
            issues = [ExpandIssue(message=e.message)]
        if finish(JSON_LD_EXPAND, issues):
            return report

        # 4) Schema.org conformance
        issues = [
            SchemaOrgIssue(
                message=p.message,
                path=p.path,
                line_number=_line_number(doc, p.path) if p.path else None,
                invalid_types=tuple(p.invalid_types),
            )
            for p in self.schema_check(expanded)
        ]
        finish(SCHEMA_ORG, issues)
        return report

async def validate(text: str, config: Optional[SdcheckConfig] = None) -> List[ValidationError]:
    """Validate a JSON-LD text blob; an empty list means it passed every stage."""
    report = await Pipeline(config).run(text)
    return report.errors

def validate_sync(text: str, config: Optional[SdcheckConfig] = None) -> List[ValidationError]:
    return asyncio.run(validate(text, config))
