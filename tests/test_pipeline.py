"""Tests for the validation pipeline (short-circuiting and issue shapes)"""
import asyncio
import json

import pytest

from sdcheck import validate, validate_sync
from sdcheck.checks.keywords import KeywordProblem
from sdcheck.checks.schema_org import SchemaProblem
from sdcheck.errors import (
    ExpandIssue, ExpansionError, JsonIssue, JsonLdIssue, SchemaOrgIssue,
)
from sdcheck.checks import expander
from sdcheck.pipeline import Pipeline

def run(text, **kwargs):
    return asyncio.run(Pipeline(**kwargs).run(text))

def test_valid_document_has_no_errors(valid_text):
    assert asyncio.run(validate(valid_text)) == []

def test_validate_sync_matches_async(valid_text):
    assert validate_sync(valid_text) == []

def test_invalid_json_gives_single_json_error():
    errors = asyncio.run(validate('{\n  "@type": "Thing",\n  "name": \n}'))
    assert len(errors) == 1
    assert isinstance(errors[0], JsonIssue)
    assert errors[0].validator == "json"
    assert errors[0].line_number == 4

def test_unknown_keyword_is_json_ld_error_with_line():
    text = '{"@context": "https://schema.org", "@type": "Thing", "@foo": "x"}'
    errors = asyncio.run(validate(text))
    assert errors == [JsonLdIssue(path="/@foo", message='Unknown keyword "@foo"', line_number=4)]

def test_keyword_errors_stop_the_pipeline():
    calls = []

    async def expander(doc):
        calls.append(doc)
        return []

    report = run(
        '{"@type": "Thing", "@foo": 1, "@bar": 2}',
        expander=expander,
        schema_check=lambda expanded: [SchemaProblem(message="never")],
    )
    assert calls == []
    assert {e.validator for e in report.errors} == {"json-ld"}
    assert len(report.errors) == 2
    assert [s.status for s in report.stages] == ["ok", "error", "skipped", "skipped"]

def test_unloadable_context_is_expand_error():
    text = '{"@context": "https://example.com/ctx.jsonld", "@type": "Thing", "name": "A"}'
    errors = asyncio.run(validate(text))
    assert len(errors) == 1
    assert isinstance(errors[0], ExpandIssue)
    assert "example.com" in errors[0].message
    assert errors[0].to_dict() == {"validator": "json-ld-expand", "message": errors[0].message}

def test_expander_failure_is_captured():
    async def expander(doc):
        raise ExpansionError("boom")

    report = run('{"@type": "Thing"}', expander=expander)
    assert report.errors == [ExpandIssue(message="boom")]
    assert [s.status for s in report.stages] == ["ok", "ok", "error", "skipped"]

def test_unknown_type_is_schema_org_error():
    text = '{"@context": "https://schema.org", "@type": "Thingy", "name": "A"}'
    errors = asyncio.run(validate(text))
    assert errors == [
        SchemaOrgIssue(message="Unrecognized schema.org type: Thingy", path="/@type",
                       line_number=3, invalid_types=("Thingy",))
    ]

def test_unexpected_property_line():
    text = '{"@context":"https://schema.org","@type":"Person","name":"A","headline":"x"}'
    errors = asyncio.run(validate(text))
    assert [(e.validator, e.path, e.line_number) for e in errors] == [("schema-org", "/headline", 5)]

def test_nested_single_object_resolves_through_array_wrapper(article_doc):
    errors = asyncio.run(validate(json.dumps(article_doc)))
    assert len(errors) == 1
    assert errors[0].path == "/author/0/colour"
    assert errors[0].line_number == 8

def test_iri_keys_in_original_document():
    text = json.dumps({
        "@type": "http://schema.org/Person",
        "http://schema.org/name": "A",
        "http://schema.org/headline": "x",
    })
    errors = asyncio.run(validate(text))
    assert [(e.path, e.line_number) for e in errors] == [("/headline", 4)]

def test_pathless_schema_error_has_null_line_number():
    report = run('{"@type": "Thing"}', schema_check=lambda expanded: [SchemaProblem(message="no nodes")])
    assert report.errors == [SchemaOrgIssue(message="no nodes")]
    assert report.errors[0].to_dict() == {"validator": "schema-org", "message": "no nodes", "lineNumber": None}

def test_unlocatable_path_degrades_to_no_line_number():
    report = run(
        '{"@type": "Thing"}',
        schema_check=lambda expanded: [SchemaProblem(message="odd", path="/missing/thing")],
    )
    assert report.errors == [SchemaOrgIssue(message="odd", path="/missing/thing", line_number=None)]

def test_unlocatable_keyword_path_degrades_too():
    report = run('{"@type": "Thing"}', keyword_check=lambda doc: [KeywordProblem(path="/nope", message="x")])
    assert report.errors == [JsonLdIssue(path="/nope", message="x", line_number=None)]

def test_validate_is_idempotent(article_doc):
    text = json.dumps(article_doc)
    assert asyncio.run(validate(text)) == asyncio.run(validate(text))

def test_report_to_dict(valid_text):
    report = run(valid_text)
    data = report.to_dict()
    assert data["success"] is True
    assert data["errors"] == []
    assert [s["id"] for s in data["stages"]] == ["json", "json-ld", "json-ld-expand", "schema-org"]
    assert all(s["status"] == "ok" for s in data["stages"])

def test_nan_is_a_json_error():
    errors = validate_sync('{"@context":"https://schema.org","@type":"Thing",\n "name": NaN}')
    assert len(errors) == 1
    assert isinstance(errors[0], JsonIssue)
    assert errors[0].line_number == 2

def test_runaway_nesting_is_a_json_error():
    errors = validate_sync("[" * 5000)
    assert len(errors) == 1
    assert isinstance(errors[0], JsonIssue)
    assert errors[0].line_number == 1

def test_deeply_nested_valid_json_does_not_raise():
    text = '{"@context": {"@vocab": "http://schema.org/"}, "@type": "Thing", "a": ' + '{"a":' * 600 + "1" + "}" * 601
    errors = validate_sync(text)
    assert isinstance(errors, list)
    assert {e.validator for e in errors} <= {"json-ld-expand", "schema-org"}

def test_recursion_inside_expansion_becomes_expand_error(monkeypatch):
    def too_deep(doc, options=None):
        raise RecursionError("maximum recursion depth exceeded")

    monkeypatch.setattr(expander.jsonld, "expand", too_deep)
    with pytest.raises(ExpansionError) as exc:
        expander.expand_sync({"@type": "Thing"})
    assert "nested too deeply" in exc.value.message
    errors = validate_sync('{"@type": "Thing"}')
    assert errors == [ExpandIssue(message=exc.value.message)]

def test_plain_python_error_inside_expansion_becomes_expand_error(monkeypatch):
    def broken(doc, options=None):
        raise TypeError("unhashable type: 'dict'")

    monkeypatch.setattr(expander.jsonld, "expand", broken)
    errors = validate_sync('{"@type": "Thing"}')
    assert len(errors) == 1
    assert isinstance(errors[0], ExpandIssue)
    assert "TypeError" in errors[0].message

def test_malformed_local_context_is_expand_error():
    errors = validate_sync('{"@context": {"@vocab": 5}, "@type": "Thing", "name": "A"}')
    assert len(errors) == 1
    assert isinstance(errors[0], ExpandIssue)
    assert errors[0].to_dict().keys() == {"validator", "message"}

def test_graph_document_errors_keep_line_numbers():
    text = json.dumps({
        "@context": "https://schema.org",
        "@graph": [
            {"@type": "Thing", "name": "A"},
            {"@type": "Person", "headline": "x"},
        ],
    })
    errors = validate_sync(text)
    assert [(e.path, e.line_number) for e in errors] == [("/1/headline", 10)]

def test_single_item_array_root_keeps_line_numbers():
    text = json.dumps([{"@context": "https://schema.org", "@type": "Person", "headline": "x"}])
    errors = validate_sync(text)
    assert [(e.path, e.line_number) for e in errors] == [("/headline", 5)]
