"""Pytest configuration and fixtures for sdcheck tests"""
import json
from pathlib import Path
import pytest

ROOT = Path(__file__).resolve().parents[1]

@pytest.fixture
def repo_root():
    return ROOT

@pytest.fixture
def valid_text():
    """Smallest document that passes every stage"""
    return '{"@context":"https://schema.org","@type":"Thing","name":"A"}'

@pytest.fixture
def article_doc():
    """Article whose nested author is a single object (expansion turns it into a list)"""
    return {
        "@context": "https://schema.org",
        "@type": "Article",
        "headline": "H",
        "author": {
            "@type": "Person",
            "name": "A",
            "colour": "red",
        },
    }

@pytest.fixture
def write_doc(tmp_path):
    """Write text (or a JSON-able object) to a temp file and return its path"""
    def _write(content, name="doc.jsonld"):
        p = tmp_path / name
        text = content if isinstance(content, str) else json.dumps(content)
        p.write_text(text, encoding="utf-8")
        return p
    return _write
