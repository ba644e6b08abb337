# -*- coding: utf-8 -*-
"""
JSON-LD expansion backed by pyld.

Only the Schema.org context may be loaded remotely, and it is served from a
bundled copy so expansion never touches the network. Any other remote context
makes expansion fail.
"""
from __future__ import annotations
import asyncio, copy
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

from pyld import jsonld

from ..config import SdcheckConfig
from ..errors import ExpansionError
from ..io import clone_json, read_json
from ..logging import log

SCHEMA_ORG_HOSTS = {"schema.org", "www.schema.org"}
SCHEMA_ORG_CONTEXT_PATHS = {"", "/", "/docs/jsonldcontext.json", "/docs/jsonldcontext.jsonld"}

@lru_cache(maxsize=4)
def _context_document(path: str) -> Dict[str, Any]:
    return read_json(Path(path))

def is_schema_org_context(url: str) -> bool:
    parts = urlsplit(url)
    return (
        parts.scheme in ("http", "https")
        and parts.hostname in SCHEMA_ORG_HOSTS
        and parts.path in SCHEMA_ORG_CONTEXT_PATHS
    )

def make_document_loader(context_path: Path):
    def _load(url: str, options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        if not is_schema_org_context(url):
            raise jsonld.JsonLdError(
                f"Unable to load remote context: {url}",
                "jsonld.LoadDocumentError",
                {"url": url},
                code="loading remote context failed",
            )
        log().debug(f"serving bundled schema.org context for {url}")
        return {
            "contentType": "application/ld+json",
            "contextUrl": None,
            "documentUrl": url,
            "document": copy.deepcopy(_context_document(str(context_path))),
        }
    return _load

def describe(error: BaseException) -> str:
    """Message of the innermost pyld cause, which names the actual problem."""
    cur = error
    while isinstance(getattr(cur, "cause", None), BaseException):
        cur = cur.cause
    return str(cur.args[0]) if cur.args else repr(cur)

def expand_sync(doc: Any, config: Optional[SdcheckConfig] = None) -> Any:
    cfg = config or SdcheckConfig()
    options = {"documentLoader": make_document_loader(cfg.context_path)}
    try:
        return jsonld.expand(clone_json(doc), options)
    except jsonld.JsonLdError as e:
        raise ExpansionError(describe(e)) from e
    except RecursionError as e:
        raise ExpansionError("JSON-LD expansion failed: document is nested too deeply") from e
    except (TypeError, ValueError, KeyError, IndexError, AttributeError) as e:
        # pyld lets some malformed shapes escape as plain Python errors
        log().debug("pyld raised outside JsonLdError", exc_info=True)
        raise ExpansionError(f"JSON-LD expansion failed: {type(e).__name__}: {e}") from e

async def expand(doc: Any, config: Optional[SdcheckConfig] = None) -> Any:
    """Expand `doc`; raises ExpansionError on malformed or unresolvable JSON-LD."""
    return await asyncio.to_thread(expand_sync, doc, config)
