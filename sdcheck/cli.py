#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
sdcheck CLI

Usage:
  python -m sdcheck check page.jsonld [--json] [--report build/report.json] [--verbose]
  python -m sdcheck pretty page.jsonld
"""
from __future__ import annotations
import argparse, asyncio, json, sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.text import Text

from .checks.syntax import load_json
from .config import SdcheckConfig
from .errors import ValidationError
from .io import read_text, write_json
from .logging import set_verbosity
from .paths import pretty_print
from .pipeline import Pipeline

console = Console()

def print_success(message: str):
    console.print(Text(f"✓ {message}", style="green"))

def print_error(message: str):
    console.print(Text(f"✗ {message}", style="red bold"))

def print_issue(issue: ValidationError):
    data = issue.to_dict()
    where = f"line {data['lineNumber']}" if data.get("lineNumber") is not None else "no line"
    text = Text(f"  [{issue.validator}] ", style="yellow")
    text.append(f"{where}: ", style="bold")
    text.append(issue.message)
    if data.get("path"):
        text.append(f"  ({data['path']})", style="dim")
    console.print(text)

def run_check(src: str, as_json: bool = False, report_path: Optional[Path] = None, cfg: Optional[SdcheckConfig] = None) -> int:
    cfg = cfg or SdcheckConfig.from_env()
    try:
        text = read_text(src)
    except OSError as e:
        print_error(f"cannot read {src}: {e}")
        return 2

    report = asyncio.run(Pipeline(cfg).run(text))
    if report_path:
        write_json(report_path, report.to_dict())

    if as_json:
        print(json.dumps([e.to_dict() for e in report.errors], ensure_ascii=False, indent=2))
    elif report.ok:
        print_success(f"{src}: no structured data problems found")
    else:
        print_error(f"{src}: {len(report.errors)} problem(s)")
        for issue in report.errors:
            print_issue(issue)
    return 0 if report.ok else 1

def run_pretty(src: str) -> int:
    try:
        doc = load_json(read_text(src))
    except (OSError, ValueError, RecursionError) as e:
        print_error(f"cannot load {src}: {e}")
        return 2
    lines: List[str] = pretty_print(doc).splitlines()
    width = len(str(len(lines)))
    for i, line in enumerate(lines, 1):
        print(f"{i:>{width}}  {line}")
    return 0

def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(prog="sdcheck", description="JSON-LD / Schema.org structured data validator")
    sub = ap.add_subparsers(dest="cmd", required=True)

    chk = sub.add_parser("check", help="Validate a JSON-LD document")
    chk.add_argument("src", help="Path to the document, or - for stdin")
    chk.add_argument("--json", dest="as_json", action="store_true", help="Print issues as JSON")
    chk.add_argument("--report", type=Path, help="Also write a stage report to this path")
    chk.add_argument("--verbose", action="store_true")

    pp = sub.add_parser("pretty", help="Print the numbered rendering that line numbers refer to")
    pp.add_argument("src", help="Path to the document, or - for stdin")

    args = ap.parse_args(argv)

    if args.cmd == "check":
        cfg = SdcheckConfig.from_env()
        set_verbosity(args.verbose or cfg.verbose)
        sys.exit(run_check(args.src, as_json=args.as_json, report_path=args.report, cfg=cfg))
    if args.cmd == "pretty":
        sys.exit(run_pretty(args.src))

if __name__ == "__main__":
    main()
