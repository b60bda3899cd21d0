#!/usr/bin/env python3
"""Parse and validate skui files, printing every diagnostic with source context."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

from skuipy.diagnostics import render_diagnostic
from skuipy.parser import ParseMode
from skuipy.pipeline import run_check, run_format


def _collect_files(paths: list[Path]) -> list[Path]:
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(candidate for candidate in path.rglob("*.skui") if candidate.is_file()))
        else:
            files.append(path)
    return files


def main() -> int:
    parser = argparse.ArgumentParser(description="Check skui documents")
    parser.add_argument("paths", nargs="+", type=Path, help="Files or directories (searched for *.skui)")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ParseMode],
        default=ParseMode.STRICT.value,
        help="Parser mode (default: strict)",
    )
    parser.add_argument(
        "--context",
        type=int,
        default=2,
        help="Source lines shown before each diagnostic (default: 2)",
    )
    parser.add_argument(
        "--format",
        action="store_true",
        help="Print the canonical formatting of files that check cleanly",
    )
    args = parser.parse_args()

    files = _collect_files(args.paths)
    if not files:
        raise SystemExit("No skui files found")

    mode = ParseMode(args.mode)
    failed = 0
    for path in files:
        text = path.read_text(encoding="utf-8")
        result = run_check(text, mode=mode)
        for diagnostic in result.diagnostics:
            print(f"{path}:")
            print(render_diagnostic(text, diagnostic, context_lines=args.context))
            print()
        if result.has_errors:
            failed += 1
            continue
        if args.format:
            formatted = run_format(text, parse=result.parse)
            sys.stdout.write(formatted.formatted_text)

    print(f"Checked {len(files)} file(s), {failed} with errors")
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
