#!/usr/bin/env python3
"""Throughput benchmark for skui parsing plus validation."""

from __future__ import annotations

import argparse
from pathlib import Path
import statistics
import time

from tqdm import tqdm

from skuipy import parse_result

_SAMPLE = """\
.button { border: 1px solid #333; padding: 4px }
Button #ok .button { color: rgb(20, 20, 20) }

Row : Flex(${0}) {
    gap: 2
    Label(${1})
}

Window(title: "Benchmark", size: [800, 600]) {
    padding: 10
    Flex(MainFill) {
        Button("OK") #ok .button {
            on_click: |ctx| { ctx.close(); }
        }
        Label("Cancel") .button
    }
}
"""


def _load_texts(root: Path | None, copies: int) -> list[str]:
    if root is None:
        return [_SAMPLE] * max(copies, 1)
    texts = [path.read_text(encoding="utf-8") for path in sorted(root.rglob("*.skui")) if path.is_file()]
    if not texts:
        raise SystemExit(f"No .skui files found under {root}")
    return texts


def _time_pass(texts: list[str], label: str) -> tuple[float, int]:
    """Parse and validate every text once; return seconds and diagnostic count."""
    diagnostics = 0
    start = time.perf_counter()
    for text in tqdm(texts, desc=label, unit="doc", leave=False):
        diagnostics += len(parse_result(text).all_diagnostics())
    return time.perf_counter() - start, diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark skui parse + validation throughput")
    parser.add_argument("--root", type=Path, help="Directory of *.skui files (default: built-in sample)")
    parser.add_argument("--copies", type=int, default=2000, help="Copies of the built-in sample per pass")
    parser.add_argument("--runs", type=int, default=5, help="Measured passes after one warmup")
    args = parser.parse_args()

    texts = _load_texts(args.root, args.copies)
    _time_pass(texts, "warmup")
    timings: list[float] = []
    diagnostics = 0
    for run in range(max(args.runs, 1)):
        seconds, diagnostics = _time_pass(texts, f"run {run + 1}")
        timings.append(seconds)

    best = min(timings)
    chars = sum(len(text) for text in texts)
    print(f"{len(texts)} documents, {chars} chars, {diagnostics} diagnostics per pass")
    print(f"best {best:.4f}s  median {statistics.median(timings):.4f}s  worst {max(timings):.4f}s")
    print(f"{len(texts) / best:.1f} docs/s, {chars / best:.0f} chars/s (best pass)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
