"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from skuipy.diagnostics.diagnostic import Diagnostic
from skuipy.text import LineIndex


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    return sorted(
        diagnostics,
        key=lambda diagnostic: (
            diagnostic.range.start.value,
            diagnostic.range.end.value,
            diagnostic.code,
            diagnostic.message,
        ),
    )


def render_diagnostic(
    source: str,
    diagnostic: Diagnostic,
    *,
    context_lines: int = 2,
    index: LineIndex | None = None,
) -> str:
    """Render a diagnostic with the preceding source lines and a caret underline.

    ```
    error[DECL_MISSING_SUFFIX] 3:5: Expected `(` or `{` after identifier
       2 | Flex() {
       3 |     Label
         |     ^^^^^
    ```
    """
    index = index or LineIndex(source)
    start = index.line_col(diagnostic.range.start)
    header = (
        f"{diagnostic.severity}[{diagnostic.code}] "
        f"{start.line + 1}:{start.column + 1}: {diagnostic.message}"
    )
    lines = [header]

    first = max(start.line - max(context_lines, 0), 0)
    for line in range(first, start.line + 1):
        lines.append(f"{line + 1:>4} | {index.line_text(line)}")

    line_range = index.line_range(start.line)
    end = min(diagnostic.range.end.value, line_range.end.value)
    width = max(end - diagnostic.range.start.value, 1)
    lines.append(f"     | {' ' * start.column}{'^' * width}")

    if diagnostic.hint:
        lines.append(f"     = hint: {diagnostic.hint}")
    return "\n".join(lines)
