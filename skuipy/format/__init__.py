"""Canonical formatting."""

from skuipy.format.formatter import (
    format_component,
    format_document,
    format_number,
    format_string,
    format_value,
)
from skuipy.format.runner import run_format

__all__ = [
    "format_component",
    "format_document",
    "format_number",
    "format_string",
    "format_value",
    "run_format",
]
