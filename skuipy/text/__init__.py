"""Text offsets and ranges."""

from skuipy.text.text import ZERO, LineCol, LineIndex, TextRange, TextSize, slice_text_range

__all__ = [
    "ZERO",
    "LineCol",
    "LineIndex",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
