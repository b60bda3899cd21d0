"""Brace block contexts."""

from enum import StrEnum


class BraceContext(StrEnum):
    """What a `{ ... }` block means at the point it is parsed.

    The meaning of a brace is decided by what precedes it and passed down
    explicitly; the brace token itself never decides.
    """

    COMPONENT_BODY = "component_body"
    STYLE_BODY = "style_body"
    MAP_VALUE = "map_value"
