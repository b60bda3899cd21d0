"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling recovery and validation leniency."""

    mode: ParseMode = ParseMode.STRICT
    allow_stylesheet_only: bool = False
    allow_missing_rbrace: bool = False
    recover_declarations: bool = True

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.PERMISSIVE:
            return ParserOptions(
                mode=mode,
                allow_stylesheet_only=True,
                allow_missing_rbrace=True,
                recover_declarations=True,
            )

        return ParserOptions(
            mode=mode,
            allow_stylesheet_only=False,
            allow_missing_rbrace=False,
            recover_declarations=True,
        )
