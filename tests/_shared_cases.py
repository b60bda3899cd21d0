"""Centralized skui source cases used across lexer/parser/validation tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap
from typing import Literal, cast


@dataclass(frozen=True, slots=True)
class SkuiCase:
    name: str
    source: str
    strict_should_parse_cleanly: bool = True
    strict_should_validate: bool = True


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


PARSER_CASES: tuple[SkuiCase, ...] = (
    SkuiCase(
        name="flex_root_with_selectors",
        source='Flex(1.0, true) #main .highlight { padding: 10\n Button("OK") }',
        # The only top-level component carries an id.
        strict_should_validate=False,
    ),
    SkuiCase(
        name="single_root_with_children",
        source=_dedent(
            """
            Flex(MainFill) {
                padding: 10
                Button("OK") #ok .primary
                Label("Cancel")
            }
            """
        ),
    ),
    SkuiCase(
        name="stylesheet_and_root",
        source=_dedent(
            """
            Flex { background-color: black; padding:1px }
            #list { border: 1px solid yellow }
            .myBtn { border: 2px }

            Flex() #list .myBtn {
                title: "x"
            }
            Window() {
                Flex() #list
            }
            """
        ),
        strict_should_validate=False,
    ),
    SkuiCase(
        name="nested_values_in_body",
        source=_dedent(
            """
            Window() {
                myProperty1 : "data"
                propertyMap : {key=1, key2=true}
                propertyAnother : [ 1,2,3 ]
                FlexItem(1.0, Button("FlexItem1"))
                FlexItem(2.0, Button("FlexItem2"))
                Button()
                Flex() {
                    Label("1") Label("2")
                }
            }
            """
        ),
    ),
    SkuiCase(
        name="named_parameters",
        source='Dialog(title: "Settings", modal = true, size: [400, 300])\n',
    ),
    SkuiCase(
        name="relative_values_in_template",
        source=_dedent(
            """
            List(items: ${items}) {
                template: Row(Label(${title}), Label(${subtitle}))
            }
            """
        ),
    ),
    SkuiCase(
        name="definition_and_root",
        source=_dedent(
            """
            Card : Frame(${0}) {
                Label(${1})
            }

            Window() {
                Card("A", "B")
            }
            """
        ),
    ),
    SkuiCase(
        name="definitions_with_inner_ids",
        source=_dedent(
            """
            TopPanel:
            Flex(Horizontal) {
                padding : 5
                FlexItem(TextInput( ${0} ) #text_input , 1.0 )
                Button( ${1} )
            }

            Main:
                Flex(Vertical) {
                    TopPanel( "ex: 'Do the dishes', 'File my taxes', ...", "Add task" )
                    FlexSpace(1)
                    FlexItem( Portal(Flex(axis=Vertical, cross_axis_alignment=Start) #list)
                    , 1.0 )
                }
            """
        ),
        # Only definitions: there is no root to instantiate.
        strict_should_validate=False,
    ),
    SkuiCase(
        name="compound_style_selectors",
        source='Flex .row { gap: 2 }\nButton #ok .primary { padding: 4 }\nWindow() { Button("OK") #ok .primary }\n',
    ),
    SkuiCase(
        name="closures_and_comments",
        source=_dedent(
            """
            // main window
            Window() {
                /* a button
                   with a handler */
                Button("OK") {
                    on_click: |ctx| { ctx.close(); }
                }
            }
            """
        ),
    ),
    SkuiCase(
        name="semicolon_separated_members",
        source='Row() { gap: 4; Label("a"); Label("b"); }\n',
    ),
    SkuiCase(
        name="empty_document",
        source="",
        strict_should_validate=False,
    ),
)

ERROR_CASES: tuple[SkuiCase, ...] = (
    SkuiCase(
        name="bare_identifier_at_top_level",
        source="Window\n",
        strict_should_parse_cleanly=False,
    ),
    SkuiCase(
        name="dangling_colon_in_body",
        source="Window() { title: : }\n",
        strict_should_parse_cleanly=False,
    ),
    SkuiCase(
        name="missing_closing_brace",
        source="Window() {\n    title: 1\n",
        strict_should_parse_cleanly=False,
    ),
    SkuiCase(
        name="unterminated_string",
        source='Window("oops\n',
        strict_should_parse_cleanly=False,
    ),
)

ALL_SKUI_CASES: tuple[SkuiCase, ...] = PARSER_CASES + ERROR_CASES

CaseName = Literal[
    "flex_root_with_selectors",
    "single_root_with_children",
    "stylesheet_and_root",
    "nested_values_in_body",
    "named_parameters",
    "relative_values_in_template",
    "definition_and_root",
    "definitions_with_inner_ids",
    "compound_style_selectors",
    "closures_and_comments",
    "semicolon_separated_members",
    "empty_document",
    "bare_identifier_at_top_level",
    "dangling_colon_in_body",
    "missing_closing_brace",
    "unterminated_string",
]

CASE_BY_NAME: dict[CaseName, SkuiCase] = cast(
    dict[CaseName, SkuiCase],
    {case.name: case for case in ALL_SKUI_CASES},
)


def case_source(name: CaseName) -> str:
    return CASE_BY_NAME[name].source


def case_id(case: SkuiCase) -> str:
    return case.name
