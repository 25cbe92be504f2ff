"""Parsing for select specifications."""

from publishing_store.parsing.select_parser import (
    RelationSelect,
    SelectParser,
    SelectSpec,
    parse_select,
)

__all__ = [
    "RelationSelect",
    "SelectParser",
    "SelectSpec",
    "parse_select",
]
