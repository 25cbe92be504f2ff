"""Parser for select specifications.

A select specification names the columns of a table and the related tables
to attach to each returned record::

    *, authors(*), bio:author_biographies(biography_text, language)

Column lists are kept for diagnostics only; relations drive enrichment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

import ply.yacc as yacc

from publishing_store.parsing.select_lexer import SelectLexer


@dataclass(frozen=True)
class RelationSelect:
    """A nested relation in a select specification: ``alias:name(spec)``."""

    name: str
    spec: SelectSpec
    alias: str | None = None

    @property
    def attach_as(self) -> str:
        """Field name the related value is written under."""
        return self.alias or self.name


@dataclass(frozen=True)
class SelectSpec:
    """A parsed select specification."""

    columns: tuple[str, ...] = ("*",)
    relations: tuple[RelationSelect, ...] = field(default_factory=tuple)

    def merge(self, other: SelectSpec) -> SelectSpec:
        """Combine the relations of two specs, later ones replacing earlier ones by attach name."""
        relations = {r.attach_as: r for r in self.relations}
        relations.update((r.attach_as, r) for r in other.relations)
        return SelectSpec(columns=self.columns, relations=tuple(relations.values()))

    def __str__(self) -> str:
        parts = list(self.columns)
        for rel in self.relations:
            prefix = f"{rel.alias}:" if rel.alias else ""
            parts.append(f"{prefix}{rel.name}({rel.spec})")
        return ", ".join(parts)


class SelectParser:
    """Parser for select specifications."""

    tokens = SelectLexer.tokens

    def __init__(self) -> None:
        self.lexer = SelectLexer()
        self.lexer.build()
        self.parser: yacc.LRParser = None  # type: ignore

    def p_spec_items(self, p: yacc.YaccProduction) -> None:
        """spec : item_list"""
        columns = tuple(item for item in p[1] if isinstance(item, str))
        relations = tuple(item for item in p[1] if isinstance(item, RelationSelect))
        p[0] = SelectSpec(columns=columns or ("*",), relations=relations)

    def p_spec_empty(self, p: yacc.YaccProduction) -> None:
        """spec : """
        p[0] = SelectSpec()

    def p_item_list_single(self, p: yacc.YaccProduction) -> None:
        """item_list : item"""
        p[0] = [p[1]]

    def p_item_list_multiple(self, p: yacc.YaccProduction) -> None:
        """item_list : item_list COMMA item"""
        p[0] = p[1] + [p[3]]

    def p_item_star(self, p: yacc.YaccProduction) -> None:
        """item : STAR"""
        p[0] = "*"

    def p_item_column(self, p: yacc.YaccProduction) -> None:
        """item : IDENTIFIER"""
        p[0] = p[1]

    def p_item_relation(self, p: yacc.YaccProduction) -> None:
        """item : IDENTIFIER LPAREN spec RPAREN"""
        p[0] = RelationSelect(name=p[1], spec=p[3])

    def p_item_aliased_relation(self, p: yacc.YaccProduction) -> None:
        """item : IDENTIFIER COLON IDENTIFIER LPAREN spec RPAREN"""
        p[0] = RelationSelect(name=p[3], spec=p[5], alias=p[1])

    def p_error(self, p: yacc.YaccProduction) -> None:
        if p:
            raise SyntaxError(f"Syntax error at '{p.value}' (position {p.lexpos})")
        else:
            raise SyntaxError("Syntax error at end of input")

    def build(self, **kwargs: Any) -> None:
        """Build the parser."""
        self.parser = yacc.yacc(module=self, start="spec", **kwargs)

    def parse(self, data: str) -> SelectSpec:
        """Parse a select specification string."""
        if self.parser is None:
            self.build(debug=False, write_tables=False)

        return self.parser.parse(data, lexer=self.lexer.lexer)


@lru_cache(maxsize=1)
def _shared_parser() -> SelectParser:
    return SelectParser()


@lru_cache(maxsize=256)
def parse_select(data: str | None = "*") -> SelectSpec:
    """Parse a select specification with a shared parser.

    ``None`` and blank strings select every column with no relations.

    Raises:
        SyntaxError: The specification is malformed.
    """
    if data is None or not data.strip():
        return SelectSpec()
    return _shared_parser().parse(data)
