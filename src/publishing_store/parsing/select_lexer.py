"""Lexer for select specifications like ``*, authors(*)``."""

import ply.lex as lex


class SelectLexer:
    """Lexer for tokenizing select specifications."""

    tokens = [
        "IDENTIFIER",
        "STAR",
        "COMMA",
        "COLON",
        "LPAREN",
        "RPAREN",
    ]

    t_STAR = r"\*"
    t_COMMA = r","
    t_COLON = r":"
    t_LPAREN = r"\("
    t_RPAREN = r"\)"

    # Select strings are often written across several lines
    t_ignore = " \t\r"

    def __init__(self) -> None:
        self.lexer: lex.Lexer = None  # type: ignore

    def t_IDENTIFIER(self, t: lex.LexToken) -> lex.LexToken:
        r"[a-zA-Z_][a-zA-Z0-9_]*"
        return t

    def t_NEWLINE(self, t: lex.LexToken) -> None:
        r"\n+"
        t.lexer.lineno += len(t.value)

    def t_error(self, t: lex.LexToken) -> None:
        raise SyntaxError(f"Illegal character '{t.value[0]}' at position {t.lexpos}")

    def build(self, **kwargs) -> None:  # type: ignore
        """Build the lexer."""
        self.lexer = lex.lex(module=self, **kwargs)

    def input(self, data: str) -> None:
        self.lexer.input(data)

    def token(self) -> lex.LexToken | None:
        return self.lexer.token()

    def tokenize(self, data: str) -> list[lex.LexToken]:
        """Tokenize the input and return all tokens."""
        self.input(data)
        tokens = []
        while True:
            tok = self.token()
            if tok is None:
                break
            tokens.append(tok)
        return tokens
