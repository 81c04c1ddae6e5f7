"""Token serialization for relex.

Converts scanned tokens to plain dict/list structures that map
naturally to both JSON and YAML.

Usage
-----
::

    from relex.lexer import tokenize
    from relex.report.serializer import TokenSerializer

    serializer = TokenSerializer()
    data = serializer.to_list(tokenize("a + 1"))
    json_text = serializer.to_json(tokenize("a + 1"))
"""
from __future__ import annotations

import json
from collections.abc import Iterable

import yaml

from relex.grammar.tokens import Operator, SourceSlice, Token, TokenType


class TokenSerializer:
    """Converts ``Token`` objects to JSON-compatible dicts.

    Parameters
    ----------
    include_offsets:
        Add the UTF-8 ``offset`` and ``length`` of each lexeme.
    """

    def __init__(self, include_offsets: bool = False) -> None:
        self._include_offsets = include_offsets

    # ------------------------------------------------------------------
    # Serialization (Token → dict)
    # ------------------------------------------------------------------

    def to_dict(self, token: Token) -> dict[str, object]:
        """Serialize a single ``Token``."""
        data: dict[str, object] = {
            "kind": token.type.name,
            "value": self._value_to_plain(token),
            "line": token.line,
            "col": token.col,
        }
        if self._include_offsets:
            data["offset"] = token.lexeme.byte_start
            data["length"] = token.lexeme.byte_length
        return data

    def to_list(self, tokens: Iterable[Token]) -> list[dict[str, object]]:
        return [self.to_dict(t) for t in tokens]

    def _value_to_plain(self, token: Token) -> object:
        value = token.value
        if token.type is TokenType.OPERATOR:
            assert isinstance(value, Operator)
            return value.name
        if token.type is TokenType.IDENTIFIER:
            assert isinstance(value, SourceSlice)
            return value.text
        return value

    # ------------------------------------------------------------------
    # Text formats
    # ------------------------------------------------------------------

    def to_json(self, tokens: Iterable[Token], indent: int | None = 2) -> str:
        """Serialize tokens to a JSON array string."""
        return json.dumps(self.to_list(tokens), indent=indent, ensure_ascii=False)

    def to_yaml(self, tokens: Iterable[Token]) -> str:
        """Serialize tokens to a YAML sequence string."""
        return yaml.safe_dump(
            self.to_list(tokens),
            allow_unicode=True,
            sort_keys=False,
            default_flow_style=False,
        )
