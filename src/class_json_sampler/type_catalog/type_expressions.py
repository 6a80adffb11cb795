"""Parsing of Java-style type expressions used in type catalogs."""

from __future__ import annotations

import re
from dataclasses import dataclass

WILDCARD = "?"

_TOKEN_PATTERN = re.compile(r"\s*(?:(?P<name>[A-Za-z_$][\w$.]*)|(?P<symbol>\?|<|>|,|\[\s*\]))")


class TypeExpressionError(ValueError):
    """Raised when a type expression cannot be parsed."""


@dataclass(frozen=True)
class TypeExpression:
    """Unbound type expression such as ``List<T>`` or ``byte[][]``."""

    name: str
    arguments: tuple[TypeExpression, ...] = ()
    array_dimensions: int = 0
    bound: TypeExpression | None = None
    bound_kind: str | None = None

    @property
    def is_wildcard(self) -> bool:
        return self.name == WILDCARD

    @property
    def presentable_text(self) -> str:
        if self.is_wildcard:
            text = WILDCARD
            if self.bound is not None:
                text = f"{WILDCARD} {self.bound_kind} {self.bound.presentable_text}"
        elif self.arguments:
            rendered = ", ".join(argument.presentable_text for argument in self.arguments)
            text = f"{self.name}<{rendered}>"
        else:
            text = self.name
        return text + "[]" * self.array_dimensions


def parse_type_expression(text: str) -> TypeExpression:
    """Parse one type expression.

    Qualified names are reduced to their simple name, so ``java.util.List``
    and ``List`` denote the same declaration.

    Raises:
      TypeExpressionError: If the text is empty or malformed.
    """
    if not isinstance(text, str) or not text.strip():
        raise TypeExpressionError("Type expression must be a non-empty string.")
    parser = _TypeExpressionParser(text, _tokenize(text))
    expression = parser.parse_type()
    parser.expect_end()
    return expression


def _tokenize(text: str) -> list[str]:
    tokens: list[str] = []
    position = 0
    stripped_end = len(text.rstrip())
    while position < stripped_end:
        match = _TOKEN_PATTERN.match(text, position)
        if match is None or match.end() == position:
            raise TypeExpressionError(
                f"Unexpected character {text[position]!r} in type expression: {text}"
            )
        token = match.group("name") or match.group("symbol")
        tokens.append("[]" if token.startswith("[") else token)
        position = match.end()
    return tokens


class _TypeExpressionParser:
    def __init__(self, text: str, tokens: list[str]) -> None:
        self._text = text
        self._tokens = tokens
        self._position = 0

    def parse_type(self) -> TypeExpression:
        token = self._next("type name")
        if token == WILDCARD:
            return self._parse_wildcard()
        if not _is_name(token):
            raise self._error(f"expected a type name, found {token!r}")

        name = token.rsplit(".", 1)[-1]
        arguments: tuple[TypeExpression, ...] = ()
        if self._peek() == "<":
            self._position += 1
            arguments = self._parse_arguments()
        return TypeExpression(
            name=name, arguments=arguments, array_dimensions=self._parse_dimensions()
        )

    def expect_end(self) -> None:
        if self._peek() is not None:
            raise self._error(f"unexpected trailing token {self._peek()!r}")

    def _parse_wildcard(self) -> TypeExpression:
        bound_kind = self._peek()
        if bound_kind not in ("extends", "super"):
            return TypeExpression(name=WILDCARD)
        self._position += 1
        return TypeExpression(name=WILDCARD, bound=self.parse_type(), bound_kind=bound_kind)

    def _parse_arguments(self) -> tuple[TypeExpression, ...]:
        arguments = [self.parse_type()]
        while True:
            token = self._next("',' or '>'")
            if token == ">":
                return tuple(arguments)
            if token != ",":
                raise self._error(f"expected ',' or '>', found {token!r}")
            arguments.append(self.parse_type())

    def _parse_dimensions(self) -> int:
        dimensions = 0
        while self._peek() == "[]":
            self._position += 1
            dimensions += 1
        return dimensions

    def _peek(self) -> str | None:
        if self._position < len(self._tokens):
            return self._tokens[self._position]
        return None

    def _next(self, expected: str) -> str:
        token = self._peek()
        if token is None:
            raise self._error(f"expected {expected} but reached the end")
        self._position += 1
        return token

    def _error(self, detail: str) -> TypeExpressionError:
        return TypeExpressionError(f"Invalid type expression '{self._text}': {detail}.")


def _is_name(token: str) -> bool:
    return token[0].isalpha() or token[0] in "_$"
