# -*- coding: utf-8 -*-
"""
All the valid source tokens found in GraphQL documents (as described in `this
document <http://facebook.github.io/graphql/June2018/#sec-Source-Text>`_) are
encoded as instances of :class:`Token`.
"""

from typing import Any, Type


class Token:
    """ Base token class.

    All token instances can be compared by simple equality, which ignores
    line and column information.

    Attributes:
        kind (str): Human readable kind, used in error messages
        start (int): Starting position for this token (0-indexed)
        end (int): End position for this token (0-indexed, exclusive)
        value (str): Characters making up this token, decoded for strings
        line (int): Line on which the token starts (1-indexed)
        column (int): Column at which the token starts (1-indexed)

    Args:
        start (int): Starting position for this token (0-indexed)
        end (int): End position for this token (0-indexed, exclusive)
        value (str): Characters making up this token
        line (int): Line on which the token starts (1-indexed)
        column (int): Column at which the token starts (1-indexed)
    """

    __slots__ = "start", "end", "value", "line", "column"

    kind = "Token"

    def __init__(
        self, start: int, end: int, value: str, line: int = 1, column: int = 1
    ):
        self.start = start
        self.end = end
        self.value = value
        self.line = line
        self.column = column

    def __repr__(self) -> str:
        return "<Token.%s: value='%s' at (%d, %d) [%d:%d]>" % (
            self.__class__.__name__,
            self,
            self.start,
            self.end,
            self.line,
            self.column,
        )

    def __str__(self) -> str:
        return str(self.value)

    def __eq__(self, rhs: Any) -> bool:
        return (
            self.__class__ is rhs.__class__
            and self.value == rhs.value
            and self.start == rhs.start
            and self.end == rhs.end
        )

    def __hash__(self) -> int:
        return hash((self.__class__, self.value, self.start, self.end))


class ConstToken(Token):
    """
    Encode tokens with constant values. Should not be used directly.
    """

    __slots__ = ()

    value = ""

    def __init__(self, start: int, end: int, line: int = 1, column: int = 1):
        self.start = start
        self.end = end
        self.line = line
        self.column = column


class Punctuator(ConstToken):
    """
    Tokens made of a fixed sequence of characters which are described by
    their value in error messages.
    """

    __slots__ = ()


class SOF(ConstToken):
    __slots__ = ()
    kind = value = "<SOF>"


class EOF(ConstToken):
    __slots__ = ()
    kind = value = "<EOF>"


class ExclamationMark(Punctuator):
    __slots__ = ()
    kind = value = "!"


class Dollar(Punctuator):
    __slots__ = ()
    kind = value = "$"


class Ampersand(Punctuator):
    __slots__ = ()
    kind = value = "&"


class ParenOpen(Punctuator):
    __slots__ = ()
    kind = value = "("


class ParenClose(Punctuator):
    __slots__ = ()
    kind = value = ")"


class Ellip(Punctuator):
    __slots__ = ()
    kind = value = "..."


class Colon(Punctuator):
    __slots__ = ()
    kind = value = ":"


class Equals(Punctuator):
    __slots__ = ()
    kind = value = "="


class At(Punctuator):
    __slots__ = ()
    kind = value = "@"


class BracketOpen(Punctuator):
    __slots__ = ()
    kind = value = "["


class BracketClose(Punctuator):
    __slots__ = ()
    kind = value = "]"


class CurlyOpen(Punctuator):
    __slots__ = ()
    kind = value = "{"


class Pipe(Punctuator):
    __slots__ = ()
    kind = value = "|"


class CurlyClose(Punctuator):
    __slots__ = ()
    kind = value = "}"


class Name(Token):
    __slots__ = ()
    kind = "Name"


class Integer(Token):
    __slots__ = ()
    kind = "Int"


class Float(Token):
    __slots__ = ()
    kind = "Float"


class String(Token):
    __slots__ = ()
    kind = "String"


class BlockString(Token):
    __slots__ = ()
    kind = "BlockString"


class Comment(Token):
    __slots__ = ()
    kind = "Comment"


def describe_kind(kind: Type[Token]) -> str:
    """ Describe a token class for use in error messages.

    >>> describe_kind(Name)
    'Name'

    >>> describe_kind(CurlyOpen)
    '"{"'

    >>> describe_kind(EOF)
    '<EOF>'
    """
    if issubclass(kind, Punctuator):
        return '"%s"' % kind.kind
    return kind.kind


def describe(token: Token) -> str:
    """ Describe a token instance for use in error messages.

    >>> describe(Name(0, 3, "foo"))
    'Name "foo"'

    >>> describe(Ellip(0, 3))
    '"..."'

    >>> describe(EOF(0, 0))
    '<EOF>'
    """
    if isinstance(token, ConstToken):
        return describe_kind(token.__class__)
    return '%s "%s"' % (token.kind, token.value)


__all__ = (
    "Token",
    "SOF",
    "EOF",
    "ExclamationMark",
    "Dollar",
    "Ampersand",
    "ParenOpen",
    "ParenClose",
    "Ellip",
    "Colon",
    "Equals",
    "At",
    "BracketOpen",
    "BracketClose",
    "CurlyOpen",
    "Pipe",
    "CurlyClose",
    "Name",
    "Integer",
    "Float",
    "String",
    "BlockString",
    "Comment",
    "describe",
    "describe_kind",
)
