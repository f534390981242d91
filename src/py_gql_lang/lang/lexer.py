# -*- coding: utf-8 -*-
"""
GraphQL language lexer.
"""

import json
from string import ascii_letters
from typing import Container, List, Mapping, Optional, Tuple, Union

from .._string_utils import parse_block_string
from ..exc import (
    InvalidCharacter,
    InvalidEscapeSequence,
    InvalidNumber,
    NonTerminatedString,
    UnexpectedCharacter,
)
from .source import Source
from .token import (
    EOF,
    SOF,
    Ampersand,
    At,
    BlockString,
    BracketClose,
    BracketOpen,
    Colon,
    Comment,
    CurlyClose,
    CurlyOpen,
    Dollar,
    Ellip,
    Equals,
    ExclamationMark,
    Float,
    Integer,
    Name,
    ParenClose,
    ParenOpen,
    Pipe,
    String,
    Token,
)

IGNORED_CHARS = "\ufeff\t ,"

DIGITS = "0123456789"

HEX_DIGITS = "0123456789abcdefABCDEF"

SYMBOLS = {
    cls.value: cls
    for cls in (
        ExclamationMark,
        Dollar,
        Ampersand,
        ParenOpen,
        ParenClose,
        Colon,
        Equals,
        At,
        BracketOpen,
        BracketClose,
        CurlyOpen,
        Pipe,
        CurlyClose,
    )
}

QUOTED_CHARS = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\u0008",
    "f": "\u000c",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


def _print_char(char: Optional[str]) -> str:
    r"""
    >>> print(_print_char("?"))
    "?"

    >>> print(_print_char("\u0007"))
    "\u0007"

    >>> print(_print_char("\u203b"))
    "\u203B"

    >>> print(_print_char(None))
    <EOF>
    """
    if char is None:
        return "<EOF>"
    if ord(char) < 0x007F:
        return json.dumps(char)
    return '"\\u%04X"' % ord(char)


class Lexer:
    """
    GraphQL language lexer / tokenizer.

    The lexer reads the source lazily, one token at a time, and exposes a
    cursor over the produced tokens: :attr:`token` is the current token,
    :meth:`advance` moves the cursor forward and :meth:`lookahead` peeks at
    upcoming tokens. Tokens are only ever produced once; lookahead results are
    kept in an internal buffer and reused when advancing.

    Comments are recorded in :attr:`comments` but never returned by
    :meth:`advance` or :meth:`lookahead`.

    The lexer can also be iterated over, which yields :class:`~.token.SOF`,
    every token of the document and then :class:`~.token.EOF`.

    Lexer instances are stateful and must not be shared between threads.

    Each call to :meth:`advance` or :meth:`lookahead` will read over as many
    characters as required to form a valid :class:`~.token.Token` and
    otherwise raise :class:`~py_gql_lang.exc.GraphQLSyntaxError`.

    Args:
        source (Union[str, bytes, Source]): Source document.
            Bytestrings will be converted to unicode.

    Attributes:
        line (int): Line of the reading position (1-indexed)
        line_start (int): Position at which the current line starts
        last_token (Token): Token which was current before the last call to
            :meth:`advance`
        comments (List[Token]): Comment tokens read so far
    """

    __slots__ = (
        "_source",
        "_body",
        "_len",
        "_position",
        "_tokens",
        "_cursor",
        "_started",
        "line",
        "line_start",
        "last_token",
        "comments",
    )

    def __init__(self, source: Union[str, bytes, Source]):
        self._source = source if isinstance(source, Source) else Source(source)
        self._body = self._source.body
        self._len = len(self._body)
        self._position = 0
        self._started = False

        self.line = 1
        self.line_start = 0
        self.comments = []  # type: List[Token]

        sof = SOF(0, 0, 1, 1)
        self._tokens = [sof]  # type: List[Token]
        self._cursor = 0
        self.last_token = sof  # type: Token

    @property
    def source(self) -> Source:
        return self._source

    @property
    def token(self) -> Token:
        """ Token: Current token. """
        return self._tokens[self._cursor]

    def advance(self) -> Token:
        """
        Move the cursor forward by one token and return the new current token.

        Advancing past the end of the document keeps returning the
        :class:`~.token.EOF` token.
        """
        self.last_token = self._tokens[self._cursor]
        self.lookahead()
        if self._cursor + 1 < len(self._tokens):
            self._cursor += 1
        return self._tokens[self._cursor]

    def lookahead(self, count: int = 1) -> Token:
        """
        Return an upcoming token without moving the cursor.

        Args:
            count (int): How many tokens to look ahead. ``1`` is the token
                following the current token.

        Raises:
            :py:class:`ValueError`: if ``count`` is not positive
        """
        if count < 1:
            raise ValueError("count must be positive but got %r" % count)

        index = self._cursor + count
        tokens = self._tokens
        while len(tokens) <= index:
            if tokens[-1].__class__ is EOF:
                return tokens[-1]
            tokens.append(self._read_token())
        return tokens[index]

    def __iter__(self) -> "Lexer":
        return self

    def __next__(self) -> Token:
        if not self._started:
            self._started = True
            return self.token

        if self.token.__class__ is EOF:
            raise StopIteration()

        return self.advance()

    def _read_token(self) -> Token:
        while True:
            token = self._read_raw_token()
            if token.__class__ is Comment:
                self.comments.append(token)
            else:
                return token

    def _read_raw_token(self) -> Token:
        """
        Raises:
            :class:`~py_gql_lang.exc.InvalidCharacter`
            :class:`~py_gql_lang.exc.UnexpectedCharacter`
            :class:`~py_gql_lang.exc.InvalidNumber`
            :class:`~py_gql_lang.exc.NonTerminatedString`
            :class:`~py_gql_lang.exc.InvalidEscapeSequence`
        """
        self._read_over_whitespace()

        position = self._position
        line = self.line
        column = 1 + position - self.line_start

        if position >= self._len:
            return EOF(position, position, line, column)

        char = self._body[position]

        if char < " " and char != "\t":
            raise InvalidCharacter(
                "Cannot contain the invalid character %s." % _print_char(char),
                position,
                self._source,
            )

        if char in SYMBOLS:
            self._position += 1
            return SYMBOLS[char](position, position + 1, line, column)
        elif char == "#":
            return self._read_comment(line, column)
        elif char == ".":
            return self._read_ellipsis(line, column)
        elif char == '"':
            if self._body[position : position + 3] == '"""':
                return self._read_block_string(line, column)
            return self._read_string(line, column)
        elif char == "-" or char in DIGITS:
            return self._read_number(line, column)
        elif char == "_" or char in ascii_letters:
            return self._read_name(line, column)
        elif char == "'":
            raise UnexpectedCharacter(
                "Unexpected single quote character ('), "
                'did you mean to use a double quote (")?',
                position,
                self._source,
            )

        raise UnexpectedCharacter(
            "Cannot parse the unexpected character %s." % _print_char(char),
            position,
            self._source,
        )

    def _read_over_whitespace(
        self, __ignored: Container[str] = IGNORED_CHARS
    ) -> None:
        body = self._body
        length = self._len
        pos = self._position

        while pos < length:
            char = body[pos]
            if char in __ignored:
                pos += 1
            elif char == "\n":
                pos += 1
                self.line += 1
                self.line_start = pos
            elif char == "\r":
                pos += 2 if body[pos + 1 : pos + 2] == "\n" else 1
                self.line += 1
                self.line_start = pos
            else:
                break

        self._position = pos

    def _read_comment(self, line: int, column: int) -> Comment:
        body = self._body
        length = self._len
        start = self._position
        pos = start + 1

        while pos < length:
            char = body[pos]
            if char >= " " or char == "\t":
                pos += 1
            else:
                break

        self._position = pos
        return Comment(start, pos, body[start + 1 : pos], line, column)

    def _read_ellipsis(self, line: int, column: int) -> Ellip:
        start = self._position
        if self._body[start : start + 3] != "...":
            raise UnexpectedCharacter(
                'Cannot parse the unexpected character ".".',
                start,
                self._source,
            )
        self._position = start + 3
        return Ellip(start, self._position, line, column)

    def _read_name(
        self, line: int, column: int, __ascii_letters: str = ascii_letters
    ) -> Name:
        body = self._body
        length = self._len
        start = self._position
        pos = start + 1

        while pos < length:
            char = body[pos]
            if char == "_" or char in __ascii_letters or char in DIGITS:
                pos += 1
            else:
                break

        self._position = pos
        return Name(start, pos, body[start:pos], line, column)

    def _read_number(self, line: int, column: int) -> Union[Integer, Float]:
        body = self._body
        start = pos = self._position
        is_float = False

        char = body[pos]  # type: Optional[str]

        if char == "-":
            pos += 1
            char = self._char_at(pos)

        if char == "0":
            pos += 1
            char = self._char_at(pos)
            if char is not None and char in DIGITS:
                raise InvalidNumber(
                    "Invalid number, unexpected digit after 0: %s."
                    % _print_char(char),
                    pos,
                    self._source,
                )
        else:
            pos = self._read_digits(pos)
            char = self._char_at(pos)

        if char == ".":
            is_float = True
            pos = self._read_digits(pos + 1)
            char = self._char_at(pos)

        if char is not None and char in "eE":
            is_float = True
            pos += 1
            char = self._char_at(pos)
            if char is not None and char in "+-":
                pos += 1
            pos = self._read_digits(pos)
            char = self._char_at(pos)

        # Numbers cannot be directly followed by a dot or a name start.
        if char is not None and (
            char == "." or char == "_" or char in ascii_letters
        ):
            raise InvalidNumber(
                "Invalid number, expected digit but got: %s."
                % _print_char(char),
                pos,
                self._source,
            )

        self._position = pos
        value = body[start:pos]
        if is_float:
            return Float(start, pos, value, line, column)
        return Integer(start, pos, value, line, column)

    def _read_digits(self, position: int) -> int:
        char = self._char_at(position)
        if char is None or char not in DIGITS:
            raise InvalidNumber(
                "Invalid number, expected digit but got: %s."
                % _print_char(char),
                position,
                self._source,
            )

        body = self._body
        length = self._len
        while position < length and body[position] in DIGITS:
            position += 1
        return position

    def _char_at(self, position: int) -> Optional[str]:
        if position < self._len:
            return self._body[position]
        return None

    def _read_string(self, line: int, column: int) -> String:
        body = self._body
        length = self._len
        start = self._position
        pos = chunk_start = start + 1
        acc = []  # type: List[str]

        while pos < length:
            char = body[pos]

            if char == '"':
                acc.append(body[chunk_start:pos])
                self._position = pos + 1
                return String(start, pos + 1, "".join(acc), line, column)
            elif char == "\n" or char == "\r":
                break
            elif char < " " and char != "\t":
                raise InvalidCharacter(
                    "Invalid character within String: %s." % _print_char(char),
                    pos,
                    self._source,
                )
            elif char == "\\":
                acc.append(body[chunk_start:pos])
                pos += 1
                if pos >= length:
                    break
                escaped, pos = self._read_escape_sequence(pos)
                acc.append(escaped)
                chunk_start = pos
            else:
                pos += 1

        raise NonTerminatedString(pos, self._source)

    def _read_escape_sequence(
        self, position: int, __quoted_chars: Mapping[str, str] = QUOTED_CHARS
    ) -> Tuple[str, int]:
        char = self._body[position]

        try:
            return __quoted_chars[char], position + 1
        except KeyError:
            pass

        if char == "u":  # unicode character: uXXXX
            escape = self._body[position + 1 : position + 5]
            if len(escape) != 4 or any(c not in HEX_DIGITS for c in escape):
                raise InvalidEscapeSequence(
                    "Invalid character escape sequence: \\u%s." % escape,
                    position,
                    self._source,
                )
            return chr(int(escape, 16)), position + 5

        raise InvalidEscapeSequence(
            "Invalid character escape sequence: \\%s." % char,
            position,
            self._source,
        )

    def _read_block_string(self, line: int, column: int) -> BlockString:
        body = self._body
        length = self._len
        start = self._position
        pos = chunk_start = start + 3
        acc = []  # type: List[str]

        while pos < length:
            char = body[pos]

            if char == '"' and body[pos : pos + 3] == '"""':
                acc.append(body[chunk_start:pos])
                self._position = pos + 3
                return BlockString(
                    start,
                    pos + 3,
                    parse_block_string("".join(acc)),
                    line,
                    column,
                )
            elif char == "\n":
                pos += 1
                self.line += 1
                self.line_start = pos
            elif char == "\r":
                pos += 2 if body[pos + 1 : pos + 2] == "\n" else 1
                self.line += 1
                self.line_start = pos
            elif char < " " and char != "\t":
                raise InvalidCharacter(
                    "Invalid character within String: %s." % _print_char(char),
                    pos,
                    self._source,
                )
            elif char == "\\" and body[pos + 1 : pos + 4] == '"""':
                acc.append(body[chunk_start:pos])
                acc.append('"""')
                pos += 4
                chunk_start = pos
            else:
                pos += 1

        raise NonTerminatedString(pos, self._source)
