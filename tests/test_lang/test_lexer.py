# -*- coding: utf-8 -*-

import pytest

from py_gql_lang.exc import (
    GraphQLSyntaxError,
    InvalidCharacter,
    InvalidEscapeSequence,
    InvalidNumber,
    NonTerminatedString,
    UnexpectedCharacter,
)
from py_gql_lang.lang import Lexer, Source, token


def lex_one(source):
    lexer = Lexer(source)
    assert type(lexer.token) == token.SOF
    return lexer.advance()


def lex_second(source):
    lexer = Lexer(source)
    lexer.advance()
    return lexer.advance()


def test_it_disallows_uncommon_control_characters():
    with pytest.raises(InvalidCharacter) as exc_info:
        lex_one("\u0007")
    assert exc_info.value.position == 0
    assert exc_info.value.message == (
        'Syntax Error: Cannot contain the invalid character "\\u0007".'
    )


def test_lex_with_trailing_whitespace():
    assert [token.SOF(0, 0), token.Name(1, 4, "foo"), token.EOF(9, 9)] == list(
        Lexer(" foo     ")
    )


def test_lex_with_trailing_comment():
    assert [
        token.SOF(0, 0),
        token.Name(1, 4, "foo"),
        token.EOF(11, 11),
    ] == list(Lexer(" foo     \n#"))


def test_it_accepts_bom_header():
    assert lex_one("\uFEFF foo") == token.Name(2, 5, "foo")


def test_it_accepts_binary_type():
    assert lex_one(b"foo") == token.Name(0, 3, "foo")


def test_it_accepts_source_instances():
    assert lex_one(Source("foo", name="Foo")) == token.Name(0, 3, "foo")


def test_it_records_line_and_column():
    tok = lex_one("\n \r\n \r  foo\n")
    assert tok == token.Name(8, 11, "foo")
    assert (tok.line, tok.column) == (4, 3)


def test_it_skips_whitespace_and_comments_1():
    assert (
        lex_one(
            """

    foo


    """
        )
        == token.Name(6, 9, "foo")
    )


def test_it_skips_whitespace_and_comments_2():
    assert (
        lex_one(
            """
    #comment
    foo#comment
    """
        )
        == token.Name(18, 21, "foo")
    )


def test_it_skips_whitespace_and_comments_3():
    assert lex_one(",,,foo,,,") == token.Name(3, 6, "foo")


def test_it_records_comments():
    lexer = Lexer("#first\nfoo # second\n")
    assert list(lexer)[1] == token.Name(7, 10, "foo")
    assert lexer.comments == [
        token.Comment(0, 6, "first"),
        token.Comment(11, 19, " second"),
    ]
    assert (lexer.comments[1].line, lexer.comments[1].column) == (2, 5)


def test_errors_respect_whitespace():
    with pytest.raises(UnexpectedCharacter) as exc_info:
        lex_one(
            """

                ?

            """
        )

    assert str(exc_info.value) == (
        'Syntax Error: Cannot parse the unexpected character "?".\n'
        "\n"
        "GraphQL Request (3:17):\n"
        "  1:\n"
        "  2:\n"
        "  3:                ?\n"
        "                    ^\n"
        "  4:\n"
        "  5:            \n"
    )


def test_errors_respect_location_offset():
    source = Source("\n?", name="foo.graphql", location_offset=(11, 12))
    with pytest.raises(UnexpectedCharacter) as exc_info:
        lex_one(source)

    assert exc_info.value.locations == [(12, 1)]
    assert str(exc_info.value) == (
        'Syntax Error: Cannot parse the unexpected character "?".\n'
        "\n"
        "foo.graphql (12:1):\n"
        "  11:\n"
        "  12:?\n"
        "     ^\n"
    )


@pytest.mark.parametrize(
    "value,expected",
    [
        ('"simple"', token.String(0, 8, "simple")),
        ('" white space "', token.String(0, 15, " white space ")),
        ('"quote \\""', token.String(0, 10, 'quote "')),
        (
            '"escaped \\n\\r\\b\\t\\f"',
            token.String(0, 20, "escaped \n\r\b\t\f"),
        ),
        ('"slashes \\\\ \\/"', token.String(0, 15, "slashes \\ /")),
        (
            '"unicode \\u1234\\u5678\\u90AB\\uCDEF"',
            token.String(0, 34, "unicode \u1234\u5678\u90AB\uCDEF"),
        ),
        ('""', token.String(0, 2, "")),
        ('"tab\tinside"', token.String(0, 12, "tab\tinside")),
    ],
)
def test_it_lexes_strings(value, expected):
    assert lex_one(value) == expected


@pytest.mark.parametrize(
    "value, err_cls, expected_position",
    [
        ('"', NonTerminatedString, 1),
        ('"no end quote', NonTerminatedString, 13),
        ("'single quotes'", UnexpectedCharacter, 0),
        ('"contains unescaped \u0007 control char"', InvalidCharacter, 20),
        ('"null-byte is not \u0000 end of file"', InvalidCharacter, 18),
        ('"multi\nline"', NonTerminatedString, 6),
        ('"multi\rline"', NonTerminatedString, 6),
        ('"\\\\', NonTerminatedString, 3),
        ('"\\', NonTerminatedString, 2),
        ('"\\u', InvalidEscapeSequence, 2),
        ('"bad \\z esc"', InvalidEscapeSequence, 6),
        ('"bad \\x esc"', InvalidEscapeSequence, 6),
        ('"bad \\u1 esc"', InvalidEscapeSequence, 6),
        ('"bad \\u0XX1 esc"', InvalidEscapeSequence, 6),
        ('"bad \\uXXXX esc"', InvalidEscapeSequence, 6),
        ('"bad \\uFXXX esc"', InvalidEscapeSequence, 6),
        ('"bad \\uXXXF esc"', InvalidEscapeSequence, 6),
    ],
)
def test_it_lex_reports_useful_string_errors(value, err_cls, expected_position):
    with pytest.raises(err_cls) as exc_info:
        lex_one(value)
    assert exc_info.value.position == expected_position


@pytest.mark.parametrize(
    "value, expected_message",
    [
        ('"', "Syntax Error: Unterminated string."),
        (
            "'single quotes'",
            "Syntax Error: Unexpected single quote character ('), "
            'did you mean to use a double quote (")?',
        ),
        (
            '"contains unescaped \u0007 control char"',
            'Syntax Error: Invalid character within String: "\\u0007".',
        ),
        (
            '"bad \\z esc"',
            "Syntax Error: Invalid character escape sequence: \\z.",
        ),
        (
            '"bad \\u1 esc"',
            "Syntax Error: Invalid character escape sequence: \\u1 es.",
        ),
        (
            '"bad \\uXXXF esc"',
            "Syntax Error: Invalid character escape sequence: \\uXXXF.",
        ),
    ],
)
def test_it_lex_reports_string_error_messages(value, expected_message):
    with pytest.raises(GraphQLSyntaxError) as exc_info:
        lex_one(value)
    assert exc_info.value.message == expected_message


@pytest.mark.parametrize(
    "value, expected",
    [
        ('"""simple"""', token.BlockString(0, 12, "simple")),
        ('""" white space """', token.BlockString(0, 19, " white space ")),
        (
            '"""contains " quote"""',
            token.BlockString(0, 22, 'contains " quote'),
        ),
        (
            '"""contains \\""" triplequote"""',
            token.BlockString(0, 31, 'contains """ triplequote'),
        ),
        ('"""multi\nline"""', token.BlockString(0, 16, "multi\nline")),
        (
            '"""multi\rline\r\nnormalized"""',
            token.BlockString(0, 28, "multi\nline\nnormalized"),
        ),
        (
            '"""unescaped \\n\\r\\b\\t\\f\\u1234"""',
            token.BlockString(0, 32, "unescaped \\n\\r\\b\\t\\f\\u1234"),
        ),
        (
            '"""slashes \\\\ \\/"""',
            token.BlockString(0, 19, "slashes \\\\ \\/"),
        ),
        (
            '''"""

        spans
          multiple
            lines

        """''',
            token.BlockString(0, 68, "spans\n  multiple\n    lines"),
        ),
    ],
)
def test_it_lexes_block_strings(value, expected):
    assert lex_one(value) == expected


def test_it_tracks_lines_inside_block_strings():
    tok = lex_second('"""\nfoo\r\nbar\rbaz""" qux')
    assert tok == token.Name(20, 23, "qux")
    assert (tok.line, tok.column) == (4, 8)


@pytest.mark.parametrize(
    "value, err_cls, expected_position",
    [
        ('"""', NonTerminatedString, 3),
        ('"""no end quote', NonTerminatedString, 15),
        ('"""contains unescaped \u0007 control char"""', InvalidCharacter, 22),
        ('"""null-byte is not \u0000 end of file"""', InvalidCharacter, 20),
    ],
)
def test_it_lex_reports_useful_block_string_errors(
    value, err_cls, expected_position
):
    with pytest.raises(err_cls) as exc_info:
        lex_one(value)
    assert exc_info.value.position == expected_position


@pytest.mark.parametrize(
    "string, expected",
    [
        ("4", token.Integer(0, 1, "4")),
        ("4.123", token.Float(0, 5, "4.123")),
        ("-4", token.Integer(0, 2, "-4")),
        ("9", token.Integer(0, 1, "9")),
        ("0", token.Integer(0, 1, "0")),
        ("123", token.Integer(0, 3, "123")),
        ("-4.123", token.Float(0, 6, "-4.123")),
        ("0.123", token.Float(0, 5, "0.123")),
        ("123e4", token.Float(0, 5, "123e4")),
        ("123E4", token.Float(0, 5, "123E4")),
        ("123e-4", token.Float(0, 6, "123e-4")),
        ("123e+4", token.Float(0, 6, "123e+4")),
        ("-123e4", token.Float(0, 6, "-123e4")),
        ("-123E4", token.Float(0, 6, "-123E4")),
        ("-123e-4", token.Float(0, 7, "-123e-4")),
        ("-123e+4", token.Float(0, 7, "-123e+4")),
        ("-1.123e4567", token.Float(0, 11, "-1.123e4567")),
        ("1.5e10", token.Float(0, 6, "1.5e10")),
    ],
)
def test_it_lexes_numbers(string, expected):
    assert lex_one(string) == expected


@pytest.mark.parametrize(
    "value, expected_position, expected_message",
    [
        ("00", 1, 'Invalid number, unexpected digit after 0: "0".'),
        ("007", 1, 'Invalid number, unexpected digit after 0: "0".'),
        ("1.", 2, "Invalid number, expected digit but got: <EOF>."),
        ("1.e1", 2, 'Invalid number, expected digit but got: "e".'),
        ("1.A", 2, 'Invalid number, expected digit but got: "A".'),
        ("-A", 1, 'Invalid number, expected digit but got: "A".'),
        ("1.0e", 4, "Invalid number, expected digit but got: <EOF>."),
        ("1.0eA", 4, 'Invalid number, expected digit but got: "A".'),
        ("1.2.3", 3, 'Invalid number, expected digit but got: ".".'),
        ("123abc", 3, 'Invalid number, expected digit but got: "a".'),
        ("1_000", 1, 'Invalid number, expected digit but got: "_".'),
    ],
)
def test_it_lex_reports_useful_number_errors(
    value, expected_position, expected_message
):
    with pytest.raises(InvalidNumber) as exc_info:
        lex_one(value)
    assert exc_info.value.position == expected_position
    assert exc_info.value.description == expected_message


def test_plus_sign_is_not_a_number_prefix():
    with pytest.raises(UnexpectedCharacter) as exc_info:
        lex_one("+1")
    assert exc_info.value.position == 0


@pytest.mark.parametrize(
    "string, expected",
    [
        ("!", token.ExclamationMark(0, 1)),
        ("$", token.Dollar(0, 1)),
        ("(", token.ParenOpen(0, 1)),
        (")", token.ParenClose(0, 1)),
        ("[", token.BracketOpen(0, 1)),
        ("]", token.BracketClose(0, 1)),
        ("{", token.CurlyOpen(0, 1)),
        ("}", token.CurlyClose(0, 1)),
        (":", token.Colon(0, 1)),
        ("=", token.Equals(0, 1)),
        ("@", token.At(0, 1)),
        ("|", token.Pipe(0, 1)),
        ("&", token.Ampersand(0, 1)),
        ("...", token.Ellip(0, 3)),
    ],
)
def test_it_lexes_punctuation(string, expected):
    assert lex_one(string) == expected


@pytest.mark.parametrize(
    "value, pos, expected_message",
    [
        ("..", 0, 'Cannot parse the unexpected character ".".'),
        (".123", 0, 'Cannot parse the unexpected character ".".'),
        ("?", 0, 'Cannot parse the unexpected character "?".'),
        ("\u203B", 0, 'Cannot parse the unexpected character "\\u203B".'),
        ("\u200b", 0, 'Cannot parse the unexpected character "\\u200B".'),
    ],
)
def test_it_lex_reports_useful_unknown_character_error(
    value, pos, expected_message
):
    with pytest.raises(UnexpectedCharacter) as exc_info:
        lex_one(value)
    assert exc_info.value.position == pos
    assert exc_info.value.description == expected_message


def test_it_lexes_multiple_tokens():
    assert (
        list(
            Lexer(
                """
    query {
        Node (search: "foo") {
            id
            name
        }
    }
    """
            )
        )
        == [
            token.SOF(0, 0),
            token.Name(5, 10, "query"),
            token.CurlyOpen(11, 12),
            token.Name(21, 25, "Node"),
            token.ParenOpen(26, 27),
            token.Name(27, 33, "search"),
            token.Colon(33, 34),
            token.String(35, 40, "foo"),
            token.ParenClose(40, 41),
            token.CurlyOpen(42, 43),
            token.Name(56, 58, "id"),
            token.Name(71, 75, "name"),
            token.CurlyClose(84, 85),
            token.CurlyClose(90, 91),
            token.EOF(96, 96),
        ]
    )


def test_lookahead_does_not_move_the_cursor():
    lexer = Lexer("foo bar baz")
    assert lexer.lookahead() == token.Name(0, 3, "foo")
    assert lexer.lookahead(2) == token.Name(4, 7, "bar")
    assert lexer.token == token.SOF(0, 0)

    assert lexer.advance() == token.Name(0, 3, "foo")
    assert lexer.lookahead() == token.Name(4, 7, "bar")
    assert lexer.advance() == token.Name(4, 7, "bar")
    assert lexer.last_token == token.Name(0, 3, "foo")


def test_lookahead_skips_comments():
    lexer = Lexer("foo # comment\nbar")
    lexer.advance()
    assert lexer.lookahead() == token.Name(14, 17, "bar")
    assert lexer.comments == [token.Comment(4, 13, " comment")]


def test_lookahead_past_the_end_returns_eof():
    lexer = Lexer("foo")
    assert lexer.lookahead(5) == token.EOF(3, 3)


@pytest.mark.parametrize("count", [0, -1, -2])
def test_lookahead_rejects_non_positive_count(count):
    lexer = Lexer("foo bar")
    lexer.advance()
    lexer.advance()
    with pytest.raises(ValueError):
        lexer.lookahead(count)
    assert lexer.token == token.Name(4, 7, "bar")


def test_advance_past_the_end_keeps_returning_eof():
    lexer = Lexer("foo")
    lexer.advance()
    assert lexer.advance() == token.EOF(3, 3)
    assert lexer.advance() == token.EOF(3, 3)
    assert lexer.last_token == token.EOF(3, 3)
    assert lexer.token == token.EOF(3, 3)


def test_lexer_iteration_stops_after_eof():
    lexer = Lexer("foo")
    assert list(lexer) == [
        token.SOF(0, 0),
        token.Name(0, 3, "foo"),
        token.EOF(3, 3),
    ]
    assert list(lexer) == []


def test_kitchen_sink(fixture_file):
    source = fixture_file("kitchen-sink.graphql")
    tokens = list(Lexer(source))
    assert type(tokens[0]) == token.SOF
    assert type(tokens[-1]) == token.EOF
    assert all(lhs.end <= rhs.start for lhs, rhs in zip(tokens[1:], tokens[2:]))


def test_schema_kitchen_sink(fixture_file):
    source = fixture_file("schema-kitchen-sink.graphql")
    tokens = list(Lexer(source))
    assert type(tokens[-1]) == token.EOF
