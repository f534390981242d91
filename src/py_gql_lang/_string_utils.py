# -*- coding: utf-8 -*-
""" Work with strings """

import re
from typing import List, Optional, Tuple, Union

LINE_SEPARATOR = re.compile(r"\r\n|[\n\r]")


def ensure_unicode(string: Union[str, bytes]) -> str:
    if isinstance(string, bytes):
        return string.decode("utf8")
    return string


def leading_whitespace(string: str) -> int:
    r"""
    Args:
        string (str): Input value

    Returns:
        int: Length of the leading run of spaces and tabs

    >>> leading_whitespace('  \t  foo')
    5

    >>> leading_whitespace('foo')
    0

    >>> leading_whitespace('   ')
    3
    """
    index = 0
    length = len(string)
    while index < length and string[index] in " \t":
        index += 1
    return index


def is_blank(string: str) -> bool:
    """
    Args:
        string (str): Input value

    Returns:
        bool: Whether the string is only made of spaces and tabs
    """
    return leading_whitespace(string) == len(string)


def parse_block_string(raw_string: str) -> str:
    r""" Parse a raw string according to the GraphQL spec's BlockStringValue()
    http://facebook.github.io/graphql/draft/#BlockStringValue() static
    algorithm. Similar to Coffeescript's block string, Python's inspect.cleandoc
    or Ruby's strip_heredoc.

    Compared to Python's default behaviour, this does not remove leading
    whitespace from the first line.

    >>> parse_block_string('\n    Hello,\n      World!\n\n    Yours,\n    ')
    'Hello,\n  World!\n\nYours,'

    >>> parse_block_string(' simple ')
    ' simple '
    """
    lines = LINE_SEPARATOR.split(raw_string)

    common_indent = None  # type: Optional[int]
    for line in lines[1:]:
        indent = leading_whitespace(line)
        if indent == len(line):
            continue
        if common_indent is None or indent < common_indent:
            common_indent = indent
            if common_indent == 0:
                break

    if common_indent:
        for i in range(1, len(lines)):
            lines[i] = lines[i][common_indent:]

    while lines and is_blank(lines[0]):
        lines.pop(0)

    while lines and is_blank(lines[-1]):
        lines.pop()

    return "\n".join(lines)


def index_to_loc(body: str, position: int) -> Tuple[int, int]:
    r""" Get the (line number, column number) tuple from a zero-indexed offset.

    All of ``\n``, ``\r\n`` and ``\r`` are considered line terminators.

    Args:
        body (str): Source string
        position (int): 0-indexed position of the character

    Returns:
        Tuple[int, int]: (line number, column number)

    Raises:
        :py:class:`IndexError`: if ``position`` is out of bounds

    >>> index_to_loc("ab\ncd\ne", 0)
    (1, 1)

    >>> index_to_loc("ab\ncd\ne", 3)
    (2, 1)

    >>> index_to_loc("ab\r\ncd\re", 7)
    (3, 1)

    >>> index_to_loc("", 0)
    (1, 1)

    >>> index_to_loc("{", 1)
    (1, 2)

    >>> index_to_loc("", 42)
    Traceback (most recent call last):
        ...
    IndexError: 42
    """
    if position > len(body) or position < 0:
        raise IndexError(position)

    line, line_start = 1, 0
    for match in LINE_SEPARATOR.finditer(body):
        if match.end() > position:
            break
        line += 1
        line_start = match.end()
    return (line, position - line_start + 1)


def highlight_location(
    body: str,
    position: int,
    delta: int = 2,
    name: Optional[str] = None,
    location_offset: Tuple[int, int] = (1, 1),
) -> str:
    """ Nicely format a highlited view of a position into a source string.

    Args:
        body (str): Source string
        position (int): 0-indexed position of the character
        delta (int): How many lines around the position should this conserve
        name (Optional[str]): Source name to include in the header
        location_offset (Tuple[int, int]): 1-indexed (line, column) at which
            ``body`` starts in its original file. Only used for display.

    Returns:
        str: Formatted view
    """
    line, col = index_to_loc(body, position)
    line_index = line - 1
    lines = LINE_SEPARATOR.split(body)
    min_line = max(0, line_index - delta)
    max_line = min(line_index + delta, len(lines) - 1)

    line_offset = location_offset[0] - 1
    display_col = col + (location_offset[1] - 1 if line == 1 else 0)
    pad_len = len(str(max_line + 1 + line_offset))

    def lineno(index: int) -> str:
        return str(index + 1 + line_offset).zfill(pad_len)

    output = [
        "%s(%d:%d):"
        % ("%s " % name if name else "", line + line_offset, display_col)
    ]  # type: List[str]
    output.extend(
        "  %s:%s" % (lineno(i), lines[i]) for i in range(min_line, line_index)
    )
    output.append("  %s:%s" % (lineno(line_index), lines[line_index]))
    output.append(" " * (2 + pad_len + col) + "^")
    output.extend(
        "  %s:%s" % (lineno(i), lines[i])
        for i in range(line_index + 1, max_line + 1)
    )
    return "\n".join(output) + "\n"
