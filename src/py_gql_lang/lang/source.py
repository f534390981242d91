# -*- coding: utf-8 -*-
"""
Source documents.

A :class:`Source` wraps the text of a GraphQL document along with a display
name and an optional location offset, used when the text has been extracted
from a larger file (e.g. a query embedded in a Python module).
"""

from typing import Any, NamedTuple, Tuple, Union

from .._string_utils import ensure_unicode, index_to_loc
from ..exc import ConfigurationError

DEFAULT_SOURCE_NAME = "GraphQL Request"

SourceLocation = NamedTuple("SourceLocation", [("line", int), ("column", int)])


class Source:
    """
    Immutable GraphQL source document.

    Args:
        body (Union[str, bytes]): Source text. Bytestrings will be decoded
            as utf-8.
        name (str): Display name used when reporting errors.
        location_offset (Tuple[int, int]): 1-indexed (line, column) at which
            ``body`` starts in the original file. Both must be positive.

    Raises:
        :class:`~py_gql_lang.exc.ConfigurationError`: if ``location_offset``
            is invalid.
    """

    __slots__ = ("_body", "_name", "_location_offset")

    def __init__(
        self,
        body: Union[str, bytes],
        name: str = DEFAULT_SOURCE_NAME,
        location_offset: Tuple[int, int] = (1, 1),
    ):
        try:
            line, column = location_offset
        except (TypeError, ValueError):
            raise ConfigurationError(
                "location_offset must be a (line, column) pair but got %r"
                % (location_offset,)
            )

        if not _is_positive_int(line):
            raise ConfigurationError(
                "line in location_offset is 1-indexed and must be positive "
                "but got %r" % (line,)
            )

        if not _is_positive_int(column):
            raise ConfigurationError(
                "column in location_offset is 1-indexed and must be positive "
                "but got %r" % (column,)
            )

        self._body = ensure_unicode(body)
        self._name = name
        self._location_offset = (line, column)

    @property
    def body(self) -> str:
        return self._body

    @property
    def name(self) -> str:
        return self._name

    @property
    def location_offset(self) -> Tuple[int, int]:
        return self._location_offset

    def get_location(self, position: int) -> SourceLocation:
        """
        Compute the 1-indexed (line, column) of a 0-indexed position in the
        source, taking the location offset into account.

        Args:
            position: 0-indexed position in :attr:`body`

        Raises:
            :py:class:`IndexError`: if ``position`` is out of bounds
        """
        line, column = index_to_loc(self._body, position)
        line_offset, column_offset = self._location_offset
        if line == 1:
            column += column_offset - 1
        return SourceLocation(line + line_offset - 1, column)

    def __len__(self) -> int:
        return len(self._body)

    def __eq__(self, rhs: Any) -> bool:
        return (
            isinstance(rhs, Source)
            and self._body == rhs._body
            and self._name == rhs._name
            and self._location_offset == rhs._location_offset
        )

    def __hash__(self) -> int:
        return hash((self._body, self._name, self._location_offset))

    def __repr__(self) -> str:
        return "<Source %r (%d characters)>" % (self._name, len(self._body))


def _is_positive_int(value: Any) -> bool:
    return (
        isinstance(value, int) and not isinstance(value, bool) and value > 0
    )
