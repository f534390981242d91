# -*- coding: utf-8 -*-
"""This module implements all the exceptions exposed by this library."""

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from ._string_utils import highlight_location

if TYPE_CHECKING:  # Fix import cycles of types needed for Mypy checking
    from .lang import ast as _ast  # noqa: F401
    from .lang.source import Source, SourceLocation  # noqa: F401


class GraphQLError(Exception):
    """
    Base GraphQL exception from which all other inherit. You should prefer
    using one of its subclasses most of the time.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigurationError(GraphQLError, ValueError):
    """
    Raised when an object is constructed with invalid configuration such as a
    :class:`~py_gql_lang.lang.source.Source` with a non positive location
    offset.
    """


class GraphQLResponseError(GraphQLError):
    """
    Implementors of this are suitable for usage in GraphQL responses and
    exposing to end users.

    See `the relevant part of the GraphQL specification
    <https://graphql.github.io/graphql-spec/June2018/#sec-Errors>`_ for more
    information on response errors.
    """

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the exception to a dictionnary that can be serialized to
        JSON and exposed in a GraphQL response.

        Returns:
            JSON serializable representation of the error.
        """
        raise NotImplementedError()


class GraphQLSourceError(GraphQLResponseError):
    """
    Error pointing at a specific position of a source document.

    Args:
        message: Explanatory message
        position: 0-indexed position locating the error
        source: Source document from which the error originated

    Attributes:
        message (str): Explanatory message
        position (int): 0-indexed position locating the error
        source (py_gql_lang.lang.source.Source): Source document from which
            the error originated
    """

    def __init__(self, message: str, position: int, source: "Source"):
        super().__init__(message)
        self.source = source
        self.position = position
        self._highlighted = None  # type: Optional[str]

    @property
    def locations(self) -> List["SourceLocation"]:
        """
        List[SourceLocation]: 1-indexed (line, column) of the error, taking
        the source's location offset into account.
        """
        return [self.source.get_location(self.position)]

    @property
    def highlighted(self) -> str:
        """
        str: Message followed by a view of the source document pointing at
        the exact location of the error.
        """
        if self._highlighted is not None:
            return self._highlighted

        highlight = highlight_location(
            self.source.body,
            self.position,
            name=self.source.name,
            location_offset=self.source.location_offset,
        )
        self._highlighted = "%s\n\n%s" % (self.message, highlight)
        return self._highlighted

    def __str__(self) -> str:
        return self.highlighted

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "locations": [
                {"line": loc.line, "column": loc.column}
                for loc in self.locations
            ],
        }


class GraphQLSyntaxError(GraphQLSourceError):
    """
    Syntax error while parsing a GraphQL document (query or schema definition).

    Args:
        description: Explanatory message, without the ``Syntax Error:``
            prefix
        position: 0-indexed position locating the syntax error
        source: Source document from which the syntax error originated

    Attributes:
        description (str): Explanatory message, without the ``Syntax Error:``
            prefix
        message (str): Full message
        position (int): 0-indexed position locating the syntax error
        source (py_gql_lang.lang.source.Source): Source document from which
            the syntax error originated
    """

    def __init__(self, description: str, position: int, source: "Source"):
        super().__init__("Syntax Error: %s" % description, position, source)
        self.description = description


class InvalidCharacter(GraphQLSyntaxError):
    pass


class UnexpectedCharacter(GraphQLSyntaxError):
    pass


class InvalidNumber(UnexpectedCharacter):
    pass


class NonTerminatedString(GraphQLSyntaxError):
    """
    Args:
        position: 0-indexed position locating the syntax error
        source: Source document from which the syntax error originated
    """

    def __init__(self, position: int, source: "Source"):
        super().__init__("Unterminated string.", position, source)


class InvalidEscapeSequence(GraphQLSyntaxError):
    pass


class UnexpectedToken(GraphQLSyntaxError):
    pass


class UnexpectedEOF(UnexpectedToken):
    """
    Args:
        position: 0-indexed position locating the syntax error
        source: Source document from which the syntax error originated
    """

    def __init__(self, position: int, source: "Source"):
        super().__init__("Unexpected <EOF>", position, source)


class ParseDepthExceeded(GraphQLSourceError):
    """
    Raised when a document nests selection sets, values or types deeper than
    the parser accepts.

    Args:
        max_depth: Maximum accepted nesting depth
        position: 0-indexed position of the token opening the offending level
        source: Source document from which the error originated

    Attributes:
        max_depth (int): Maximum accepted nesting depth
    """

    def __init__(self, max_depth: int, position: int, source: "Source"):
        super().__init__(
            "Document exceeds the maximum nesting depth of %d." % max_depth,
            position,
            source,
        )
        self.max_depth = max_depth


class GraphQLLocatedError(GraphQLResponseError):
    """
    Response error that can be traced back to specific position(s) and
    parse node(s) in the source document.

    Args:
        message: Explanatory message
        nodes: Nodes relevant to the exception

    Attributes:
        message (str): Explanatory message
        nodes (List[py_gql_lang.lang.ast.Node]): Nodes relevant to the exception
    """

    def __init__(
        self,
        message: str,
        nodes: Optional[Sequence["_ast.Node"]] = None,
    ):
        super().__init__(message)
        self.nodes = list(nodes[:]) if nodes else []  # type: List[_ast.Node]

    @property
    def locations(self) -> List["SourceLocation"]:
        """
        List[SourceLocation]: Start location of every node which has
        location information.
        """
        return [
            node.loc.source.get_location(node.loc.start)
            for node in self.nodes
            if node.loc is not None and node.loc.source is not None
        ]

    def to_dict(self) -> Dict[str, Any]:
        kv = (
            ("message", str(self)),
            (
                "locations",
                [
                    {"line": loc.line, "column": loc.column}
                    for loc in self.locations
                ],
            ),
        )
        return {k: v for k, v in kv if v}
