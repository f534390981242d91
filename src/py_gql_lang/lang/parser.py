# -*- coding: utf-8 -*-

import functools as ft
import logging
from typing import Any, Callable, List, Optional, Type, TypeVar, Union, cast

from ..exc import (
    GraphQLSyntaxError,
    ParseDepthExceeded,
    UnexpectedEOF,
    UnexpectedToken,
)
from . import ast as _ast
from .lexer import Lexer
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
    describe,
    describe_kind,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 128

DIRECTIVE_LOCATIONS = frozenset(
    [
        "QUERY",
        "MUTATION",
        "SUBSCRIPTION",
        "FIELD",
        "FRAGMENT_DEFINITION",
        "FRAGMENT_SPREAD",
        "INLINE_FRAGMENT",
        "VARIABLE_DEFINITION",
        # Type System Definitions
        "SCHEMA",
        "SCALAR",
        "OBJECT",
        "FIELD_DEFINITION",
        "ARGUMENT_DEFINITION",
        "INTERFACE",
        "UNION",
        "ENUM",
        "ENUM_VALUE",
        "INPUT_OBJECT",
        "INPUT_FIELD_DEFINITION",
    ]
)

EXECUTABLE_DEFINITIONS_KEYWORDS = frozenset(
    ["query", "mutation", "subscription", "fragment"]
)

SCHEMA_DEFINITIONS_KEYWORDS = frozenset(
    [
        "schema",
        "scalar",
        "type",
        "interface",
        "union",
        "enum",
        "input",
        "directive",
    ]
)

OPERATION_TYPES_KEYWORDS = frozenset(["query", "mutation", "subscription"])

Kind = Type[Token]
N = TypeVar("N", bound=_ast.Node)


def parse(source: Union[str, bytes, Source], **kwargs: Any) -> _ast.Document:
    """
    Parse a string as a GraphQL Document.

    Args:
        source (Union[str, bytes, Source]): source document.
        **kwargs: Remaining keyword arguments passed to :class:`Parser`

    Raises:
        :class:`~py_gql_lang.exc.GraphQLSyntaxError`: if a syntax error is
            encountered.
        :class:`~py_gql_lang.exc.ParseDepthExceeded`: if the document nests
            deeper than ``max_depth``.

    Returns:
        `py_gql_lang.lang.ast.Document`: Parsed document.
    """
    return Parser(source, **kwargs).parse_document()


def parse_value(
    source: Union[str, bytes, Source], **kwargs: Any
) -> Union[_ast.Variable, _ast.Value]:
    """
    Parse a string as a single GraphQL value.

    This is useful within tools that operate upon GraphQL values (eg. ``[42]``)
    directly and in isolation of complete GraphQL documents.

    Args:
        source (Union[str, bytes, Source]): source document
        **kwargs: Remaining keyword arguments passed to :class:`Parser`

    Raises:
        :class:`~py_gql_lang.exc.GraphQLSyntaxError`: if a syntax error is
            encountered.
    """
    parser = Parser(source, **kwargs)
    parser.expect(SOF)
    value = parser.parse_value_literal(False)
    parser.expect(EOF)
    return value


def parse_type(source: Union[str, bytes, Source], **kwargs: Any) -> _ast.Type:
    """
    Parse a string as a single GraphQL type.

    This is useful within tools that operate upon GraphQL types (eg. ``[Int!]``)
    directly and in isolation of complete GraphQL documents such as when
    building a schema from the SDL or stitching schemas together.

    Args:
        source (Union[str, bytes, Source]): source document
        **kwargs: Remaining keyword arguments passed to :class:`Parser`

    Raises:
        :class:`~py_gql_lang.exc.GraphQLSyntaxError`: if a syntax error is
            encountered.
    """
    parser = Parser(source, **kwargs)
    parser.expect(SOF)
    type_ = parser.parse_type_reference()
    parser.expect(EOF)
    return type_


class Parser:
    """
    GraphQL syntax parser.

    Call :meth:`parse_document` to parse a GraphQL document.

    All ``parse_*`` methods will raise
    :class:`~py_gql_lang.exc.GraphQLSyntaxError` if a syntax error is
    encountered.

    Args:
        source (Union[str, bytes, Source]): source document

        no_location (bool):
            By default, the parser creates AST nodes that know the location
            in the source that they correspond to. This configuration flag
            disables that behavior for performance or testing reasons.

        experimental_fragment_variables (bool):
            If enabled, the parser will understand and parse variable
            definitions contained in a fragment definition. They'll be
            represented in the ``variable_definitions`` field of the
            FragmentDefinition.

            The syntax is identical to normal, query-defined variables,
            for example:

            .. code-block:: graphql

                fragment A($var: Boolean = false) on T  {
                    ...
                }

            Warning:
                This feature is experimental and may change or be removed
                in the future. See https://github.com/graphql/graphql-spec/issues/204
                for the open spec PR.

        allow_legacy_sdl_implements_interfaces (bool):
            If enabled, the parser will accept implemented interfaces
            separated by whitespace instead of ``&`` (e.g.
            ``type Foo implements Bar Baz``) as older versions of the SDL
            did.

        allow_legacy_sdl_empty_fields (bool):
            If enabled, the parser will accept empty field lists (``{}``) in
            type definitions and extensions as older versions of the SDL did.

        max_depth (Optional[int]):
            Maximum nesting of selection sets, list values, object values and
            list types. Exceeding it raises
            :class:`~py_gql_lang.exc.ParseDepthExceeded`. Set to ``None`` to
            disable the check.

            Every nesting level costs 3 to 4 interpreter frames, so the
            default of 128 uses up to ~500 frames of the recursion limit
            (see :func:`sys.getrecursionlimit`). Callers which are already
            deep in the stack should lower ``max_depth`` or raise the
            recursion limit accordingly, otherwise :py:class:`RecursionError`
            can be raised before the check trips.
    """

    __slots__ = (
        "_lexer",
        "_source",
        "_no_location",
        "_experimental_fragment_variables",
        "_allow_legacy_sdl_implements_interfaces",
        "_allow_legacy_sdl_empty_fields",
        "_max_depth",
        "_depth",
    )

    def __init__(
        self,
        source: Union[str, bytes, Source],
        no_location: bool = False,
        experimental_fragment_variables: bool = False,
        allow_legacy_sdl_implements_interfaces: bool = False,
        allow_legacy_sdl_empty_fields: bool = False,
        max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
    ):
        self._lexer = Lexer(source)
        self._source = self._lexer.source

        self._no_location = no_location
        self._experimental_fragment_variables = experimental_fragment_variables
        self._allow_legacy_sdl_implements_interfaces = (
            allow_legacy_sdl_implements_interfaces
        )
        self._allow_legacy_sdl_empty_fields = allow_legacy_sdl_empty_fields
        self._max_depth = max_depth
        self._depth = 0

        logger.debug(
            "Parsing %r (%d characters)", self._source.name, len(self._source)
        )

    @property
    def lexer(self) -> Lexer:
        return self._lexer

    def _loc(self, start: Token) -> Optional[_ast.Loc]:
        if self._no_location:
            return None
        return _ast.Loc(start, self._lexer.last_token, self._source)

    def _descend(self, token: Token) -> None:
        self._depth += 1
        if self._max_depth is not None and self._depth > self._max_depth:
            logger.warning(
                "Parsing %r aborted at position %d: nesting depth exceeds %d",
                self._source.name,
                token.start,
                self._max_depth,
            )
            raise ParseDepthExceeded(self._max_depth, token.start, self._source)

    def _ascend(self) -> None:
        self._depth -= 1

    def peek(self, kind: Kind) -> bool:
        """
        Check whether the current token is of the given kind without advancing
        the parser.

        Args:
            kind: Token kind. Must be a subclass of
                :class:`py_gql_lang.lang.token.Token`
        """
        return self._lexer.token.__class__ is kind

    def unexpected(self, token: Optional[Token] = None) -> GraphQLSyntaxError:
        """
        Build an error for an unexpected token (defaults to the current
        token). The caller is expected to raise it.
        """
        token = token if token is not None else self._lexer.token
        if token.__class__ is EOF:
            return UnexpectedEOF(token.start, self._source)
        return UnexpectedToken(
            "Unexpected %s" % describe(token), token.start, self._source
        )

    def expect(self, kind: Kind) -> Token:
        """
        Check that the current token is of the given token class and advance
        the parser, otherwise raise :class:`~py_gql_lang.exc.UnexpectedToken`.

        Args:
            kind: Expected token kind. Must be a subclass of
                :class:`py_gql_lang.lang.token.Token`
        """
        token = self._lexer.token
        if token.__class__ is kind:
            self._lexer.advance()
            return token

        raise UnexpectedToken(
            "Expected %s, found %s" % (describe_kind(kind), describe(token)),
            token.start,
            self._source,
        )

    def expect_keyword(self, keyword: str) -> Token:
        """
        Check that the current token is a Name with the given value and
        advance the parser, otherwise raise
        :class:`~py_gql_lang.exc.UnexpectedToken`.

        Args:
            keyword (str): Expected keyword
        """
        token = self._lexer.token
        if token.__class__ is Name and token.value == keyword:
            self._lexer.advance()
            return token

        raise UnexpectedToken(
            'Expected "%s", found %s' % (keyword, describe(token)),
            token.start,
            self._source,
        )

    def skip(self, kind: Kind) -> bool:
        """
        If the current token is of the given kind, return ``True`` after
        advancing the parser. Otherwise, do not change the parser state and
        return ``False``.

        Args:
            kind: Token kind to read over. Must be a subclass of
                :class:`py_gql_lang.lang.token.Token`
        """
        if self._lexer.token.__class__ is kind:
            self._lexer.advance()
            return True
        return False

    def skip_keyword(self, keyword: str) -> bool:
        """
        If the current token is a Name with the given value, return ``True``
        after advancing the parser. Otherwise, do not change the parser state
        and return ``False``.

        Args:
            keyword (str): Keyword to read over
        """
        token = self._lexer.token
        if token.__class__ is Name and token.value == keyword:
            self._lexer.advance()
            return True
        return False

    def many(
        self, open_kind: Kind, parse_fn: Callable[[], N], close_kind: Kind
    ) -> List[N]:
        """
        Return a non-empty list of parse nodes, determined by
        ``parse_fn`` which are surrounded by ``open_kind`` and ``close_kind`` tokens.
        Advances the parser to the next lex token after the closing token.

        Args:
            open_kind: Opening token kind. Must be a subclass of
                :class:`py_gql_lang.lang.token.Token`

            parse_fn (callable): Function to call for every item, should be a
                method of the :class:`Parser` instance.

            close_kind: Closing token kind. Must be a subclass of
                :class:`py_gql_lang.lang.token.Token`

        Raises:
            :class:`~py_gql_lang.exc.UnexpectedToken`:
                if opening, entry or closing token do not match.
        """
        self.expect(open_kind)
        nodes = [parse_fn()]
        while not self.skip(close_kind):
            nodes.append(parse_fn())
        return nodes

    def any_(
        self, open_kind: Kind, parse_fn: Callable[[], N], close_kind: Kind
    ) -> List[N]:
        """
        Return a possibly empty list of parse nodes, determined by
        ``parse_fn`` which are surrounded by ``open_kind`` and ``close_kind`` tokens.
        Advances the parser to the next lex token after the closing token.

        Args:
            open_kind: Opening token kind. Must be a subclass of
                :class:`py_gql_lang.lang.token.Token`

            parse_fn (callable): Function to call for every item, should be a
                method of the :class:`Parser` instance.

            close_kind: Closing token kind. Must be a subclass of
                :class:`py_gql_lang.lang.token.Token`

        Raises:
            :class:`~py_gql_lang.exc.UnexpectedToken`:
                if opening, entry or closing token do not match.
        """
        self.expect(open_kind)
        nodes = []
        while not self.skip(close_kind):
            nodes.append(parse_fn())
        return nodes

    def delimited_list(
        self, delimiter: Kind, parse_fn: Callable[[], N]
    ) -> List[N]:
        """
        Return a non-empty list of parse nodes determined by ``parse_fn`` and
        separated by a delimiter token of type ``delimiter``. A leading
        delimiter is allowed. Advances the parser to the next lex token after
        the last item.

        Args:
            delimiter: Delimiter kind. Must be a subclass of
                :class:`py_gql_lang.lang.token.Token`

            parse_fn (callable): Function to call for every item, should be a
                method of the :class:`Parser` instance.
        """
        self.skip(delimiter)
        items = [parse_fn()]
        while self.skip(delimiter):
            items.append(parse_fn())
        return items

    def parse_document(self) -> _ast.Document:
        """
        Document : Definition+
        """
        start = self._lexer.token
        return _ast.Document(
            definitions=self.many(SOF, self.parse_definition, EOF),
            loc=self._loc(start),
        )

    def parse_definition(self) -> _ast.Definition:
        """
        Definition : ExecutableDefinition | TypeSystemDefinition \
        | TypeSystemExtension
        """
        token = self._lexer.token
        if token.__class__ is Name:
            if token.value in EXECUTABLE_DEFINITIONS_KEYWORDS:
                return self.parse_executable_definition()
            elif token.value in SCHEMA_DEFINITIONS_KEYWORDS:
                return self.parse_type_system_definition()
            elif token.value == "extend":
                return self.parse_type_system_extension()
        elif token.__class__ is CurlyOpen:
            return self.parse_executable_definition()
        elif self._peek_description():
            return self.parse_type_system_definition()

        raise self.unexpected()

    def parse_name(self) -> _ast.Name:
        """
        Convert a name lex token into a name parse node.
        """
        token = self.expect(Name)
        return _ast.Name(value=token.value, loc=self._loc(token))

    def parse_executable_definition(self) -> _ast.ExecutableDefinition:
        """
        ExecutableDefinition : OperationDefinition | FragmentDefinition
        """
        token = self._lexer.token
        if token.__class__ is Name:
            if token.value in OPERATION_TYPES_KEYWORDS:
                return self.parse_operation_definition()
            elif token.value == "fragment":
                return self.parse_fragment_definition()
        elif token.__class__ is CurlyOpen:
            return self.parse_operation_definition()
        raise self.unexpected()

    def parse_operation_definition(self) -> _ast.OperationDefinition:
        """
        OperationDefinition : SelectionSet
        | OperationType Name? VariableDefinitions? Directives? SelectionSet
        """
        start = self._lexer.token
        if start.__class__ is CurlyOpen:
            selection_set = self.parse_selection_set()
            return _ast.OperationDefinition(
                operation="query",
                name=None,
                variable_definitions=[],
                directives=[],
                selection_set=selection_set,
                loc=self._loc(start),
            )

        operation = self.parse_operation_type()
        name = self.parse_name() if self.peek(Name) else None
        variable_definitions = self.parse_variable_definitions()
        directives = self.parse_directives(False)
        selection_set = self.parse_selection_set()
        return _ast.OperationDefinition(
            operation=operation,
            name=name,
            variable_definitions=variable_definitions,
            directives=directives,
            selection_set=selection_set,
            loc=self._loc(start),
        )

    def parse_operation_type(self) -> str:
        """
        OperationType : one of "query" "mutation" "subscription"
        """
        token = self.expect(Name)
        if token.value in OPERATION_TYPES_KEYWORDS:
            return token.value
        raise self.unexpected(token)

    def parse_variable_definitions(self) -> List[_ast.VariableDefinition]:
        """
        VariableDefinitions : ( VariableDefinition+ )
        """
        if self.peek(ParenOpen):
            return self.many(
                ParenOpen, self.parse_variable_definition, ParenClose
            )
        return []

    def parse_variable_definition(self) -> _ast.VariableDefinition:
        """
        VariableDefinition : Variable : Type DefaultValue? Directives[Const]?
        """
        start = self._lexer.token
        variable = self.parse_variable()
        self.expect(Colon)
        type_ = self.parse_type_reference()
        default_value = (
            cast(_ast.Value, self.parse_value_literal(True))
            if self.skip(Equals)
            else None
        )
        return _ast.VariableDefinition(
            variable=variable,
            type=type_,
            default_value=default_value,
            directives=self.parse_directives(True),
            loc=self._loc(start),
        )

    def parse_variable(self) -> _ast.Variable:
        """
        Variable : $ Name
        """
        start = self.expect(Dollar)
        return _ast.Variable(name=self.parse_name(), loc=self._loc(start))

    def parse_selection_set(self) -> _ast.SelectionSet:
        """
        SelectionSet : { Selection+ }
        """
        start = self._lexer.token
        self._descend(start)
        selections = self.many(CurlyOpen, self.parse_selection, CurlyClose)
        self._ascend()
        return _ast.SelectionSet(selections=selections, loc=self._loc(start))

    def parse_selection(self) -> _ast.Selection:
        """
        Selection : Field | FragmentSpread | InlineFragment
        """
        if self.peek(Ellip):
            return self.parse_fragment()
        return self.parse_field()

    def parse_field(self) -> _ast.Field:
        """
        Field : Alias? Name Arguments? Directives? SelectionSet?

        - Alias : Name :
        """
        start = self._lexer.token
        name_or_alias = self.parse_name()
        if self.skip(Colon):
            alias = name_or_alias  # type: Optional[_ast.Name]
            name = self.parse_name()  # type: _ast.Name
        else:
            alias, name = None, name_or_alias

        arguments = self.parse_arguments(False)
        directives = self.parse_directives(False)
        selection_set = (
            self.parse_selection_set() if self.peek(CurlyOpen) else None
        )
        return _ast.Field(
            alias=alias,
            name=name,
            arguments=arguments,
            directives=directives,
            selection_set=selection_set,
            loc=self._loc(start),
        )

    def parse_arguments(self, const: bool = False) -> List[_ast.Argument]:
        """
        Arguments[Const] : ( Argument[?Const]+ )

        Args:
            const: Whether or not to parse the Const variant
        """
        if self.peek(ParenOpen):
            return self.many(
                ParenOpen, ft.partial(self.parse_argument, const), ParenClose
            )
        return []

    def parse_argument(self, const: bool = False) -> _ast.Argument:
        """
        Argument[Const] : Name : Value[?Const]

        Args:
            const: Whether or not to parse the Const variant
        """
        start = self._lexer.token
        name = self.parse_name()
        self.expect(Colon)
        return _ast.Argument(
            name=name,
            value=self.parse_value_literal(const),
            loc=self._loc(start),
        )

    def parse_fragment(self) -> Union[_ast.InlineFragment, _ast.FragmentSpread]:
        """
        FragmentSpread | InlineFragment

        - FragmentSpread : ... FragmentName Directives?
        - InlineFragment : ... TypeCondition? Directives? SelectionSet
        """
        start = self.expect(Ellip)

        has_type_condition = self.skip_keyword("on")
        if not has_type_condition and self.peek(Name):
            name = self.parse_fragment_name()
            return _ast.FragmentSpread(
                name=name,
                directives=self.parse_directives(False),
                loc=self._loc(start),
            )

        type_condition = (
            self.parse_named_type() if has_type_condition else None
        )
        directives = self.parse_directives(False)
        selection_set = self.parse_selection_set()
        return _ast.InlineFragment(
            type_condition=type_condition,
            directives=directives,
            selection_set=selection_set,
            loc=self._loc(start),
        )

    def parse_fragment_definition(self) -> _ast.FragmentDefinition:
        """
        FragmentDefinition : \
        fragment FragmentName on TypeCondition Directives? SelectionSet

        - TypeCondition : NamedType
        """
        start = self.expect_keyword("fragment")
        name = self.parse_fragment_name()
        variable_definitions = (
            self.parse_variable_definitions()
            if self._experimental_fragment_variables
            else None
        )
        self.expect_keyword("on")
        type_condition = self.parse_named_type()
        directives = self.parse_directives(False)
        selection_set = self.parse_selection_set()
        return _ast.FragmentDefinition(
            name=name,
            variable_definitions=variable_definitions,
            type_condition=type_condition,
            directives=directives,
            selection_set=selection_set,
            loc=self._loc(start),
        )

    def parse_fragment_name(self) -> _ast.Name:
        """
        FragmentName : Name but not "on"
        """
        token = self._lexer.token
        if token.__class__ is Name and token.value == "on":
            raise self.unexpected()
        return self.parse_name()

    def parse_value_literal(
        self, const: bool = False
    ) -> Union[_ast.Value, _ast.Variable]:
        """
        Value[Const] : [~Const]Variable | IntValue | FloatValue | StringValue \
        | BooleanValue | NullValue | EnumValue \
        | ListValue[?Const] | ObjectValue[?Const]

        - BooleanValue : one of "true" "false"
        - NullValue : "null"
        - EnumValue : Name but not "true", "false" or "null"

        Args:
            const: Whether or not to parse the Const variant
        """
        token = self._lexer.token
        kind = token.__class__
        value = token.value

        if kind is BracketOpen:
            return self.parse_list(const)
        elif kind is CurlyOpen:
            return self.parse_object(const)
        elif kind is Integer:
            self._lexer.advance()
            return _ast.IntValue(value=value, loc=self._loc(token))
        elif kind is Float:
            self._lexer.advance()
            return _ast.FloatValue(value=value, loc=self._loc(token))
        elif kind is String or kind is BlockString:
            return self.parse_string_literal()
        elif kind is Name:
            self._lexer.advance()
            if value in ("true", "false"):
                return _ast.BooleanValue(
                    value=value == "true", loc=self._loc(token)
                )
            elif value == "null":
                return _ast.NullValue(loc=self._loc(token))
            else:
                return _ast.EnumValue(value=value, loc=self._loc(token))
        elif kind is Dollar and not const:
            return self.parse_variable()

        raise self.unexpected()

    def parse_string_literal(self) -> _ast.StringValue:
        token = self._lexer.token
        self._lexer.advance()
        return _ast.StringValue(
            value=token.value,
            block=token.__class__ is BlockString,
            loc=self._loc(token),
        )

    def parse_list(self, const: bool = False) -> _ast.ListValue:
        """
        ListValue[Const] : [ ] | [ Value[?Const]+ ]

        Args:
            const: Whether or not to parse the Const variant
        """
        start = self._lexer.token
        self._descend(start)
        values = self.any_(
            BracketOpen,
            ft.partial(self.parse_value_literal, const),
            BracketClose,
        )
        self._ascend()
        return _ast.ListValue(values=values, loc=self._loc(start))

    def parse_object(self, const: bool = False) -> _ast.ObjectValue:
        """
        ObjectValue[Const] : { } | { ObjectField[?Const]+ }

        Args:
            const: Whether or not to parse the Const variant
        """
        start = self._lexer.token
        self._descend(start)
        fields = self.any_(
            CurlyOpen, ft.partial(self.parse_object_field, const), CurlyClose
        )
        self._ascend()
        return _ast.ObjectValue(fields=fields, loc=self._loc(start))

    def parse_object_field(self, const: bool = False) -> _ast.ObjectField:
        """
        ObjectField[Const] : Name : Value[?Const]

        Args:
            const: Whether or not to parse the Const variant
        """
        start = self._lexer.token
        name = self.parse_name()
        self.expect(Colon)
        return _ast.ObjectField(
            name=name,
            value=self.parse_value_literal(const),
            loc=self._loc(start),
        )

    def parse_directives(self, const: bool = False) -> List[_ast.Directive]:
        """
        Directives[Const] : Directive[?Const]+

        Args:
            const: Whether or not to parse the Const variant
        """
        directives = []
        while self.peek(At):
            directives.append(self.parse_directive(const))
        return directives

    def parse_directive(self, const: bool = False) -> _ast.Directive:
        """
        Directive[Const] : @ Name Arguments[?Const]?

        Args:
            const: Whether or not to parse the Const variant
        """
        start = self.expect(At)
        name = self.parse_name()
        return _ast.Directive(
            name=name,
            arguments=self.parse_arguments(const),
            loc=self._loc(start),
        )

    def parse_type_reference(self) -> _ast.Type:
        """
        Type : NamedType | ListType | NonNullType
        """
        start = self._lexer.token

        if self.skip(BracketOpen):
            self._descend(start)
            inner_type = self.parse_type_reference()
            self.expect(BracketClose)
            self._ascend()
            type_ = _ast.ListType(
                type=inner_type, loc=self._loc(start)
            )  # type: Union[_ast.ListType, _ast.NamedType]
        else:
            type_ = self.parse_named_type()

        if self.skip(ExclamationMark):
            return _ast.NonNullType(type=type_, loc=self._loc(start))

        return type_

    def parse_named_type(self) -> _ast.NamedType:
        """
        NamedType : Name
        """
        start = self._lexer.token
        return _ast.NamedType(name=self.parse_name(), loc=self._loc(start))

    def _peek_description(self) -> bool:
        return self.peek(String) or self.peek(BlockString)

    def parse_type_system_definition(self) -> _ast.TypeSystemDefinition:
        """
        TypeSystemDefinition : SchemaDefinition | TypeDefinition \
        | DirectiveDefinition

        - TypeDefinition : ScalarTypeDefinition | ObjectTypeDefinition \
        | InterfaceTypeDefinition | UnionTypeDefinition | EnumTypeDefinition \
        | InputObjectTypeDefinition
        """
        # Many definitions begin with a description and require a lookahead.
        keyword = (
            self._lexer.lookahead()
            if self._peek_description()
            else self._lexer.token
        )

        if keyword.__class__ is Name:
            if keyword.value == "schema":
                return self.parse_schema_definition()
            elif keyword.value == "scalar":
                return self.parse_scalar_type_definition()
            elif keyword.value == "type":
                return self.parse_object_type_definition()
            elif keyword.value == "interface":
                return self.parse_interface_type_definition()
            elif keyword.value == "union":
                return self.parse_union_type_definition()
            elif keyword.value == "enum":
                return self.parse_enum_type_definition()
            elif keyword.value == "input":
                return self.parse_input_object_type_definition()
            elif keyword.value == "directive":
                return self.parse_directive_definition()

        raise self.unexpected(keyword)

    def parse_description(self) -> Optional[_ast.StringValue]:
        """
        Description : StringValue
        """
        if self._peek_description():
            return self.parse_string_literal()
        return None

    def parse_schema_definition(self) -> _ast.SchemaDefinition:
        """
        SchemaDefinition : \
        Description? schema Directives[Const]? { OperationTypeDefinition+ }
        """
        start = self._lexer.token
        desc = self.parse_description()
        self.expect_keyword("schema")
        directives = self.parse_directives(True)
        operation_types = self.many(
            CurlyOpen, self.parse_operation_type_definition, CurlyClose
        )
        return _ast.SchemaDefinition(
            description=desc,
            directives=directives,
            operation_types=operation_types,
            loc=self._loc(start),
        )

    def parse_operation_type_definition(self) -> _ast.OperationTypeDefinition:
        """
        OperationTypeDefinition : OperationType : NamedType
        """
        start = self._lexer.token
        operation = self.parse_operation_type()
        self.expect(Colon)
        return _ast.OperationTypeDefinition(
            operation=operation,
            type=self.parse_named_type(),
            loc=self._loc(start),
        )

    def parse_scalar_type_definition(self) -> _ast.ScalarTypeDefinition:
        """
        ScalarTypeDefinition : Description? scalar Name Directives[Const]?
        """
        start = self._lexer.token
        desc = self.parse_description()
        self.expect_keyword("scalar")
        name = self.parse_name()
        return _ast.ScalarTypeDefinition(
            description=desc,
            name=name,
            directives=self.parse_directives(True),
            loc=self._loc(start),
        )

    def parse_object_type_definition(self) -> _ast.ObjectTypeDefinition:
        """
        ObjectTypeDefinition : Description? type Name ImplementsInterfaces? \
        Directives[Const]? FieldsDefinition?
        """
        start = self._lexer.token
        desc = self.parse_description()
        self.expect_keyword("type")
        name = self.parse_name()
        interfaces = self.parse_implements_interfaces()
        directives = self.parse_directives(True)
        fields = self.parse_fields_definition()
        return _ast.ObjectTypeDefinition(
            description=desc,
            name=name,
            interfaces=interfaces,
            directives=directives,
            fields=fields,
            loc=self._loc(start),
        )

    def parse_implements_interfaces(self) -> List[_ast.NamedType]:
        """
        ImplementsInterfaces : implements `&`? NamedType \
        | ImplementsInterfaces & NamedType

        With ``allow_legacy_sdl_implements_interfaces`` the ``&`` separator
        is optional.
        """
        types = []
        if self.skip_keyword("implements"):
            self.skip(Ampersand)
            types.append(self.parse_named_type())
            while self.skip(Ampersand) or (
                self._allow_legacy_sdl_implements_interfaces and self.peek(Name)
            ):
                types.append(self.parse_named_type())
        return types

    def parse_fields_definition(self) -> List[_ast.FieldDefinition]:
        """
        FieldsDefinition : { FieldDefinition+ }

        With ``allow_legacy_sdl_empty_fields`` the empty ``{}`` form is
        accepted as well.
        """
        if (
            self._allow_legacy_sdl_empty_fields
            and self.peek(CurlyOpen)
            and self._lexer.lookahead().__class__ is CurlyClose
        ):
            self._lexer.advance()
            self._lexer.advance()
            return []

        if self.peek(CurlyOpen):
            return self.many(CurlyOpen, self.parse_field_definition, CurlyClose)
        return []

    def parse_field_definition(self) -> _ast.FieldDefinition:
        """
        FieldDefinition : \
        Description? Name ArgumentsDefinition? : Type Directives[Const]?
        """
        start = self._lexer.token
        desc, name = self.parse_description(), self.parse_name()
        args = self.parse_argument_definitions()
        self.expect(Colon)
        type_ = self.parse_type_reference()
        return _ast.FieldDefinition(
            description=desc,
            name=name,
            arguments=args,
            type=type_,
            directives=self.parse_directives(True),
            loc=self._loc(start),
        )

    def parse_argument_definitions(self) -> List[_ast.InputValueDefinition]:
        """
        ArgumentsDefinition : ( InputValueDefinition+ )
        """
        return (
            self.many(ParenOpen, self.parse_input_value_definition, ParenClose)
            if self.peek(ParenOpen)
            else []
        )

    def parse_input_value_definition(self) -> _ast.InputValueDefinition:
        """
        InputValueDefinition : \
        Description? Name : Type DefaultValue? Directives[Const]?
        """
        start = self._lexer.token
        desc, name = self.parse_description(), self.parse_name()
        self.expect(Colon)
        type_ = self.parse_type_reference()
        default_value = (
            cast(_ast.Value, self.parse_value_literal(True))
            if self.skip(Equals)
            else None
        )
        return _ast.InputValueDefinition(
            description=desc,
            name=name,
            type=type_,
            default_value=default_value,
            directives=self.parse_directives(True),
            loc=self._loc(start),
        )

    def parse_interface_type_definition(self) -> _ast.InterfaceTypeDefinition:
        """
        InterfaceTypeDefinition : \
        Description? interface Name Directives[Const]? FieldsDefinition?
        """
        start = self._lexer.token
        desc = self.parse_description()
        self.expect_keyword("interface")
        name = self.parse_name()
        directives = self.parse_directives(True)
        return _ast.InterfaceTypeDefinition(
            description=desc,
            name=name,
            directives=directives,
            fields=self.parse_fields_definition(),
            loc=self._loc(start),
        )

    def parse_union_type_definition(self) -> _ast.UnionTypeDefinition:
        """
        UnionTypeDefinition : \
        Description? union Name Directives[Const]? UnionMemberTypes?
        """
        start = self._lexer.token
        desc = self.parse_description()
        self.expect_keyword("union")
        name = self.parse_name()
        directives = self.parse_directives(True)
        return _ast.UnionTypeDefinition(
            description=desc,
            name=name,
            directives=directives,
            types=self.parse_union_member_types(),
            loc=self._loc(start),
        )

    def parse_union_member_types(self) -> List[_ast.NamedType]:
        """
        UnionMemberTypes : = `|`? NamedType | UnionMemberTypes | NamedType
        """
        if self.skip(Equals):
            return self.delimited_list(Pipe, self.parse_named_type)
        return []

    def parse_enum_type_definition(self) -> _ast.EnumTypeDefinition:
        """
        EnumTypeDefinition : \
        Description? enum Name Directives[Const]? EnumValuesDefinition?
        """
        start = self._lexer.token
        desc = self.parse_description()
        self.expect_keyword("enum")
        name = self.parse_name()
        directives = self.parse_directives(True)
        return _ast.EnumTypeDefinition(
            description=desc,
            name=name,
            directives=directives,
            values=self.parse_enum_values_definition(),
            loc=self._loc(start),
        )

    def parse_enum_values_definition(self) -> List[_ast.EnumValueDefinition]:
        """
        EnumValuesDefinition : { EnumValueDefinition+ }
        """
        return (
            self.many(CurlyOpen, self.parse_enum_value_definition, CurlyClose)
            if self.peek(CurlyOpen)
            else []
        )

    def parse_enum_value_definition(self) -> _ast.EnumValueDefinition:
        """
        EnumValueDefinition : Description? EnumValue Directives[Const]?

        - EnumValue : Name
        """
        start = self._lexer.token
        desc, name = self.parse_description(), self.parse_name()
        return _ast.EnumValueDefinition(
            description=desc,
            name=name,
            directives=self.parse_directives(True),
            loc=self._loc(start),
        )

    def parse_input_object_type_definition(
        self,
    ) -> _ast.InputObjectTypeDefinition:
        """
        InputObjectTypeDefinition : \
        Description? input Name Directives[Const]? InputFieldsDefinition?
        """
        start = self._lexer.token
        desc = self.parse_description()
        self.expect_keyword("input")
        name = self.parse_name()
        directives = self.parse_directives(True)
        return _ast.InputObjectTypeDefinition(
            description=desc,
            name=name,
            directives=directives,
            fields=self.parse_input_fields_definition(),
            loc=self._loc(start),
        )

    def parse_input_fields_definition(self) -> List[_ast.InputValueDefinition]:
        """
        InputFieldsDefinition : { InputValueDefinition+ }
        """
        return (
            self.many(CurlyOpen, self.parse_input_value_definition, CurlyClose)
            if self.peek(CurlyOpen)
            else []
        )

    def parse_type_system_extension(self) -> _ast.TypeSystemExtension:
        """
        TypeSystemExtension : SchemaExtension | TypeExtension

        - TypeExtension : ScalarTypeExtension | ObjectTypeExtension | \
        InterfaceTypeExtension | UnionTypeExtension | EnumTypeExtension | \
        InputObjectTypeDefinition
        """
        keyword = self._lexer.lookahead()
        if keyword.__class__ is Name:
            if keyword.value == "schema":
                return self.parse_schema_extension()
            elif keyword.value == "scalar":
                return self.parse_scalar_type_extension()
            elif keyword.value == "type":
                return self.parse_object_type_extension()
            elif keyword.value == "interface":
                return self.parse_interface_type_extension()
            elif keyword.value == "union":
                return self.parse_union_type_extension()
            elif keyword.value == "enum":
                return self.parse_enum_type_extension()
            elif keyword.value == "input":
                return self.parse_input_object_type_extension()

        raise self.unexpected(keyword)

    def parse_schema_extension(self) -> _ast.SchemaExtension:
        """
        SchemaExtension : extend schema Directives[Const]? \
        { OperationTypeDefinition+ } | extend schema Directives[Const]
        """
        start = self.expect_keyword("extend")
        self.expect_keyword("schema")
        directives = self.parse_directives(True)
        operation_types = (
            self.many(
                CurlyOpen, self.parse_operation_type_definition, CurlyClose
            )
            if self.peek(CurlyOpen)
            else []
        )
        if not directives and not operation_types:
            raise self.unexpected()

        return _ast.SchemaExtension(
            directives=directives,
            operation_types=operation_types,
            loc=self._loc(start),
        )

    def parse_scalar_type_extension(self) -> _ast.ScalarTypeExtension:
        """
        ScalarTypeExtension : extend scalar Name Directives[Const]
        """
        start = self.expect_keyword("extend")
        self.expect_keyword("scalar")
        name = self.parse_name()
        directives = self.parse_directives(True)
        if not directives:
            raise self.unexpected()

        return _ast.ScalarTypeExtension(
            name=name, directives=directives, loc=self._loc(start)
        )

    def parse_object_type_extension(self) -> _ast.ObjectTypeExtension:
        """
        ObjectTypeExtension : \
        extend type Name ImplementsInterfaces? Directives[Const]? FieldsDefinition \
        | extend type Name ImplementsInterfaces? Directives[Const] \
        | extend type Name ImplementsInterfaces
        """
        start = self.expect_keyword("extend")
        self.expect_keyword("type")
        name = self.parse_name()
        interfaces = self.parse_implements_interfaces()
        directives = self.parse_directives(True)
        fields = self.parse_fields_definition()
        if not interfaces and not directives and not fields:
            raise self.unexpected()

        return _ast.ObjectTypeExtension(
            name=name,
            interfaces=interfaces,
            directives=directives,
            fields=fields,
            loc=self._loc(start),
        )

    def parse_interface_type_extension(self) -> _ast.InterfaceTypeExtension:
        """
        InterfaceTypeExtension : \
        extend interface Name Directives[Const]? FieldsDefinition \
        | extend interface Name Directives[Const]
        """
        start = self.expect_keyword("extend")
        self.expect_keyword("interface")
        name = self.parse_name()
        directives = self.parse_directives(True)
        fields = self.parse_fields_definition()
        if not directives and not fields:
            raise self.unexpected()

        return _ast.InterfaceTypeExtension(
            name=name,
            directives=directives,
            fields=fields,
            loc=self._loc(start),
        )

    def parse_union_type_extension(self) -> _ast.UnionTypeExtension:
        """
        UnionTypeExtension : \
        | extend union Name Directives[Const]? UnionMemberTypes \
        | extend union Name Directives[Const]
        """
        start = self.expect_keyword("extend")
        self.expect_keyword("union")
        name = self.parse_name()
        directives = self.parse_directives(True)
        types = self.parse_union_member_types()
        if not directives and not types:
            raise self.unexpected()

        return _ast.UnionTypeExtension(
            name=name, directives=directives, types=types, loc=self._loc(start)
        )

    def parse_enum_type_extension(self) -> _ast.EnumTypeExtension:
        """
        EnumTypeExtension : \
        extend enum Name Directives[Const]? EnumValuesDefinition \
        | extend enum Name Directives[Const]
        """
        start = self.expect_keyword("extend")
        self.expect_keyword("enum")
        name = self.parse_name()
        directives = self.parse_directives(True)
        values = self.parse_enum_values_definition()
        if not directives and not values:
            raise self.unexpected()

        return _ast.EnumTypeExtension(
            name=name,
            directives=directives,
            values=values,
            loc=self._loc(start),
        )

    def parse_input_object_type_extension(
        self,
    ) -> _ast.InputObjectTypeExtension:
        """
        InputObjectTypeExtension : \
        extend input Name Directives[Const]? InputFieldsDefinition \
        | extend input Name Directives[Const]
        """
        start = self.expect_keyword("extend")
        self.expect_keyword("input")
        name = self.parse_name()
        directives = self.parse_directives(True)
        fields = self.parse_input_fields_definition()
        if not directives and not fields:
            raise self.unexpected()

        return _ast.InputObjectTypeExtension(
            name=name,
            directives=directives,
            fields=fields,
            loc=self._loc(start),
        )

    def parse_directive_definition(self) -> _ast.DirectiveDefinition:
        """
        DirectiveDefinition : Description? directive @ Name \
        ArgumentsDefinition? on DirectiveLocations
        """
        start = self._lexer.token
        desc = self.parse_description()
        self.expect_keyword("directive")
        self.expect(At)
        name = self.parse_name()
        args = self.parse_argument_definitions()
        self.expect_keyword("on")
        return _ast.DirectiveDefinition(
            description=desc,
            name=name,
            arguments=args,
            locations=self.parse_directive_locations(),
            loc=self._loc(start),
        )

    def parse_directive_locations(self) -> List[_ast.Name]:
        """
        DirectiveLocations : \
        `|`? DirectiveLocation `|` DirectiveLocations `|` DirectiveLocation
        """
        return self.delimited_list(Pipe, self.parse_directive_location)

    def parse_directive_location(self) -> _ast.Name:
        """
        DirectiveLocation : ExecutableDirectiveLocation \
        | TypeSystemDirectiveLocation

        - ExecutableDirectiveLocation : one of QUERY MUTATION SUBSCRIPTION FIELD \
        FRAGMENT_DEFINITION FRAGMENT_SPREAD INLINE_FRAGMENT VARIABLE_DEFINITION

        - TypeSystemDirectiveLocation : one of SCHEMA SCALAR OBJECT FIELD_DEFINITION \
        ARGUMENT_DEFINITION INTERFACE UNION ENUM ENUM_VALUE INPUT_OBJECT \
        INPUT_FIELD_DEFINITION
        """
        start = self._lexer.token
        name = self.parse_name()
        if name.value in DIRECTIVE_LOCATIONS:
            return name
        raise self.unexpected(start)
