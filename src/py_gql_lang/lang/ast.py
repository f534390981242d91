# -*- coding: utf-8 -*-
"""
GraphQL AST representations corresponding to the `GraphQL language elements
<http://facebook.github.io/graphql/June2018/#sec-Language/#sec-Language>`_.

Every node carries a :class:`Loc` in its ``loc`` attribute (or ``None`` when
the document was parsed with ``no_location=True``) which points back to the
:class:`~py_gql_lang.lang.source.Source` and the tokens it was parsed from.
"""

import copy
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Iterator,
    List,
    Optional,
    Sequence,
    Union,
    cast,
)

if TYPE_CHECKING:  # Fix import cycles of types needed for Mypy checking
    from .source import Source  # noqa: F401
    from .token import Token  # noqa: F401


class Loc:
    """
    Source range of a node.

    Locations compare equal to other locations and to ``(start, end)`` tuples
    covering the same range.

    Args:
        start_token (Token): First token of the node
        end_token (Token): Last token of the node
        source (Source): Source document the node was parsed from

    Attributes:
        start (int): Position of the first character of the node (0-indexed)
        end (int): Position following the last character of the node
        start_token (Token): First token of the node
        end_token (Token): Last token of the node
        source (Source): Source document the node was parsed from
    """

    __slots__ = ("start", "end", "start_token", "end_token", "source")

    def __init__(
        self, start_token: "Token", end_token: "Token", source: "Source"
    ):
        self.start = start_token.start
        self.end = end_token.end
        self.start_token = start_token
        self.end_token = end_token
        self.source = source

    def __eq__(self, rhs: Any) -> bool:
        if isinstance(rhs, Loc):
            return self.start == rhs.start and self.end == rhs.end
        if isinstance(rhs, tuple):
            return (self.start, self.end) == rhs
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.start, self.end))

    def __repr__(self) -> str:
        return "<Loc %d:%d>" % (self.start, self.end)

    def __copy__(self) -> "Loc":
        return self

    def __deepcopy__(self, memo: Any) -> "Loc":
        return self


class Node:
    """
    Base AST node.
    """

    __slots__ = ()

    loc = None  # type: Optional[Loc]

    @property
    def source(self) -> Optional["Source"]:
        """
        Optional[Source]: Source document this node was parsed from if it
        has location information.
        """
        return self.loc.source if self.loc is not None else None

    def _props(self) -> Iterator[str]:
        for attr in cast(Sequence[str], self.__slots__):
            yield attr

    def __eq__(self, rhs: Any) -> bool:
        return type(rhs) == type(self) and all(
            getattr(self, attr) == getattr(rhs, attr) for attr in self._props()
        )

    def __hash__(self) -> int:
        return id(self)

    def __repr__(self) -> str:
        return "<%s %s>" % (
            self.__class__.__name__,
            ", ".join(
                "%s=%s" % (attr, getattr(self, attr)) for attr in self._props()
            ),
        )

    def __copy__(self):
        return self.__class__(  # type: ignore
            **{k: getattr(self, k) for k in self.__slots__}  # type: ignore
        )

    def __deepcopy__(self, memo):
        return self.__class__(  # type: ignore
            **{  # type: ignore
                k: copy.deepcopy(getattr(self, k), memo) for k in self.__slots__
            }
        )

    copy = __copy__

    def deepcopy(self):
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the current node and all of its children to a JSON serializable
        format.

        This is mostly useful for testing and when you need to convert nodes to
        JSON such as interop with other languages and serialisation.

        The conversion rules are:

        - Each `Node` subclass is converted to a dict of their own converted
          attributes adding a ``__kind__`` key corresponding to the node's
          classname.
        - :class:`Loc` instances are converted to ``(start, end)`` tuples.
        - Primitive values (int, strings, etc.) are left as is.
        - Lists are converted per-element.

        Returns:
            Dict[str, Any]: Converted value
        """
        return cast(Dict[str, Any], _ast_to_json(self))


class Name(Node):
    __slots__ = ("loc", "value")

    def __init__(self, value: str, loc: Optional[Loc] = None):
        self.value = value
        self.loc = loc


class Definition(Node):
    pass


class ExecutableDefinition(Definition):
    pass


class Value(Node):
    pass


class Type(Node):
    pass


class SupportDirectives:
    directives = NotImplemented  # type: List["Directive"]


class NamedType(Type):
    __slots__ = ("loc", "name")

    def __init__(self, name: Name, loc: Optional[Loc] = None):
        self.name = name
        self.loc = loc


class ListType(Type):
    __slots__ = ("loc", "type")

    def __init__(self, type: Type, loc: Optional[Loc] = None):
        self.type = type
        self.loc = loc


class NonNullType(Type):
    __slots__ = ("loc", "type")

    def __init__(
        self, type: Union[NamedType, ListType], loc: Optional[Loc] = None
    ):
        self.type = type
        self.loc = loc


class Document(Node):
    __slots__ = ("loc", "definitions")

    def __init__(
        self,
        definitions: Optional[List[Definition]] = None,
        loc: Optional[Loc] = None,
    ):
        self.definitions = definitions or []  # type: List[Definition]
        self.loc = loc

    @property
    def fragments(self) -> Dict[str, "FragmentDefinition"]:
        return {
            f.name.value: f
            for f in self.definitions
            if isinstance(f, FragmentDefinition)
        }


class OperationDefinition(SupportDirectives, ExecutableDefinition):
    __slots__ = (
        "loc",
        "operation",
        "name",
        "variable_definitions",
        "directives",
        "selection_set",
    )

    def __init__(
        self,
        operation: str,
        selection_set,  # type: SelectionSet
        name: Optional[Name] = None,
        variable_definitions=None,  # type: Optional[List[VariableDefinition]]
        directives=None,  # type: Optional[List[Directive]]
        loc: Optional[Loc] = None,
    ):
        self.operation = operation
        self.name = name
        self.selection_set = selection_set
        self.variable_definitions = (
            variable_definitions or []
        )  # type: List[VariableDefinition]
        self.directives = directives or []  # type: List[Directive]
        self.loc = loc


class Variable(Node):
    __slots__ = ("loc", "name")

    def __init__(self, name: Name, loc: Optional[Loc] = None):
        self.name = name
        self.loc = loc


class VariableDefinition(SupportDirectives, Node):
    __slots__ = ("loc", "variable", "type", "default_value", "directives")

    def __init__(
        self,
        variable: Variable,
        type: Type,
        default_value=None,  # type: Optional[Value]
        directives=None,  # type: Optional[List[Directive]]
        loc: Optional[Loc] = None,
    ):
        self.variable = variable
        self.type = type
        self.default_value = default_value
        self.directives = directives or []  # type: List[Directive]
        self.loc = loc


class Selection(Node):
    pass


class SelectionSet(Node):
    __slots__ = ("loc", "selections")

    def __init__(
        self,
        selections: Optional[List[Selection]] = None,
        loc: Optional[Loc] = None,
    ):
        self.selections = selections or []  # type: List[Selection]
        self.loc = loc


class Field(SupportDirectives, Selection):
    __slots__ = (
        "loc",
        "name",
        "alias",
        "arguments",
        "directives",
        "selection_set",
    )

    def __init__(
        self,
        name: Name,
        alias: Optional[Name] = None,
        arguments=None,  # type: Optional[List[Argument]]
        directives=None,  # type: Optional[List[Directive]]
        selection_set: Optional[SelectionSet] = None,
        loc: Optional[Loc] = None,
    ):
        self.alias = alias
        self.name = name
        self.arguments = arguments or []  # type: List[Argument]
        self.directives = directives or []  # type: List[Directive]
        self.selection_set = selection_set
        self.loc = loc

    @property
    def response_name(self) -> str:
        return self.alias.value if self.alias else self.name.value


class Argument(Node):
    __slots__ = ("loc", "name", "value")

    def __init__(
        self,
        name: Name,
        value: Union[Value, Variable],
        loc: Optional[Loc] = None,
    ):
        self.name = name
        self.value = value
        self.loc = loc


class FragmentSpread(SupportDirectives, Selection):
    __slots__ = ("loc", "name", "directives")

    def __init__(
        self,
        name: Name,
        directives=None,  # type: Optional[List[Directive]]
        loc: Optional[Loc] = None,
    ):
        self.name = name
        self.directives = directives or []  # type: List[Directive]
        self.loc = loc


class InlineFragment(SupportDirectives, Selection):
    __slots__ = ("loc", "type_condition", "directives", "selection_set")

    def __init__(
        self,
        selection_set: SelectionSet,
        type_condition: Optional[NamedType] = None,
        directives=None,  # type: Optional[List[Directive]]
        loc: Optional[Loc] = None,
    ):
        self.type_condition = type_condition
        self.directives = directives or []  # type: List[Directive]
        self.selection_set = selection_set
        self.loc = loc


class FragmentDefinition(SupportDirectives, ExecutableDefinition):
    __slots__ = (
        "loc",
        "name",
        "variable_definitions",
        "type_condition",
        "directives",
        "selection_set",
    )

    def __init__(
        self,
        name: Name,
        type_condition: NamedType,
        selection_set: SelectionSet,
        variable_definitions: Optional[List[VariableDefinition]] = None,
        directives=None,  # type: Optional[List[Directive]]
        loc: Optional[Loc] = None,
    ):
        self.name = name
        self.variable_definitions = (
            variable_definitions or []
        )  # type: List[VariableDefinition]
        self.type_condition = type_condition
        self.directives = directives or []  # type: List[Directive]
        self.selection_set = selection_set
        self.loc = loc


class _StringValue(Value):
    __slots__ = ("loc", "value")

    def __init__(self, value: str, loc: Optional[Loc] = None):
        self.value = value
        self.loc = loc

    def __str__(self):
        return str(self.value)


class IntValue(_StringValue):
    pass


class FloatValue(_StringValue):
    pass


class StringValue(Value):
    __slots__ = ("loc", "value", "block")

    def __init__(
        self, value: str, block: bool = False, loc: Optional[Loc] = None
    ):
        self.value = value
        self.block = block
        self.loc = loc

    def __str__(self):
        if self.block:
            return '"""%s"""' % self.value
        else:
            return '"%s"' % self.value


class BooleanValue(Value):
    __slots__ = ("loc", "value")

    def __init__(self, value: bool, loc: Optional[Loc] = None):
        self.value = value
        self.loc = loc

    def __str__(self):
        return str(self.value).lower()


class NullValue(Value):
    __slots__ = ("loc",)

    def __init__(self, loc: Optional[Loc] = None):
        self.loc = loc

    def __str__(self):
        return "null"


class EnumValue(_StringValue):
    pass


class ListValue(Value):
    __slots__ = ("loc", "values")

    def __init__(
        self,
        values: List[Union[Value, Variable]],
        loc: Optional[Loc] = None,
    ):
        self.values = values
        self.loc = loc


class ObjectValue(Value):
    __slots__ = ("loc", "fields")

    def __init__(
        self,
        fields,  # type: List[ObjectField]
        loc: Optional[Loc] = None,
    ):
        self.fields = fields or []
        self.loc = loc


class ObjectField(Node):
    __slots__ = ("loc", "name", "value")

    def __init__(
        self,
        name: Name,
        value: Union[Value, Variable],
        loc: Optional[Loc] = None,
    ):
        self.name = name
        self.value = value
        self.loc = loc


class Directive(Node):
    __slots__ = ("loc", "name", "arguments")

    def __init__(
        self,
        name: Name,
        arguments: Optional[List[Argument]] = None,
        loc: Optional[Loc] = None,
    ):
        self.name = name
        self.arguments = arguments or []  # type: List[Argument]
        self.loc = loc


class SupportDescription:
    description = NotImplemented  # type: Optional[StringValue]


class TypeSystemDefinition(SupportDirectives, Definition):
    pass


class SchemaDefinition(SupportDescription, TypeSystemDefinition):
    __slots__ = ("loc", "description", "directives", "operation_types")

    def __init__(
        self,
        directives: Optional[List[Directive]] = None,
        operation_types=None,  # type: Optional[List[OperationTypeDefinition]]
        loc: Optional[Loc] = None,
        description: Optional[StringValue] = None,
    ):
        self.directives = directives or []  # type: List[Directive]
        self.operation_types = (
            operation_types or []
        )  # type: List[OperationTypeDefinition]
        self.loc = loc
        self.description = description


class OperationTypeDefinition(Node):
    __slots__ = ("loc", "operation", "type")

    def __init__(
        self, operation: str, type: NamedType, loc: Optional[Loc] = None
    ):
        self.operation = operation
        self.type = type
        self.loc = loc


class TypeDefinition(SupportDescription, TypeSystemDefinition):
    name = NotImplemented  # type:  Name


class ScalarTypeDefinition(TypeDefinition):
    __slots__ = ("loc", "description", "name", "directives")

    def __init__(
        self,
        name: Name,
        directives: Optional[List[Directive]] = None,
        loc: Optional[Loc] = None,
        description: Optional[StringValue] = None,
    ):
        self.name = name
        self.directives = directives or []  # type: List[Directive]
        self.loc = loc
        self.description = description


class ObjectTypeDefinition(TypeDefinition):
    __slots__ = (
        "loc",
        "description",
        "name",
        "interfaces",
        "directives",
        "fields",
    )

    def __init__(
        self,
        name: Name,
        interfaces: Optional[List[NamedType]] = None,
        directives: Optional[List[Directive]] = None,
        fields=None,  # type: Optional[List[FieldDefinition]]
        loc: Optional[Loc] = None,
        description: Optional[StringValue] = None,
    ):
        self.name = name
        self.interfaces = interfaces or []  # type: List[NamedType]
        self.directives = directives or []  # type: List[Directive]
        self.fields = fields or []  # type: List[FieldDefinition]
        self.loc = loc
        self.description = description


class FieldDefinition(SupportDirectives, SupportDescription, Node):
    __slots__ = (
        "loc",
        "description",
        "name",
        "arguments",
        "type",
        "directives",
    )

    def __init__(
        self,
        name: Name,
        type: Type,
        arguments: Optional[List["InputValueDefinition"]] = None,
        directives: Optional[List[Directive]] = None,
        loc: Optional[Loc] = None,
        description: Optional[StringValue] = None,
    ):
        self.name = name
        self.arguments = arguments or []  # type: List[InputValueDefinition]
        self.type = type
        self.directives = directives or []  # type: List[Directive]
        self.loc = loc
        self.description = description


class InputValueDefinition(SupportDirectives, SupportDescription, Node):
    __slots__ = (
        "loc",
        "description",
        "name",
        "type",
        "default_value",
        "directives",
    )

    def __init__(
        self,
        name: Name,
        type: Type,
        default_value: Optional[Value] = None,
        directives: Optional[List[Directive]] = None,
        loc: Optional[Loc] = None,
        description: Optional[StringValue] = None,
    ):
        self.name = name
        self.type = type
        self.default_value = default_value
        self.directives = directives or []  # type: List[Directive]
        self.loc = loc
        self.description = description


class InterfaceTypeDefinition(TypeDefinition):
    __slots__ = ("loc", "description", "name", "directives", "fields")

    def __init__(
        self,
        name: Name,
        directives: Optional[List[Directive]] = None,
        fields: Optional[List[FieldDefinition]] = None,
        loc: Optional[Loc] = None,
        description: Optional[StringValue] = None,
    ):
        self.name = name
        self.directives = directives or []  # type: List[Directive]
        self.fields = fields or []  # type: List[FieldDefinition]
        self.loc = loc
        self.description = description


class UnionTypeDefinition(TypeDefinition):
    __slots__ = ("loc", "description", "name", "directives", "types")

    def __init__(
        self,
        name: Name,
        directives: Optional[List[Directive]] = None,
        types: Optional[List[NamedType]] = None,
        loc: Optional[Loc] = None,
        description: Optional[StringValue] = None,
    ):
        self.name = name
        self.directives = directives or []  # type: List[Directive]
        self.types = types or []  # type: List[NamedType]
        self.loc = loc
        self.description = description


class EnumTypeDefinition(TypeDefinition):
    __slots__ = ("loc", "description", "name", "directives", "values")

    def __init__(
        self,
        name: Name,
        directives: Optional[List[Directive]] = None,
        values=None,  # type: Optional[List[EnumValueDefinition]]
        loc: Optional[Loc] = None,
        description: Optional[StringValue] = None,
    ):
        self.name = name
        self.directives = directives or []  # type: List[Directive]
        self.values = values or []  # type: List[EnumValueDefinition]
        self.loc = loc
        self.description = description


class EnumValueDefinition(SupportDirectives, SupportDescription, Node):
    __slots__ = ("loc", "description", "name", "directives")

    def __init__(
        self,
        name: Name,
        directives: Optional[List[Directive]] = None,
        loc: Optional[Loc] = None,
        description: Optional[StringValue] = None,
    ):
        self.name = name
        self.directives = directives or []  # type: List[Directive]
        self.loc = loc
        self.description = description


class InputObjectTypeDefinition(TypeDefinition):
    __slots__ = ("loc", "description", "name", "directives", "fields")

    def __init__(
        self,
        name: Name,
        directives: Optional[List[Directive]] = None,
        fields: Optional[List[InputValueDefinition]] = None,
        loc: Optional[Loc] = None,
        description: Optional[StringValue] = None,
    ):
        self.name = name
        self.directives = directives or []  # type: List[Directive]
        self.fields = fields or []  # type: List[InputValueDefinition]
        self.loc = loc
        self.description = description


class TypeSystemExtension(TypeSystemDefinition):
    pass


class SchemaExtension(TypeSystemExtension):
    __slots__ = ("loc", "directives", "operation_types")

    def __init__(
        self,
        directives: Optional[List[Directive]] = None,
        operation_types: Optional[List[OperationTypeDefinition]] = None,
        loc: Optional[Loc] = None,
    ):
        self.directives = directives or []  # type: List[Directive]
        self.operation_types = (
            operation_types or []
        )  # type: List[OperationTypeDefinition]
        self.loc = loc


class TypeExtension(TypeSystemExtension):
    name = NotImplemented  # type: Name


class ScalarTypeExtension(TypeExtension):
    __slots__ = ("loc", "name", "directives")

    def __init__(
        self,
        name: Name,
        directives: Optional[List[Directive]] = None,
        loc: Optional[Loc] = None,
    ):
        self.name = name
        self.directives = directives or []  # type: List[Directive]
        self.loc = loc


class ObjectTypeExtension(TypeExtension):
    __slots__ = ("loc", "name", "interfaces", "directives", "fields")

    def __init__(
        self,
        name: Name,
        interfaces: Optional[List[NamedType]] = None,
        directives: Optional[List[Directive]] = None,
        fields=None,  # type: Optional[List[FieldDefinition]]
        loc: Optional[Loc] = None,
    ):
        self.name = name
        self.interfaces = interfaces or []  # type: List[NamedType]
        self.directives = directives or []  # type: List[Directive]
        self.fields = fields or []  # type: List[FieldDefinition]
        self.loc = loc


class InterfaceTypeExtension(TypeExtension):
    __slots__ = ("loc", "name", "directives", "fields")

    def __init__(
        self,
        name: Name,
        directives: Optional[List[Directive]] = None,
        fields: Optional[List[FieldDefinition]] = None,
        loc: Optional[Loc] = None,
    ):
        self.name = name
        self.directives = directives or []  # type: List[Directive]
        self.fields = fields or []  # type: List[FieldDefinition]
        self.loc = loc


class UnionTypeExtension(TypeExtension):
    __slots__ = ("loc", "name", "directives", "types")

    def __init__(
        self,
        name: Name,
        directives: Optional[List[Directive]] = None,
        types: Optional[List[NamedType]] = None,
        loc: Optional[Loc] = None,
    ):
        self.name = name
        self.directives = directives or []  # type: List[Directive]
        self.types = types or []  # type: List[NamedType]
        self.loc = loc


class EnumTypeExtension(TypeExtension):
    __slots__ = ("loc", "name", "directives", "values")

    def __init__(
        self,
        name: Name,
        directives: Optional[List[Directive]] = None,
        values: Optional[List[EnumValueDefinition]] = None,
        loc: Optional[Loc] = None,
    ):
        self.name = name
        self.directives = directives or []  # type: List[Directive]
        self.values = values or []  # type: List[EnumValueDefinition]
        self.loc = loc


class InputObjectTypeExtension(TypeExtension):
    __slots__ = ("loc", "name", "directives", "fields")

    def __init__(
        self,
        name: Name,
        directives: Optional[List[Directive]] = None,
        fields: Optional[List[InputValueDefinition]] = None,
        loc: Optional[Loc] = None,
    ):
        self.name = name
        self.directives = directives or []  # type: List[Directive]
        self.fields = fields or []  # type: List[InputValueDefinition]
        self.loc = loc


class DirectiveDefinition(SupportDescription, TypeSystemDefinition):
    __slots__ = ("loc", "description", "name", "arguments", "locations")

    def __init__(
        self,
        name: Name,
        arguments: Optional[List[InputValueDefinition]] = None,
        locations: Optional[List[Name]] = None,
        loc: Optional[Loc] = None,
        description: Optional[StringValue] = None,
    ):
        self.name = name
        self.arguments = arguments or []  # type: List[InputValueDefinition]
        self.locations = locations or []  # type: List[Name]
        self.loc = loc
        self.description = description


def _ast_to_json(node):
    if isinstance(node, Node):
        return dict(
            {attr: _ast_to_json(getattr(node, attr)) for attr in node._props()},
            __kind__=node.__class__.__name__,
        )
    elif isinstance(node, Loc):
        return (node.start, node.end)
    elif isinstance(node, list):
        return [_ast_to_json(v) for v in node]
    else:
        return node
