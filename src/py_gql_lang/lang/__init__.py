# -*- coding: utf-8 -*-
"""
The :mod:`py_gql_lang.lang` module is responsible for parsing the GraphQL
language and source files.

You can refer to the `relevant part of the GraphQL specification
<https://graphql.github.io/graphql-spec/June2018/#sec-Language>`_ for more
information.
"""

# flake8: noqa

from .lexer import Lexer
from .parser import DEFAULT_MAX_DEPTH, Parser, parse, parse_type, parse_value
from .source import Source, SourceLocation

__all__ = (
    "parse",
    "parse_type",
    "parse_value",
    "Parser",
    "Lexer",
    "Source",
    "SourceLocation",
    "DEFAULT_MAX_DEPTH",
)
