# -*- coding: utf-8 -*-
"""
py_gql_lang
~~~~~~~~~~~

py_gql_lang is a pure python front-end for the `GraphQL
<https://graphql.org/>`_ language: it turns GraphQL documents (queries as well
as schema definitions) into a positioned AST suitable for schema construction,
validation and execution tooling.

The main :mod:`py_gql_lang` package exposes the parsing entrypoints while
:mod:`py_gql_lang.lang` gives access to the lower level lexer and parser.
"""

# flake8: noqa

from .version import __version__  # isort:skip

from . import exc, lang
from .lang import Source, parse, parse_type, parse_value

__all__ = (
    "__version__",
    "exc",
    "lang",
    "parse",
    "parse_type",
    "parse_value",
    "Source",
)
