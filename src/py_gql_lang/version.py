# -*- coding: utf-8 -*-
"""
Package information.
"""

__title__ = "py_gql_lang"
__description__ = "GraphQL language front-end: source, lexer, parser and AST."
__url__ = "https://github.com/lirsacc/py-gql"
__version__ = "0.1.0"
__author__ = "Charles Lirsac"
__author_email__ = "c.lirsac@gmail.com"
__license__ = "MIT"
__copyright__ = "Copyright 2019 Charles Lirsac"
