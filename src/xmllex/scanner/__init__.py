# Copyright 2026 xmllex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Cursor, token model and lexical scanner for XML text."""

from xmllex.scanner.cursor import Cursor
from xmllex.scanner.errors import ErrorKind, ParseError
from xmllex.scanner.lexer import tokenize
from xmllex.scanner.tokens import (
    Attr,
    Comment,
    DocType,
    End,
    ProcessingInstruction,
    Prolog,
    Start,
    Text,
    Token,
)

__all__ = [
    "Attr",
    "Comment",
    "Cursor",
    "DocType",
    "End",
    "ErrorKind",
    "ParseError",
    "ProcessingInstruction",
    "Prolog",
    "Start",
    "Text",
    "Token",
    "tokenize",
]
