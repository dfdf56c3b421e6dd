# Copyright 2026 xmllex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Single-pass lexical scanner turning XML text into a flat token sequence."""

from xmllex.config import OptionsError, StandaloneMode, TokenizerOptions, find_options, load_options
from xmllex.scanner import (
    Attr,
    Comment,
    DocType,
    End,
    ErrorKind,
    ParseError,
    ProcessingInstruction,
    Prolog,
    Start,
    Text,
    Token,
    tokenize,
)

__all__ = [
    "Attr",
    "Comment",
    "DocType",
    "End",
    "ErrorKind",
    "OptionsError",
    "ParseError",
    "ProcessingInstruction",
    "Prolog",
    "StandaloneMode",
    "Start",
    "Text",
    "Token",
    "TokenizerOptions",
    "find_options",
    "load_options",
    "tokenize",
]
