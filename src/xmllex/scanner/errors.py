# Copyright 2026 xmllex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structured failures raised by the XML scanner."""

import enum

# ###############
# Public Interface
# ###############


class ErrorKind(enum.Enum):
    """Classification of scanner failures."""

    UNEXPECTED_END_OF_INPUT = "UnexpectedEndOfInput"
    MALFORMED_NAME = "MalformedName"
    MALFORMED_COMMENT = "MalformedComment"
    MALFORMED_COMMENT_END = "MalformedCommentEnd"
    MALFORMED_XML = "MalformedXml"
    MALFORMED_PROCESSING_INSTRUCTION = "MalformedProcessingInstruction"
    MALFORMED_PROLOG_END = "MalformedPrologEnd"
    MALFORMED_TAG = "MalformedTag"
    UNBOUNDED_ATTRIBUTE_VALUE = "UnboundedAttributeValue"


class ParseError(Exception):
    """Raised when the scanner meets malformed or truncated input.

    Attributes:
        kind: The failure classification.
        message: Human-readable description without the location prefix.
        offset: Zero-based character offset of the failure.
        line: 1-based line number of the failure.
        column: 1-based column number of the failure.
    """

    def __init__(self, kind: ErrorKind, message: str, offset: int, line: int, column: int) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.kind = kind
        self.message = message
        self.offset = offset
        self.line = line
        self.column = column
