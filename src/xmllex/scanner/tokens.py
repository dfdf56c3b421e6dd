# Copyright 2026 xmllex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token variants produced by the XML scanner.

Every token is a frozen dataclass; once the scanner appends a token to its
output it is never modified.
"""

from dataclasses import dataclass

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Prolog:
    """The ``<?xml ...?>`` declaration.

    Attributes:
        version: Declared XML version, ``"1.0"`` when absent.
        encoding: Declared encoding, ``"UTF-8"`` when absent.
        standalone: Standalone flag, ``True`` when absent.
    """

    version: str = "1.0"
    encoding: str = "UTF-8"
    standalone: bool = True


@dataclass(frozen=True)
class DocType:
    """A ``<!DOCTYPE ...>`` declaration.

    Attributes:
        name: The declared root element name.
        content: Raw text of the internal subset (between ``[`` and ``]``), if any.
        url: The system identifier of the external ID, if any.
        public_id: The public identifier of a ``PUBLIC`` external ID, if any.
    """

    name: str
    content: str | None = None
    url: str | None = None
    public_id: str | None = None


@dataclass(frozen=True)
class ProcessingInstruction:
    """A ``<?target content?>`` instruction other than the prolog."""

    name: str
    content: str


@dataclass(frozen=True)
class Start:
    """Opening marker of an element."""

    ns: str | None
    name: str


@dataclass(frozen=True)
class End:
    """Closing marker of an element, also emitted for self-closing tags."""

    ns: str | None
    name: str


@dataclass(frozen=True)
class Attr:
    """An attribute of the preceding :class:`Start` token.

    ``value`` is the raw quoted text with escapes left in place, or ``None``
    for a valueless attribute.
    """

    ns: str | None
    name: str
    value: str | None


@dataclass(frozen=True)
class Text:
    """Character data between tags, verbatim."""

    content: str


@dataclass(frozen=True)
class Comment:
    """Content of a ``<!-- ... -->`` comment, without the delimiters."""

    content: str


Token = Prolog | DocType | ProcessingInstruction | Start | End | Attr | Text | Comment
