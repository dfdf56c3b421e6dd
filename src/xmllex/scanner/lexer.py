# Copyright 2026 xmllex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for XML documents.

Converts raw XML text into a flat sequence of tokens for a downstream tree
builder. The scanner looks at one character at a time, never backs up, and
stops at the first malformed construct.
"""

import logging

from xmllex.config.options import TokenizerOptions
from xmllex.scanner.cursor import Cursor
from xmllex.scanner.errors import ErrorKind, ParseError
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

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def tokenize(text: str, options: TokenizerOptions | None = None) -> list[Token]:
    """Tokenize XML text into a sequence of tokens.

    Entity references and backslash escapes are left untouched in text and
    attribute values. The list is built fresh on every call.

    Args:
        text: The full XML document (or fragment).
        options: Scanner behaviour switches; defaults apply when omitted.

    Returns:
        The tokens in source order.

    Raises:
        ParseError: On the first malformed or unterminated construct.
    """
    return _Lexer(text, options or TokenizerOptions()).tokenize()


# ################
# Implementation
# ################

_WHITESPACE = " \t\r\n"
_QUOTES = "\"'"

# Structural characters that end a name in addition to whitespace and '='.
_TAG_DELIMITERS = "/>"
_PI_DELIMITERS = "?"
_DOCTYPE_DELIMITERS = ">[\"'"

_EXTERNAL_ID_KEYWORDS = ("SYSTEM", "PUBLIC")


def _qualified(ns: str | None, name: str) -> str:
    return f"{ns}:{name}" if ns is not None else name


class _Lexer:
    """Internal scanner state: a cursor and the tokens emitted so far."""

    def __init__(self, text: str, options: TokenizerOptions) -> None:
        self._cursor = Cursor(text)
        self._options = options
        self._illegal = frozenset(options.illegal_name_chars)
        self._length = len(text)
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner over the whole input and return the tokens."""
        logger.debug("Tokenizing %d characters", self._length)
        self._cursor.advance()
        try:
            while self._cursor.current() is not None:
                if self._cursor.current() == "<":
                    self._scan_markup()
                else:
                    self._scan_text()
        except ParseError as exc:
            logger.debug("Tokenization failed with %s at offset %d", exc.kind.value, exc.offset)
            raise
        logger.debug("Emitted %d tokens", len(self._tokens))
        return self._tokens

    # ------------------------------------------------------------------
    # Failure helpers
    # ------------------------------------------------------------------

    def _error(self, kind: ErrorKind, message: str) -> ParseError:
        """Build a ParseError located at the current cursor position."""
        offset = self._cursor.offset
        line, column = self._cursor.location(offset)
        return ParseError(kind, message, offset, line, column)

    def _expect_more(self, construct: str) -> str:
        """Return the current character, raising if the input ended inside *construct*."""
        ch = self._cursor.current()
        if ch is None:
            raise self._error(ErrorKind.UNEXPECTED_END_OF_INPUT, f"Unexpected end of input in {construct}")
        return ch

    def _consume_close(self, kind: ErrorKind, construct: str) -> None:
        """Require '>' at the cursor and step past it."""
        ch = self._expect_more(construct)
        if ch != ">":
            raise self._error(kind, f"Expected '>' to close {construct}, found {ch!r}")
        self._cursor.advance()

    # ------------------------------------------------------------------
    # Primitive consumers
    # ------------------------------------------------------------------

    def _skip_whitespace(self) -> None:
        ch = self._cursor.current()
        while ch is not None and ch in _WHITESPACE:
            ch = self._cursor.advance()

    def _read_name(self, delimiters: str, construct: str) -> tuple[str | None, str]:
        """Read a possibly prefixed name, stopping before whitespace, '=' or a delimiter.

        Returns:
            A ``(namespace, local_name)`` pair; the namespace is ``None`` for an
            unprefixed name.
        """
        namespace: str | None = None
        chars: list[str] = []
        while True:
            ch = self._expect_more(construct)
            if ch in _WHITESPACE or ch == "=" or ch in delimiters:
                break
            if ch == ":":
                if namespace is not None:
                    raise self._error(ErrorKind.MALFORMED_NAME, f"Second ':' in {construct}")
                if not chars:
                    raise self._error(ErrorKind.MALFORMED_NAME, f"Empty namespace prefix in {construct}")
                namespace = "".join(chars)
                chars.clear()
            elif ch in self._illegal:
                raise self._error(ErrorKind.MALFORMED_NAME, f"Illegal character {ch!r} in {construct}")
            else:
                chars.append(ch)
            self._cursor.advance()
        if not chars:
            raise self._error(ErrorKind.MALFORMED_NAME, f"Empty {construct}")
        return namespace, "".join(chars)

    def _read_quoted(self, construct: str) -> str:
        """Read a quoted value, leaving the cursor on the closing quote.

        A backslash and the character after it are kept verbatim, so an escaped
        quote does not close the value.
        """
        quote = self._cursor.current()
        chars: list[str] = []
        while True:
            ch = self._cursor.advance()
            if ch is None:
                raise self._error(ErrorKind.UNEXPECTED_END_OF_INPUT, f"Unterminated {construct}")
            if ch == quote:
                return "".join(chars)
            chars.append(ch)
            if ch == "\\":
                escaped = self._cursor.advance()
                if escaped is None:
                    raise self._error(ErrorKind.UNEXPECTED_END_OF_INPUT, f"Unterminated {construct}")
                chars.append(escaped)

    def _read_literal(self, construct: str) -> str:
        """Read a quoted value and step past its closing quote."""
        value = self._read_quoted(construct)
        self._cursor.advance()
        return value

    # ------------------------------------------------------------------
    # Structural consumers
    # ------------------------------------------------------------------

    def _read_attribute(self, delimiters: str) -> Attr:
        self._skip_whitespace()
        ns, name = self._read_name(delimiters, "attribute name")
        self._skip_whitespace()
        if self._cursor.current() != "=":
            return Attr(ns, name, None)
        self._cursor.advance()
        self._skip_whitespace()
        ch = self._expect_more("attribute value")
        if ch not in _QUOTES:
            raise self._error(
                ErrorKind.UNBOUNDED_ATTRIBUTE_VALUE,
                f"Value of attribute '{_qualified(ns, name)}' must be enclosed in quotes",
            )
        return Attr(ns, name, self._read_literal("attribute value"))

    def _scan_text(self) -> None:
        chars: list[str] = []
        ch = self._cursor.current()
        while ch is not None and ch != "<":
            chars.append(ch)
            ch = self._cursor.advance()
        text = "".join(chars)
        if self._options.skip_whitespace_text and not text.strip(_WHITESPACE):
            return
        self._tokens.append(Text(text))

    def _scan_start_tag(self) -> None:
        ns, name = self._read_name(_TAG_DELIMITERS, "tag name")
        self._tokens.append(Start(ns, name))
        while True:
            self._skip_whitespace()
            ch = self._expect_more("start tag")
            if ch == ">":
                self._cursor.advance()
                return
            if ch == "/":
                self._cursor.advance()
                self._consume_close(ErrorKind.MALFORMED_TAG, "self-closing tag")
                self._tokens.append(End(ns, name))
                return
            self._tokens.append(self._read_attribute(_TAG_DELIMITERS))

    def _scan_end_tag(self) -> None:
        self._cursor.advance()  # /
        ns, name = self._read_name(_TAG_DELIMITERS, "end tag name")
        self._skip_whitespace()
        self._consume_close(ErrorKind.MALFORMED_TAG, "end tag")
        self._tokens.append(End(ns, name))

    def _scan_comment_or_doctype(self) -> None:
        """Route '<!' to the comment reader or, without a leading '-', the DOCTYPE reader."""
        if self._cursor.advance() != "-":
            self._scan_doctype()
            return
        if self._cursor.advance() != "-":
            self._expect_more("comment opening")
            raise self._error(ErrorKind.MALFORMED_COMMENT, "Expected '<!--' to open a comment")
        self._scan_comment()

    def _scan_comment(self) -> None:
        """Scan comment content up to '-->'.

        A run of dashes is held back until the next character shows whether it
        closes the comment. With ``preserve_comment_dashes`` off, a run that
        turns out not to close the comment is dropped from the content.
        """
        chars: list[str] = []
        dashes = 0
        while True:
            ch = self._cursor.advance()
            if ch is None:
                raise self._error(ErrorKind.UNEXPECTED_END_OF_INPUT, "Unterminated comment")
            if ch == "-":
                dashes += 1
            elif ch == ">":
                if dashes != 2:
                    raise self._error(ErrorKind.MALFORMED_COMMENT_END, "Comment must end with '-->'")
                self._cursor.advance()
                self._tokens.append(Comment("".join(chars)))
                return
            else:
                if self._options.preserve_comment_dashes:
                    chars.append("-" * dashes)
                dashes = 0
                chars.append(ch)

    def _scan_doctype(self) -> None:
        ns, keyword = self._read_name(_DOCTYPE_DELIMITERS, "DOCTYPE keyword")
        if ns is not None or keyword != "DOCTYPE":
            raise self._error(
                ErrorKind.MALFORMED_XML, f"Expected 'DOCTYPE' after '<!', found {_qualified(ns, keyword)!r}"
            )
        self._skip_whitespace()
        ns, name = self._read_name(_DOCTYPE_DELIMITERS, "DOCTYPE root name")
        self._skip_whitespace()
        public_id, url = self._read_external_id()
        self._skip_whitespace()
        content: str | None = None
        if self._cursor.current() == "[":
            content = self._read_internal_subset()
            self._skip_whitespace()
        self._consume_close(ErrorKind.MALFORMED_XML, "DOCTYPE declaration")
        self._tokens.append(DocType(_qualified(ns, name), content, url, public_id))

    def _read_external_id(self) -> tuple[str | None, str | None]:
        """Read an optional external identifier.

        Accepts a bare quoted literal, ``SYSTEM "url"`` or
        ``PUBLIC "pubid" ["url"]``.

        Returns:
            A ``(public_id, url)`` pair.
        """
        ch = self._expect_more("DOCTYPE declaration")
        if ch in _QUOTES:
            return None, self._read_literal("DOCTYPE external identifier")
        if ch in ">[":
            return None, None
        ns, keyword = self._read_name(_DOCTYPE_DELIMITERS, "DOCTYPE external identifier")
        if ns is not None or keyword not in _EXTERNAL_ID_KEYWORDS:
            raise self._error(
                ErrorKind.MALFORMED_XML, f"Expected SYSTEM or PUBLIC, found {_qualified(ns, keyword)!r}"
            )
        self._skip_whitespace()
        if self._expect_more("DOCTYPE external identifier") not in _QUOTES:
            raise self._error(ErrorKind.MALFORMED_XML, f"Expected a quoted literal after {keyword}")
        literal = self._read_literal("DOCTYPE external identifier")
        if keyword == "SYSTEM":
            return None, literal
        self._skip_whitespace()
        ch = self._cursor.current()
        if ch is not None and ch in _QUOTES:
            return literal, self._read_literal("DOCTYPE system literal")
        return literal, None

    def _read_internal_subset(self) -> str:
        """Capture the raw text between '[' and the matching ']'.

        Brackets inside markup declarations, quoted literals and comments do
        not end the subset.
        """
        chars: list[str] = []
        depth = 0
        quote: str | None = None
        comment_start: int | None = None
        while True:
            ch = self._cursor.advance()
            if ch is None:
                raise self._error(ErrorKind.UNEXPECTED_END_OF_INPUT, "Unterminated DOCTYPE internal subset")
            if comment_start is not None:
                # The closing '--' must not overlap the opening '<!--'.
                if ch == ">" and len(chars) - comment_start >= 2 and chars[-2:] == ["-", "-"]:
                    comment_start = None
                    depth -= 1
            elif quote is not None:
                if ch == quote:
                    quote = None
            elif depth > 0 and ch in _QUOTES:
                quote = ch
            elif ch == "<":
                depth += 1
            elif ch == ">" and depth > 0:
                depth -= 1
            elif ch == "]" and depth == 0:
                self._cursor.advance()
                return "".join(chars)
            chars.append(ch)
            if ch == "-" and comment_start is None and quote is None and chars[-4:] == ["<", "!", "-", "-"]:
                comment_start = len(chars)

    def _scan_processing_instruction(self) -> None:
        self._cursor.advance()  # ?
        ns, name = self._read_name(_PI_DELIMITERS, "processing instruction target")
        if ns is not None:
            raise self._error(
                ErrorKind.MALFORMED_PROCESSING_INSTRUCTION,
                f"Processing instruction target '{ns}:{name}' cannot have a namespace",
            )
        token: Token
        if name == "xml":
            token = self._read_prolog()
        else:
            token = ProcessingInstruction(name, self._read_pi_content())
        self._cursor.advance()  # ?
        self._consume_close(ErrorKind.MALFORMED_PROLOG_END, "processing instruction")
        self._tokens.append(token)

    def _read_prolog(self) -> Prolog:
        """Fold the attributes of an XML declaration into a Prolog, stopping at '?'."""
        version = "1.0"
        encoding = "UTF-8"
        standalone = True
        while True:
            self._skip_whitespace()
            if self._expect_more("XML declaration") == "?":
                break
            attr = self._read_attribute(_PI_DELIMITERS)
            if attr.ns is not None:
                continue
            if attr.name == "version" and attr.value is not None:
                version = attr.value
            elif attr.name == "encoding" and attr.value is not None:
                encoding = attr.value
            elif attr.name == "standalone":
                standalone = self._options.is_standalone(attr.value)
        return Prolog(version, encoding, standalone)

    def _read_pi_content(self) -> str:
        chars: list[str] = []
        ch = self._expect_more("processing instruction")
        while ch != "?":
            chars.append(ch)
            self._cursor.advance()
            ch = self._expect_more("processing instruction")
        return "".join(chars)

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------

    def _scan_markup(self) -> None:
        """Dispatch on the character following '<'."""
        self._cursor.advance()
        ch = self._expect_more("markup")
        if ch == "!":
            self._scan_comment_or_doctype()
        elif ch == "?":
            self._scan_processing_instruction()
        elif ch == "/":
            self._scan_end_tag()
        else:
            self._scan_start_tag()
