# json_parser.py
# Lenient recursive-descent parser for JSON-like documents.
#
# =============================================================================
#  PARSER IMPLEMENTATION: RECURSIVE DESCENT OVER A CHARACTER CURSOR
# =============================================================================
#
# One peeked character selects exactly one production and only that
# production consumes input. There is no tokenizer pass and no backtracking;
# total work is linear in the input length.
#
# Grammar (every delimiter after an opening one is optional):
#   Element := WS Value WS ','?
#   Value   := Object | Array | String | Number | Keyword
#   Object  := '{' (WS Member)* WS '}'?
#   Member  := WS String WS ':'? Element
#   Array   := '[' (WS Element)* WS ']'?
#
# Leniency contract:
# 1. Missing ',' ':' '"' '}' ']' never abort. The parser takes what is there
#    and returns the partial structure (empty key, None, truncated container).
# 2. Unquoted alphanumeric runs are barewords. "true", "false" and "null"
#    map to literals, anything else becomes string text.
# 3. Quoted strings are taken verbatim. Escape sequences are not decoded.
# 4. A character that no production can consume inside a container is
#    dropped so the container loop always advances.
#
# Only two conditions abort a parse: numeric text that float() rejects or
# cannot represent (NumberFormatError) and nesting beyond max_depth
# (DepthLimitError).
#
# =============================================================================

import argparse
import logging
import math
import pprint
import sys
import unicodedata
from typing import Dict, Iterable, List, Optional, Tuple

from json_cursor import Cursor
from json_value import JSONValue, keyword_value

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CONSTANTS AND TUNABLES
# ---------------------------------------------------------------------------
DEPTH_LIMIT_DEFAULT = 128        # Containers nested deeper than this raise DepthLimitError
_DIGITS = "0123456789"
_ENCLOSED_LETTERS = ((0x24B6, 0x24E9), (0x1F130, 0x1F149), (0x1F150, 0x1F169), (0x1F170, 0x1F189))

SAMPLE_DOCUMENT = r"""
{
"o\nbject": {"key": "value"},
"array": [1, 2],
"string": "this is a \nstring",
"number": 3.14,
"true": true,
"false": false,
"null": null

}
"""

# ---------------------------------------------------------------------------
# ERRORS
# ---------------------------------------------------------------------------
class JSONParseError(SyntaxError):
    """A condition that aborts the whole parse."""


class NumberFormatError(JSONParseError):
    """Reconstructed numeric text has no float representation."""


class DepthLimitError(JSONParseError):
    """Containers nested deeper than the parser's max_depth."""


# ---------------------------------------------------------------------------
# CHARACTER CLASSES
# ---------------------------------------------------------------------------
def _is_ws(ch: str) -> bool:
    return ch.isspace() or unicodedata.category(ch) == "Cc"


def _is_alnum(ch: str) -> bool:
    """
    Bareword characters: letters, digits and the alphabetic marks and
    enclosed letters that str.isalnum() leaves out (Devanagari vowel signs,
    circled and squared Latin letters).
    """
    if ch.isalnum():
        return True
    if unicodedata.category(ch) in ("Mn", "Mc"):
        return True
    code = ord(ch)
    return any(lo <= code <= hi for lo, hi in _ENCLOSED_LETTERS)


def _to_float(text: str) -> float:
    """
    Convert reconstructed numeric text.

    float() accepts forms like "1." and "-.5" and rejects "-", "1e" and
    "1-2". Results that overflow to infinity, or collapse to zero although
    the mantissa has a non-zero digit, are rejected as well.
    """
    try:
        value = float(text)
    except ValueError:
        raise NumberFormatError(f"invalid number literal {text!r}") from None
    if math.isinf(value):
        raise NumberFormatError(f"number literal {text!r} overflows float")
    mantissa = text.partition("e")[0]
    if value == 0.0 and any(c in "123456789" for c in mantissa):
        raise NumberFormatError(f"number literal {text!r} underflows float")
    return value


# ---------------------------------------------------------------------------
# PARSER
# ---------------------------------------------------------------------------
class Parser:
    """
    Parser over one character sequence. Each parse() call reads one
    element from wherever the cursor stands.

    text is any iterable of one-character strings. max_depth bounds
    container nesting; None removes the bound and leaves recursion to the
    interpreter's own limit.
    """
    def __init__(self, text: Iterable[str], *, max_depth: Optional[int] = DEPTH_LIMIT_DEFAULT):
        self.chars = Cursor(text)
        self.max_depth = max_depth
        self._depth = 0

    def parse(self) -> JSONValue:
        logger.debug("parse start (max_depth=%s)", self.max_depth)
        value = self.parse_element()
        logger.debug("parse done after %d characters", self.chars.offset)
        return value

    # -- grammar dispatch ----------------------------------------------------

    def parse_value(self) -> JSONValue:
        ch = self.chars.peek()
        if ch is None:
            return None
        if ch == "{":
            return self.parse_object()
        if ch == "[":
            return self.parse_array()
        if ch == '"':
            return self.parse_string()
        if ch == "-" or ch in _DIGITS:
            return self.parse_number()
        return keyword_value(self.parse_keyword())

    # -- structural productions ----------------------------------------------

    def parse_element(self) -> JSONValue:
        self.skip_ws()
        value = self.parse_value()
        self.skip_ws()
        self.chars.accept(",")
        return value

    def parse_object(self) -> Dict[str, JSONValue]:
        self._descend()
        try:
            obj: Dict[str, JSONValue] = {}
            self.chars.accept("{")

            while True:
                self.skip_ws()
                ch = self.chars.peek()
                if ch is None or ch == "}":
                    break
                start = self.chars.offset
                key, value = self.parse_member()
                if self.chars.offset == start:
                    self._discard_stray("object")
                    continue
                obj[key] = value

            if not self.chars.accept("}"):
                logger.debug("object not closed at end of input (offset %d)", self.chars.offset)
            return dict(sorted(obj.items()))
        finally:
            self._depth -= 1

    def parse_member(self) -> Tuple[str, JSONValue]:
        self.skip_ws()
        key = self.parse_string()
        self.skip_ws()
        if not self.chars.accept(":"):
            logger.debug("no ':' after key %r at offset %d", key, self.chars.offset)
        value = self.parse_element()
        self.chars.accept(",")
        return key, value

    def parse_array(self) -> List[JSONValue]:
        self._descend()
        try:
            items: List[JSONValue] = []
            self.chars.accept("[")

            while True:
                self.skip_ws()
                ch = self.chars.peek()
                if ch is None or ch == "]":
                    break
                start = self.chars.offset
                value = self.parse_element()
                if self.chars.offset == start:
                    self._discard_stray("array")
                    continue
                items.append(value)

            if not self.chars.accept("]"):
                logger.debug("array not closed at end of input (offset %d)", self.chars.offset)
            return items
        finally:
            self._depth -= 1

    # -- lexical productions -------------------------------------------------

    def parse_string(self) -> str:
        """
        Quoted mode when the next character is '"': read up to the closing
        quote, everything verbatim. Otherwise bareword mode: read an
        alphanumeric run. A trailing '"' is consumed in both modes.
        """
        buf: List[str] = []
        quoted = self.chars.accept('"')
        while True:
            ch = self.chars.peek()
            if ch is None:
                if quoted:
                    logger.debug("string not closed at end of input (offset %d)", self.chars.offset)
                break
            if quoted:
                if ch == '"':
                    break
            elif not _is_alnum(ch):
                break
            buf.append(ch)
            self.chars.advance()
        self.chars.accept('"')
        return "".join(buf)

    def parse_number(self) -> float:
        buf: List[str] = []

        # integer part
        if self.chars.accept("-"):
            buf.append("-")
        self._take_digits(buf)

        # fraction
        if self.chars.accept("."):
            buf.append(".")
        self._take_digits(buf)

        # exponent, sign is taken even without a marker
        if self.chars.peek() in ("e", "E"):
            self.chars.advance()
            buf.append("e")
        if self.chars.peek() in ("+", "-"):
            buf.append(self.chars.advance())
        self._take_digits(buf)

        return _to_float("".join(buf))

    def parse_keyword(self) -> str:
        self.skip_ws()
        buf: List[str] = []
        while True:
            ch = self.chars.peek()
            if ch is None or not _is_alnum(ch):
                break
            buf.append(ch)
            self.chars.advance()
        return "".join(buf)

    def skip_ws(self) -> None:
        while True:
            ch = self.chars.peek()
            if ch is None or not _is_ws(ch):
                return
            self.chars.advance()

    # -- helpers -------------------------------------------------------------

    def _take_digits(self, buf: List[str]) -> None:
        while True:
            ch = self.chars.peek()
            if ch is None or ch not in _DIGITS:
                return
            buf.append(ch)
            self.chars.advance()

    def _descend(self) -> None:
        if self.max_depth is not None and self._depth >= self.max_depth:
            raise DepthLimitError(f"depth limit exceeded (max_depth={self.max_depth})")
        self._depth += 1

    def _discard_stray(self, container: str) -> None:
        offset = self.chars.offset
        ch = self.chars.advance()
        logger.debug("dropped stray %r in %s at offset %d", ch, container, offset)


# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def parse(text: Iterable[str], *, max_depth: Optional[int] = DEPTH_LIMIT_DEFAULT) -> JSONValue:
    """
    Parse a JSON-like document into dicts, lists, str, float, bool and None.

    Always returns a value for structurally malformed input. Raises
    NumberFormatError for a numeric literal float() cannot represent and
    DepthLimitError when nesting exceeds max_depth.
    """
    return Parser(text, max_depth=max_depth).parse()


# ---------------------------------------------------------------------------
# CLI ENTRYPOINT
# ---------------------------------------------------------------------------
def _cli(argv: List[str]) -> int:
    """
    Parse a document and pretty-print the resulting tree.

    0 on success, 1 on JSONParseError, 2 when the input cannot be read.
    """
    ap = argparse.ArgumentParser(description="Lenient JSON-like document parser")
    ap.add_argument("file", nargs="?", default="-", help="document to parse, '-' reads stdin")
    ap.add_argument("--sample", action="store_true", help="parse the built-in sample document")
    ap.add_argument("--max-depth", type=int, default=DEPTH_LIMIT_DEFAULT,
                    help="maximum container nesting, negative disables the limit")
    ap.add_argument("--verbose", action="store_true", help="log lenient recoveries to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    max_depth = args.max_depth if args.max_depth >= 0 else None

    if args.sample:
        data = SAMPLE_DOCUMENT
        print(data)
    elif args.file == "-":
        data = sys.stdin.read()
    else:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                data = fh.read()
        except OSError as exc:
            print(f"cannot read {args.file}: {exc.strerror}", file=sys.stderr)
            return 2
        except UnicodeDecodeError as exc:
            print(f"cannot decode {args.file} as UTF-8: {exc.reason} at byte {exc.start}",
                  file=sys.stderr)
            return 2

    try:
        tree = parse(data, max_depth=max_depth)
    except JSONParseError as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1
    pprint.pprint(tree, sort_dicts=False)
    return 0


def main() -> None:
    sys.exit(_cli(sys.argv[1:]))


# ---------------------------------------------------------------------------
# MAIN GUARD
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    main()
