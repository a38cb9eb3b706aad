# json_checker.py
# Recursive-descent JSON grammar checker with a stack for nested containers
#
# =============================================================================
#  MATCHER: ONE FUNCTION PER TOKEN PRODUCTION, A STACK FOR NESTING
# =============================================================================
#
# The checker accepts or rejects a document; it never builds a value.
# Grammar (https://www.json.org/json-en.html):
#
#   json      element            (object or array at the root)
#   element   value
#   value     object | array | string | number | true | false | null
#   object    '{' '}' | '{' members '}'
#   members   member | member ',' members
#   member    string ':' element
#   array     '[' ']' | '[' elements ']'
#   elements  element | element ',' elements
#   string    '"' characters '"'
#   character '0020'..'10FFFF' - '"' - '\' | '\' escape
#   escape    '"' '\' '/' 'b' 'f' 'n' 'r' 't' | 'u' hex hex hex hex
#   number    integer fraction exponent
#   integer   ['-'] ( digit | onenine digits )
#   fraction  "" | '.' digits
#   exponent  "" | ('E'|'e') sign digits
#
# Structural productions take a token cursor and return the next one.
# Objects and arrays are matched with an explicit stack of open containers
# rather than recursion, so nesting depth is limited only by memory (RFC 8259
# section 9 leaves the limit to the implementation; none is imposed here).
# Productions below a single token (string and number interiors) take a
# character cursor into that token. Every function raises on the first
# mismatch; nothing backtracks.
# =============================================================================

import argparse
import logging
import sys
from contextlib import contextmanager
from typing import Iterator, List, Tuple

from json_errors import (
    EndOfInputError,
    GrammarError,
    JSONCheckError,
    TokenizeError,
)
from lexer import tokenize

__all__ = [
    "check",
    "is_valid",
    "match_document",
    "tokenize",
    "JSONCheckError",
    "TokenizeError",
    "EndOfInputError",
    "GrammarError",
]

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CHARACTER CLASSES
# ---------------------------------------------------------------------------
KEYWORDS    = frozenset(("true", "false", "null"))
SIMPLE_ESCAPES = frozenset('"\\/bfnrt')
HEX_DIGITS  = frozenset("0123456789abcdefABCDEF")
ONENINE     = frozenset("123456789")
NUMBER_STOP = frozenset(".eE")   # digits stop here so fraction/exponent can follow

MIN_CODE_POINT = 0x0020


@contextmanager
def _production(name: str) -> Iterator[None]:
    """Tag any error escaping the block with the production that was active."""
    try:
        yield
    except JSONCheckError as exc:
        exc.within(name)
        raise

# ---------------------------------------------------------------------------
# CURSOR ACCESS
# ---------------------------------------------------------------------------
def _token_at(pos: int, tokens: List[str]) -> str:
    if 0 <= pos < len(tokens):
        return tokens[pos]
    raise EndOfInputError(f"token index {pos} out of range - input ended early")


def _char_at(idx: int, token: str) -> str:
    if 0 <= idx < len(token):
        return token[idx]
    raise EndOfInputError(f"character index {idx} out of range in {token!r}")

# ---------------------------------------------------------------------------
# STRUCTURE
# ---------------------------------------------------------------------------
CLOSERS = {"{": "}", "[": "]"}
NAMES   = {"{": "object", "[": "array"}
# productions between an open container and one of its values
VALUE_TRAIL = {
    "{": ("object", "members", "member", "element", "value"),
    "[": ("array", "elements", "element", "value"),
}


def match_document(tokens: List[str]) -> None:
    """
    Match a whole token list as one JSON text.

    The root must be an object or an array and must consume every token.
    """
    if not tokens:
        raise GrammarError("empty input")
    first = tokens[0]
    if first not in CLOSERS:
        raise GrammarError(f"payload should be object or array, got {first!r}")
    pos = _match_nested(0, tokens)
    if pos != len(tokens):
        raise GrammarError(f"unexpected token {tokens[pos]!r} at token {pos}")


def _match_nested(pos: int, tokens: List[str]) -> int:
    """
    Match the object or array starting at ``pos`` and everything inside it.

    Open containers live on an explicit stack instead of the call stack, so
    nesting depth is bounded by memory only. ``where`` names the productions
    active inside the innermost container; on failure it is combined with the
    value trails of the enclosing containers to rebuild the same chain the
    recursive grammar would report.
    """
    stack: List[str] = []
    where: Tuple[str, ...] = ()
    try:
        while True:
            # pos is at the first token of a value
            token = _token_at(pos, tokens)
            if token in CLOSERS:
                stack.append(token)
                where = (NAMES[token],)
                pos += 1
                if _token_at(pos, tokens) != CLOSERS[token]:
                    if token == "{":
                        where = ("object", "members", "member")
                        pos = _match_member_key(pos, tokens)
                    where = VALUE_TRAIL[token]
                    continue
                stack.pop()
                pos += 1
            else:
                pos = _match_scalar(pos, tokens)

            # a value is complete: close containers until one wants another value
            while stack:
                kind = stack[-1]
                where = (NAMES[kind], "members" if kind == "{" else "elements")
                if _token_at(pos, tokens) == ",":
                    pos += 1
                    if kind == "{":
                        where = ("object", "members", "member")
                        pos = _match_member_key(pos, tokens)
                    where = VALUE_TRAIL[kind]
                    break
                where = (NAMES[kind],)
                token = _token_at(pos, tokens)
                if token != CLOSERS[kind]:
                    raise GrammarError(
                        f"expected {CLOSERS[kind]!r} but got {token!r} at token {pos}"
                    )
                stack.pop()
                pos += 1
            else:
                return pos
    except JSONCheckError as exc:
        for name in reversed(where):
            exc.within(name)
        for kind in reversed(stack[:-1]):
            for name in reversed(VALUE_TRAIL[kind]):
                exc.within(name)
        raise


def _match_member_key(pos: int, tokens: List[str]) -> int:
    """string ':' of a member; returns the cursor of the member's value."""
    with _production(f"string (token {pos})"):
        pos = _match_string(pos, tokens)
    token = _token_at(pos, tokens)
    if token != ":":
        raise GrammarError(f"expected ':', got {token!r} at token {pos}")
    return pos + 1


def _match_scalar(pos: int, tokens: List[str]) -> int:
    """The value alternatives that fit in a single token."""
    token = _token_at(pos, tokens)
    if token[0] == '"':
        with _production(f"string (token {pos})"):
            return _match_string(pos, tokens)
    if token in KEYWORDS:
        return pos + 1
    with _production(f"number (token {pos})"):
        return _match_number(pos, tokens)

# ---------------------------------------------------------------------------
# STRINGS
# ---------------------------------------------------------------------------
def _match_string(pos: int, tokens: List[str]) -> int:
    token = _token_at(pos, tokens)
    if token[0] != '"':
        raise GrammarError(f'expected string starting with ", got {token!r}')
    if len(token) < 2 or token[-1] != '"':
        raise GrammarError(f'expected string ending with ", got {token!r}')
    with _production("characters"):
        _match_characters(1, token)
    return pos + 1


def _match_characters(idx: int, token: str) -> int:
    """Match the interior of ``token`` from ``idx`` up to its closing quote."""
    closing = len(token) - 1
    while idx < closing:
        with _production("character"):
            idx = _match_character(idx, token)
    # an escape swallowed the closing quote, e.g. "abc\"
    if idx != closing:
        raise GrammarError(f'expected string ending with ", got {token!r}')
    return idx + 1


def _match_character(idx: int, token: str) -> int:
    c = _char_at(idx, token)
    if c == "\\":
        with _production("escape"):
            return _match_escape(idx + 1, token)
    code = ord(c)
    if code < MIN_CODE_POINT or c == '"':
        raise GrammarError(f"expected character, got {c!r} at index {idx} of {token!r}")
    return idx + 1


def _match_escape(idx: int, token: str) -> int:
    c = _char_at(idx, token)
    if c in SIMPLE_ESCAPES:
        return idx + 1
    if c != "u":
        raise GrammarError(f"expected escape character, got {c!r} at index {idx} of {token!r}")
    idx += 1
    with _production("hex"):
        for _ in range(4):
            idx = _match_hex(idx, token)
    return idx


def _match_hex(idx: int, token: str) -> int:
    c = _char_at(idx, token)
    if c in HEX_DIGITS:
        return idx + 1
    raise GrammarError(f"expected hex digit, got {c!r} at index {idx} of {token!r}")

# ---------------------------------------------------------------------------
# NUMBERS
# ---------------------------------------------------------------------------
def _match_number(pos: int, tokens: List[str]) -> int:
    token = _token_at(pos, tokens)
    with _production("integer"):
        idx = _match_integer(0, token)
    if idx < len(token) and token[idx] == ".":
        with _production("fraction"):
            idx = _match_fraction(idx, token)
    if idx < len(token) and token[idx] in "eE":
        with _production("exponent"):
            idx = _match_exponent(idx, token)
    if idx != len(token):
        raise GrammarError(f"unexpected {token[idx:]!r} in number {token!r}")
    return pos + 1


def _match_integer(idx: int, token: str) -> int:
    c = _char_at(idx, token)
    if c == "-":
        idx += 1
        c = _char_at(idx, token)
    if c in ONENINE:
        idx += 1
        if idx == len(token) or token[idx] in NUMBER_STOP:
            return idx
        with _production("digits"):
            return _match_digits(idx, token)
    # a lone zero may not be followed by more digits; the caller rejects them
    with _production("digit"):
        return _match_digit(idx, token)


def _match_digit(idx: int, token: str) -> int:
    c = _char_at(idx, token)
    if c == "0":
        return idx + 1
    return _match_onenine(idx, token)


def _match_digits(idx: int, token: str) -> int:
    """One or more digits, stopping early at '.', 'e' or 'E'."""
    idx = _match_digit(idx, token)
    while idx < len(token) and token[idx] not in NUMBER_STOP:
        idx = _match_digit(idx, token)
    return idx


def _match_onenine(idx: int, token: str) -> int:
    c = _char_at(idx, token)
    if c not in ONENINE:
        raise GrammarError(f"expected digit, got {c!r} at index {idx} of {token!r}")
    return idx + 1


def _match_fraction(idx: int, token: str) -> int:
    c = _char_at(idx, token)
    if c != ".":
        raise GrammarError(f"expected '.', got {c!r} in {token!r}")
    with _production("digits"):
        return _match_digits(idx + 1, token)


def _match_exponent(idx: int, token: str) -> int:
    c = _char_at(idx, token)
    if c not in "eE":
        raise GrammarError(f"expected 'E' or 'e', got {c!r} in {token!r}")
    idx += 1
    if _char_at(idx, token) in "+-":
        idx = _match_sign(idx, token)
    with _production("digits"):
        return _match_digits(idx, token)


def _match_sign(idx: int, token: str) -> int:
    c = _char_at(idx, token)
    if c not in "+-":
        raise GrammarError(f"expected '+' or '-', got {c!r} in {token!r}")
    return idx + 1

# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def check(text: str) -> None:
    """
    Validate ``text`` as a JSON document.

    Returns None when the text is accepted and raises a JSONCheckError
    subclass describing the first violation otherwise.
    """
    tokens = tokenize(text)
    log.debug("tokenized %d characters into %d tokens", len(text), len(tokens))
    match_document(tokens)


def is_valid(text: str) -> bool:
    try:
        check(text)
    except JSONCheckError as exc:
        log.debug("rejected: %s", exc)
        return False
    return True

# ---------------------------------------------------------------------------
# CLI ENTRYPOINT
# ---------------------------------------------------------------------------
def _cli(argv: List[str]) -> int:
    """
    Check one file. Exit code 0 when it is valid JSON, 1 otherwise.
    """
    ap = argparse.ArgumentParser(description="JSON grammar checker")
    ap.add_argument("file", help="JSON file to check")
    ap.add_argument("--debug", action="store_true", help="dump token stream and exit")
    ap.add_argument("--verbose", "-v", action="store_true", help="log progress to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        with open(args.file, "r", encoding="utf-8") as fh:
            data = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error reading json file: {exc}", file=sys.stderr)
        return 1
    log.debug("read %s", args.file)

    try:
        if args.debug:
            for idx, token in enumerate(tokenize(data)):
                print(f"{idx} {token}")
            return 0
        check(data)
    except JSONCheckError as exc:
        print(f"SyntaxError: {exc}", file=sys.stderr)
        return 1
    print("OK")
    return 0


def main() -> int:
    return _cli(sys.argv[1:])

# ---------------------------------------------------------------------------
# MAIN GUARD
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(main())
