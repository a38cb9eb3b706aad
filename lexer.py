# lexer.py
# Character-at-a-time tokenizer for the JSON grammar checker
#
# =============================================================================
#  TOKENIZER: SPLIT TEXT INTO STRUCTURAL, STRING AND BARE SPANS
# =============================================================================
#
# The tokenizer knows nothing about the grammar. It only cuts the input into
# spans the matcher in json_checker.py can walk with an index:
#
#   {  }  [  ]  ,  :     one token per structural character
#   "..."                one token per string literal, quotes included,
#                        escapes left unresolved
#   -12.5e3, true        "bare" spans accumulated between the above
#
# Whitespace outside strings is dropped here, so it never reaches the
# matcher as a token.
# =============================================================================

from typing import List

from json_errors import TokenizeError

# ---------------------------------------------------------------------------
# CHARACTER CLASSES
# ---------------------------------------------------------------------------
STRUCTURAL = frozenset("{}[],:")
WHITESPACE = frozenset(" \t\n\r")
ESCAPES    = frozenset('\\"/bfnrtu')


def tokenize(text: str) -> List[str]:
    """
    Split ``text`` into a list of token strings.

    Escapes are only checked for a legal indicator character; the hex digits
    of a ``\\u`` escape are left for the string production. Raises
    TokenizeError on an unknown escape indicator.
    """
    tokens: List[str] = []
    current = ""
    in_string = False
    in_escape = False

    for offset, char in enumerate(text):
        if in_string:
            current += char
            if in_escape:
                if char not in ESCAPES:
                    raise TokenizeError(f"invalid escape character {char!r} at offset {offset}")
                in_escape = False
            elif char == "\\":
                in_escape = True
            elif char == '"':
                tokens.append(current)
                current = ""
                in_string = False
            continue

        if char == '"':
            if current:
                tokens.append(current)
            current = '"'
            in_string = True
            continue
        if char in STRUCTURAL:
            if current:
                tokens.append(current)
                current = ""
            tokens.append(char)
            continue
        if char in WHITESPACE:
            # ends a bare span, so "1 2" stays two tokens
            if current:
                tokens.append(current)
                current = ""
            continue
        # true, false, null and numbers
        current += char

    # Leftover bare span or unterminated string: hand it to the matcher so it
    # is rejected there instead of silently vanishing.
    if current:
        tokens.append(current)
    return tokens
