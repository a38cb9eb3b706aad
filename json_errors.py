# json_errors.py
# Exception taxonomy shared by the tokenizer and the grammar matcher
#
# Everything derives from SyntaxError so callers that already guard parser
# calls with ``except SyntaxError`` keep working.

from typing import List


class JSONCheckError(SyntaxError):
    """
    Base class for every rejection.

    ``reason`` is the root cause; ``trail`` lists the productions the error
    travelled through, outermost first. str() renders both as one line:
    ``array > elements > element > value > number: unexpected '1' ...``
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
        self.trail: List[str] = []

    def within(self, production: str) -> "JSONCheckError":
        """Record that the error passed through ``production`` and return it."""
        self.trail.insert(0, production)
        return self

    def __str__(self) -> str:
        if not self.trail:
            return self.reason
        return f"{' > '.join(self.trail)}: {self.reason}"


class TokenizeError(JSONCheckError):
    """Unknown escape indicator inside a string literal."""


class EndOfInputError(JSONCheckError):
    """A token or character cursor ran past the end of its sequence."""


class GrammarError(JSONCheckError):
    """A production did not find the literal or character class it requires."""
