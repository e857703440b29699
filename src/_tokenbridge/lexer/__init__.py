"""
In this module, a lexicon is a set of rules which turns source text into
tokens, and a lexer is a cursor reading those tokens from one source, one at
a time, when they are requested.

A rule is created with one of the rule combinators: word for fixed words,
regex for tokens carrying data and skip for whitespace and comments. At
each position, the rule with the longest match wins, so for the rules
word("-", Token.MINUS) and regex(r"-?[0-9]+", ...), "-4" is a number while
"- 4" is a minus followed by a number.

Text that no rule accepts does not stop the lexer. Instead the lexicon's
error token is produced for it, and the parser consuming the tokens decides
what to do about it.

Sources can be either str or bytes. For bytes sources, all offsets are byte
offsets, for str sources they are character offsets.
"""

from .errors import TokenizationError
from .lexer import Lexer, Lexicon
from .rules import Rule, regex, skip, word
from .span import Span

__all__ = [
    "Lexer",
    "Lexicon",
    "Rule",
    "Span",
    "TokenizationError",
    "regex",
    "skip",
    "word",
]
