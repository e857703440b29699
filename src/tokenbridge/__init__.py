import tokenbridge.version
from _tokenbridge.input import IncompleteInput, InputIter, InputLength, InputTake
from _tokenbridge.lexer import (
    Lexer,
    Lexicon,
    Span,
    TokenizationError,
    regex,
    skip,
    word,
)
from _tokenbridge.parser import (
    ParseError,
    data_variant_parser,
    match_token,
    token_parser,
)
from _tokenbridge.tokens import IndexIterator, Tokens

__author__ = """TokenBridge developers"""

__version__ = tokenbridge.version.version

__all__ = [
    "IncompleteInput",
    "IndexIterator",
    "InputIter",
    "InputLength",
    "InputTake",
    "Lexer",
    "Lexicon",
    "ParseError",
    "Span",
    "TokenizationError",
    "Tokens",
    "data_variant_parser",
    "match_token",
    "regex",
    "skip",
    "token_parser",
    "word",
]
