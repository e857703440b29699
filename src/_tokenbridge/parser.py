"""
Generators for leaf parsers, that is, parsers which consume a single token
from Tokens (see tokenbridge.Tokens).

A parser is a function taking Tokens and returning a tuple of the remaining
Tokens and the parsed value. When the next token is not the expected one,
the parser raises an exception instead, which the caller may catch in order
to try an alternative with the same Tokens.

The exception raised can be configured with the error argument of the
generators. It is either:

* None, for ParseError(tokens, expected).
* An exception class, raised without arguments.
* A function error(tokens, expected) returning the exception to raise,
  where tokens is the (unadvanced) input and expected is the token value
  or variant class that was expected.
"""


class ParseError(Exception):
    """
    Raised by a parser if the next token is not the expected one, or
    if there are no more tokens.
    """

    def __init__(self, tokens, expected=None):
        """
        :param tokens: The input the parser failed on.
        :param expected: The token or token variant the parser expected.
        """
        self.tokens = tokens
        self.expected = expected
        found = tokens.peek()
        if found is None:
            found_description = "end of input"
        else:
            found_description = repr(found[1])
        super().__init__(
            f"Expected {describe(expected)} at {tokens.offset}, "
            f"found {found_description}"
        )


def describe(expected):
    if isinstance(expected, type):
        return expected.__name__
    return repr(expected)


def make_error(error, tokens, expected):
    """
    :returns: The exception to raise for a failed parse according to the
        error configuration, see module documentation.
    """
    if error is None:
        return ParseError(tokens, expected)
    if isinstance(error, type) and issubclass(error, BaseException):
        return error()
    return error(tokens, expected)


def match_token(expected, *, error=None):
    """
    Parser combinator for a single token equal to expected.

    :param expected: The token value to match.
    :param error: Error configuration, see module documentation.
    :returns: A parser returning the text of the matched token.
    """

    def parser(tokens):
        next_token = tokens.peek()
        if next_token is not None and next_token[0] == expected:
            return tokens.advance(), next_token[1]
        raise make_error(error, tokens, expected)

    return parser


def token_parser(token_type=None, *, error=None):
    """
    Makes every instance of token_type a parser for itself, ie.
    after token_parser(Token), Token.PLUS(tokens) parses a Token.PLUS and
    returns the remaining tokens and the text '+'.

    Can also be used as a class decorator, with or without arguments:

    >>> @token_parser(error=WrongToken)
    ... class Token(Enum):
    ...     PLUS = "+"

    :param token_type: The class of the tokens.
    :param error: Error configuration, see module documentation.
    """

    def install(cls):
        def parse(self, tokens):
            return match_token(self, error=error)(tokens)

        cls.parse = parse
        cls.__call__ = parse
        return cls

    if token_type is None:
        return install
    return install(token_type)


def destructure(token):
    """
    :returns: The payload of a token in the order of its __match_args__,
        the same order a class pattern in a match statement uses.
    """
    return tuple(getattr(token, name) for name in token.__match_args__)


def data_variant_parser(variant, result=None, *, error=None, name=None):
    """
    Generates a parser for a token variant carrying data, ie.

    >>> parse_number = data_variant_parser(Number, lambda n: Op.Number(n))

    parses a token Number(10) to Op.Number(10). The data of the token is
    given to result as positional arguments in the order of the variant's
    __match_args__ (the order of fields for dataclasses).

    When result is not given, the generator is a decorator for the
    result function, and the parser takes the name of that function:

    >>> @data_variant_parser(Number)
    ... def parse_number(n):
    ...     return Op.Number(n)

    :param variant: The class of the tokens to match.
    :param result: Function mapping the data of the token to the
        parsed value.
    :param error: Error configuration, see module documentation.
    :param name: Name of the generated parser.
    :raises TypeError: If variant has no __match_args__ to destructure
        its data by.
    """
    if not hasattr(variant, "__match_args__"):
        raise TypeError(
            f"Can not destructure {variant.__name__}, it has no __match_args__"
        )
    if result is None:
        return lambda function: data_variant_parser(
            variant, function, error=error, name=name or function.__name__
        )

    def parser(tokens):
        next_token = tokens.peek()
        if next_token is not None and isinstance(next_token[0], variant):
            return tokens.advance(), result(*destructure(next_token[0]))
        raise make_error(error, tokens, variant)

    parser.__name__ = name or f"parse_{variant.__name__.lower()}"
    parser.__qualname__ = parser.__name__
    return parser
