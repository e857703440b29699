from dataclasses import dataclass
from enum import Enum

import pytest

from tokenbridge import (
    Lexicon,
    ParseError,
    Tokens,
    data_variant_parser,
    match_token,
    regex,
    skip,
    token_parser,
    word,
)

from .calculator import Number, Token, calculator


@dataclass
class Addition:
    left: object
    right: object


@dataclass
class Subtraction:
    left: object
    right: object


@data_variant_parser(Number)
def parse_number(n):
    return n


def parse_operator(tokens):
    try:
        return Token.PLUS(tokens)
    except ParseError:
        return Token.MINUS(tokens)


def parse_expression(tokens):
    try:
        rest, left = parse_number(tokens)
        rest, operator = parse_operator(rest)
        rest, right = parse_expression(rest)
    except ParseError:
        return parse_number(tokens)
    if operator == "+":
        return rest, Addition(left, right)
    return rest, Subtraction(left, right)


@pytest.fixture
def tokens():
    return Tokens(calculator, "10 + 3 - 4")


def test_parse_expression(tokens):
    rest, parsed = parse_expression(tokens)
    assert rest.is_empty()
    assert parsed == Addition(10, Subtraction(3, 4))


def test_parse_expression_stops_at_unparsed_tokens():
    rest, parsed = parse_expression(Tokens(calculator, "1 + 2 +"))
    assert parsed == Addition(1, 2)
    assert rest.peek() == (Token.PLUS, "+")


def test_token_parser_fails_on_other_token(tokens):
    with pytest.raises(ParseError) as err:
        Token.PLUS(tokens)
    assert err.value.tokens == tokens
    assert err.value.tokens.offset == 0
    assert err.value.expected == Token.PLUS
    assert "Expected <Token.PLUS: '+'> at 0, found '10'" in str(err.value)


def test_token_parser_matches_token(tokens):
    rest, text = Token.PLUS(tokens.advance())
    assert text == "+"
    assert rest.peek() == (Number(3), "3")


def test_token_parser_installs_parse_method(tokens):
    rest, text = Token.MINUS.parse(tokens.advance().advance().advance())
    assert text == "-"
    assert rest.peek() == (Number(4), "4")


def test_token_parser_at_end_of_input():
    with pytest.raises(ParseError, match="found end of input"):
        Token.PLUS(Tokens(calculator))


def test_match_token():
    parse_plus = match_token(Token.PLUS)
    rest, text = parse_plus(Tokens(calculator, "+ 1"))
    assert text == "+"
    assert rest == Tokens(calculator, "1")


class WrongToken(Exception):
    pass


class UnexpectedToken(Exception):
    def __init__(self, tokens, expected):
        super().__init__(f"Unexpected token, expected {expected}")
        self.tokens = tokens
        self.expected = expected


def unexpected_token(tokens, expected):
    return UnexpectedToken(tokens, expected)


def test_token_parser_with_error_class():
    @token_parser(error=WrongToken)
    class Keyword(Enum):
        IF = "if"
        ERROR = "error"

    lexicon = Lexicon(word("if", Keyword.IF), error=Keyword.ERROR)
    with pytest.raises(WrongToken):
        Keyword.IF(Tokens(lexicon, "?"))
    rest, text = Keyword.IF(Tokens(lexicon, "if"))
    assert text == "if"
    assert rest.is_empty()


def test_token_parser_with_error_function():
    @dataclass(frozen=True)
    class Word:
        text: str

    token_parser(Word, error=unexpected_token)
    lexicon = Lexicon(regex(r"[a-z]+", Word), skip(" "), error=Word(""))
    tokens = Tokens(lexicon, "hello world")
    rest, text = Word("hello")(tokens)
    assert text == "hello"
    with pytest.raises(UnexpectedToken) as err:
        Word("hello")(rest)
    assert err.value.tokens == rest
    assert err.value.expected == Word("hello")


def test_data_variant_parser_without_decorator(tokens):
    parse = data_variant_parser(Number, lambda n: n * 2)
    assert parse.__name__ == "parse_number"
    rest, value = parse(tokens)
    assert value == 20
    assert rest.peek() == (Token.PLUS, "+")


def test_data_variant_parser_takes_name_of_result_function():
    assert parse_number.__name__ == "parse_number"
    named = data_variant_parser(Number, lambda n: n, name="number")
    assert named.__name__ == "number"


def test_data_variant_parser_fails_on_other_token(tokens):
    with pytest.raises(ParseError) as err:
        parse_number(tokens.advance())
    assert err.value.expected is Number
    assert err.value.tokens == tokens.advance()
    assert "Expected Number at 2, found '+'" in str(err.value)


def test_data_variant_parser_on_depleted_tokens(tokens):
    depleted = tokens
    for _ in range(5):
        depleted = depleted.advance()
    with pytest.raises(ParseError, match="found end of input"):
        parse_number(depleted)


def test_data_variant_parser_destructures_fields():
    @dataclass(frozen=True)
    class Pair:
        first: str
        second: str

    lexicon = Lexicon(
        regex(r"[a-z]=[a-z]", lambda text: Pair(text[0], text[2])),
        error=Pair("", ""),
    )
    parse_pair = data_variant_parser(Pair, lambda first, second: second + first)
    _, value = parse_pair(Tokens(lexicon, "a=b"))
    assert value == "ba"


def test_data_variant_parser_with_error():
    parse = data_variant_parser(Number, lambda n: n, error=unexpected_token)
    with pytest.raises(UnexpectedToken) as err:
        parse(Tokens(calculator, "+"))
    assert err.value.expected is Number

    parse = data_variant_parser(Number, lambda n: n, error=WrongToken)
    with pytest.raises(WrongToken):
        parse(Tokens(calculator, "+"))


def test_data_variant_parser_needs_match_args():
    class Plain:
        def __init__(self, value):
            self.value = value

    with pytest.raises(TypeError, match="__match_args__"):
        data_variant_parser(Plain, lambda value: value)
    with pytest.raises(TypeError, match="__match_args__"):
        data_variant_parser(Plain)
