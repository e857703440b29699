import re
from functools import cached_property

from _tokenbridge.lexer.errors import TokenizationError


class Rule:
    """
    A single lexical rule of a Lexicon: a regular expression and what to
    produce when it matches.

    Rules are written with str patterns. When a bytes source is tokenized,
    the pattern is encoded as utf-8 and compiled again, so offsets reported
    for bytes sources are byte offsets.
    """

    def __init__(self, pattern, factory=None, priority=0):
        """
        :param pattern: Regular expression (as str) matched at the
            current position of the source.
        :param factory: Function from the matched text to a token, or
            None for trivia which is skipped.
        :param priority: Breaks ties between rules matching the same
            length, the higher priority wins.
        """
        self.pattern = pattern
        self.factory = factory
        self.priority = priority

    @property
    def is_skipped(self) -> bool:
        return self.factory is None

    @cached_property
    def text_pattern(self):
        return re.compile(self.pattern)

    @cached_property
    def binary_pattern(self):
        return re.compile(self.pattern.encode("utf-8"))

    def match_end(self, source, pos):
        """
        :returns: The end offset of the match of this rule at pos in
            source, or None if the rule does not match.
        """
        if isinstance(source, (bytes, bytearray)):
            compiled = self.binary_pattern
        else:
            compiled = self.text_pattern
        match = compiled.match(source, pos)
        if match is None:
            return None
        return match.end()

    def produce(self, text):
        """
        :returns: The token for the matched text.
        :raises TokenizationError: If the factory rejects the text or
            returns None.
        """
        try:
            token = self.factory(text)
        except ValueError as err:
            raise TokenizationError(
                f"Rule {self.pattern!r} rejected {text!r}: {err}"
            ) from err
        if token is None:
            raise TokenizationError(f"Rule {self.pattern!r} produced no token")
        return token

    def __repr__(self):
        kind = "skip" if self.is_skipped else "rule"
        return f"{kind}({self.pattern!r})"


def word(literal, token):
    """
    Rule for fixed words, ie. word('+', Token.PLUS) produces Token.PLUS
    each time the source contains '+'.

    Words take priority over regex rules matching the same text.

    :param literal: The exact text of the word.
    :param token: The token produced for that word, any value except None.
    """
    if token is None:
        raise TypeError(f"The token of word {literal!r} can not be None")
    return Rule(re.escape(literal), lambda _: token, priority=1)


def regex(pattern, factory):
    """
    Rule for tokens carrying data, ie.
    regex(r"-?[0-9]+", lambda text: Number(int(text))) produces
    Number(10) for the text '10'.

    The factory may raise ValueError (or TokenizationError) or return None
    to reject the matched text, in which case the lexicon produces its
    error token.

    :param pattern: Regular expression for the token.
    :param factory: Function from the matched text to a token.
    """
    return Rule(pattern, factory)


def skip(pattern):
    """
    Rule for trivia such as whitespace and comments which produces no
    tokens.
    """
    return Rule(pattern)
