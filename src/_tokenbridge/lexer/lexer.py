import warnings

from _tokenbridge.lexer.errors import TokenizationError
from _tokenbridge.lexer.span import Span

end_of_input = object()


class Lexicon:
    """
    The lexical rules of a language. At each position of the source, the
    rule with the longest match produces the next token. Ties are broken
    by rule priority (words before regexes) and then by the order the
    rules were given in.

    >>> lexicon = Lexicon(
    ...     word("+", "plus"),
    ...     regex(r"[0-9]+", int),
    ...     skip(r"\\s+"),
    ...     error="error",
    ... )
    >>> list(lexicon.lexer("1 + 2"))
    [1, 'plus', 2]

    """

    def __init__(self, *rules, error):
        """
        :param rules: The rules of the lexicon, see word, regex and skip.
        :param error: The token produced for text that no rule accepts, any
            value except None.
        """
        if error is None:
            raise TypeError("The error token of a Lexicon can not be None")
        self.rules = rules
        self.error = error

    def lexer(self, source=""):
        return Lexer(self, source)

    def longest_match(self, source, pos):
        """
        :returns: Tuple of the rule with the longest match at pos and the
            end of that match, (None, pos) if no rule matches.
        """
        best_rule = None
        best_end = pos
        for rule in self.rules:
            end = rule.match_end(source, pos)
            if end is None:
                continue
            if end == pos:
                warnings.warn(
                    f"{rule!r} matches the empty string, ignoring that match",
                    stacklevel=2,
                )
                continue
            if (
                best_rule is None
                or end > best_end
                or (end == best_end and rule.priority > best_rule.priority)
            ):
                best_rule = rule
                best_end = end
        return best_rule, best_end

    def scan(self, source, pos):
        """
        Find the next token in source at or after pos, skipping trivia.

        :returns: Tuple of the token and its span. At the end of source the
            token is end_of_input and the span is empty and positioned at
            the end of source.
        """
        while pos < len(source):
            rule, end = self.longest_match(source, pos)
            if rule is None:
                return self.error, Span(pos, pos + 1)
            if rule.is_skipped:
                pos = end
                continue
            try:
                return rule.produce(source[pos:end]), Span(pos, end)
            except TokenizationError:
                return self.error, Span(pos, end)
        return end_of_input, Span(pos, pos)


class Lexer:
    """
    A forward only cursor over the tokens of a source. The lexer is an
    iterator of tokens, after each token, span holds the position of that
    token in the source.

    The state of the cursor is only the span of the last token, so
    clone() is cheap and the clone continues independently from the same
    position.

    Tokens are scanned when requested, the lexer never holds more than
    one token.
    """

    __slots__ = ("lexicon", "source", "span")

    def __init__(self, lexicon, source=""):
        """
        :param lexicon: The Lexicon used for scanning tokens.
        :param source: A str or bytes source.
        """
        self.lexicon = lexicon
        self.source = source
        self.span = Span(0, 0)

    @property
    def slice(self):
        """
        The text of the last token read.
        """
        return self.source[self.span.as_slice()]

    @property
    def remainder(self):
        """
        The source text following the last token read.
        """
        return self.source[self.span.end :]

    def clone(self):
        other = Lexer.__new__(type(self))
        other.lexicon = self.lexicon
        other.source = self.source
        other.span = self.span
        return other

    __copy__ = clone

    def __iter__(self):
        return self

    def __next__(self):
        # At the end of source this only consumes trailing trivia.
        token, self.span = self.lexicon.scan(self.source, self.span.end)
        if token is end_of_input:
            raise StopIteration
        return token

    def spanned(self):
        """
        Consume the lexer, yielding each token together with its span.
        """
        for token in self:
            yield token, self.span

    def __repr__(self):
        return f"Lexer({self.remainder!r})"
