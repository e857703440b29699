"""
Tokens wraps a lexer so that it can be used as input for combinator
parsers. A parser receives Tokens, looks at the next token with peek() and
returns the rest of the input with advance(), so backtracking is just
holding on to an earlier Tokens.

Tokens never holds more than the lexer's cursor. Every operation that looks
further ahead works on a clone of the lexer, and operations consuming input
return new Tokens. Therefore, Tokens can be shared freely.
"""

from itertools import zip_longest

from _tokenbridge.input import IncompleteInput, InputIter, InputLength, InputTake
from _tokenbridge.lexer import Lexer

_end_of_tokens = object()


class IndexIterator:
    """
    An iterator which (similarly to enumerate) pairs each (token, span)
    with an index, although the index is the offset of the token from the
    position the iteration started at rather than its count.
    """

    def __init__(self, lexer):
        """
        :param lexer: The lexer to iterate, it is consumed by the iterator.
        """
        self.lexer = lexer
        self.base = lexer.span.end

    def __iter__(self):
        return self

    def __next__(self):
        token = next(self.lexer)
        span = self.lexer.span
        return span.start - self.base, (token, span)


class Tokens(InputIter, InputLength, InputTake):
    """
    The tokens of a source as parser input.

    >>> tokens = Tokens(calculator, "10 + 3")
    >>> tokens.peek()
    (Number(value=10), '10')
    >>> rest = tokens.advance()
    >>> rest.peek()
    (<Token.PLUS: '+'>, '+')
    >>> len(rest)
    4

    Note that the length of Tokens is the length of the remaining source,
    not the number of remaining tokens.

    """

    def __init__(self, lexicon, source=""):
        """
        :param lexicon: The lexicon to tokenize source with.
        :param source: str or bytes source, by default empty, which gives
            Tokens which are already at the end.
        """
        self._lexer = Lexer(lexicon, source)

    @classmethod
    def from_lexer(cls, lexer):
        """
        :returns: Tokens continuing from the current position of lexer, the
            lexer is not consumed.
        """
        tokens = cls.__new__(cls)
        tokens._lexer = lexer.clone()
        return tokens

    @property
    def lexicon(self):
        return self._lexer.lexicon

    @property
    def source(self):
        return self._lexer.source

    @property
    def offset(self):
        """
        The position of the next unread text in source.
        """
        return self._lexer.span.end

    def __len__(self):
        return len(self._lexer.source) - self._lexer.span.end

    def input_len(self):
        return len(self)

    def is_empty(self) -> bool:
        return len(self) == 0

    def peek(self):
        """
        :returns: Tuple of the next token and its text, or None at the end
            of the input.
        """
        for token, span in self._lexer.clone().spanned():
            return token, self.source[span.as_slice()]
        return None

    def advance(self):
        """
        :returns: Tokens positioned after the next token. At the end of the
            input, equal Tokens.
        """
        lexer = self._lexer.clone()
        next(lexer, None)
        return Tokens.from_lexer(lexer)

    def clone(self):
        return Tokens.from_lexer(self._lexer)

    __copy__ = clone

    def __eq__(self, other):
        if not isinstance(other, Tokens):
            return NotImplemented
        return all(
            a == b
            for a, b in zip_longest(
                self._lexer.clone(), other._lexer.clone(), fillvalue=_end_of_tokens
            )
        )

    def __repr__(self):
        return f"Tokens({self._lexer.remainder!r})"

    def __iter__(self):
        return self.iter_elements()

    def iter_elements(self):
        """
        :returns: Iterator of (token, span) for the remaining tokens. The
            spans are positions in source.
        """
        return self._lexer.clone().spanned()

    def iter_indices(self):
        return IndexIterator(self._lexer.clone())

    def position(self, predicate):
        """
        :param predicate: Function taking a (token, span) tuple.
        :returns: The offset from the current position of the first token
            satisfying predicate, or None.
        """
        for offset, element in self.iter_indices():
            if predicate(element):
                return offset
        return None

    def slice_index(self, count):
        """
        :returns: The offset from the current position where the token
            following the first count tokens starts, or the length of the
            input if there are exactly count tokens.
        :raises IncompleteInput: If there are fewer than count tokens.
        """
        seen = 0
        for offset, _ in self.iter_indices():
            if seen == count:
                return offset
            seen += 1
        if seen == count:
            return len(self)
        raise IncompleteInput(count - seen)

    def take(self, count):
        """
        :returns: New Tokens for the first count units of the remaining
            source. The new Tokens are tokenized from scratch, so their
            spans are positions in the shortened source.
        """
        return Tokens(self.lexicon, self._lexer.remainder[:count])

    def take_split(self, count):
        """
        :returns: Tuple of new Tokens for the first count units of the
            remaining source and new Tokens for the rest. As for take,
            both are tokenized from scratch.
        """
        remainder = self._lexer.remainder
        return (
            Tokens(self.lexicon, remainder[:count]),
            Tokens(self.lexicon, remainder[count:]),
        )
