from typing import NamedTuple


class Span(NamedTuple):
    """
    The half-open interval [start, end) of a token in the source it was
    read from. Offsets count bytes for a bytes source and characters for
    a str source.
    """

    start: int
    end: int

    def as_slice(self):
        """
        :returns: A slice object, so that source[span.as_slice()] is the
            text of the token.
        """
        return slice(self.start, self.end)
