"""
The sequence contract a parser input has to fulfil in order to be used by
combinator parsers: a length, iteration over elements, slicing by offset,
and a way to tell that an input ended too early.

Offsets are always measured from the current position of the input and in
the units of its length, so that input.take(input.slice_index(n)) holds
the first n elements.
"""

from abc import ABC, abstractmethod


class IncompleteInput(Exception):
    """
    Raised when an input does not contain as many elements as requested.
    Unlike a parse error, this means more input could make the request
    succeed.
    """

    def __init__(self, missing=None):
        """
        :param missing: How many elements are missing, None if unknown.
        """
        self.missing = missing
        if missing is None:
            super().__init__("Need more input")
        else:
            super().__init__(f"Need {missing} more elements of input")


class InputLength(ABC):
    @abstractmethod
    def input_len(self):
        """
        :returns: The length of the remaining input.
        """
        pass


class InputIter(ABC):
    @abstractmethod
    def iter_indices(self):
        """
        :returns: Iterator of the remaining elements, each paired with the
            offset it starts at.
        """
        pass

    @abstractmethod
    def iter_elements(self):
        """
        :returns: Iterator of the remaining elements.
        """
        pass

    @abstractmethod
    def position(self, predicate):
        """
        :param predicate: Function taking an element.
        :returns: The offset of the first element for which predicate
            is true, or None if there is no such element.
        """
        pass

    @abstractmethod
    def slice_index(self, count):
        """
        :returns: The offset just past the first count elements.
        :raises IncompleteInput: If there are fewer than count elements.
        """
        pass


class InputTake(ABC):
    @abstractmethod
    def take(self, count):
        """
        :returns: The input cut after count units of length.
        """
        pass

    @abstractmethod
    def take_split(self, count):
        """
        :returns: Tuple of the input cut after count units of length and
            the rest of the input.
        """
        pass
