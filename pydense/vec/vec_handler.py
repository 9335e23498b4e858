from collections import namedtuple

import numpy as np
import pandas as pd

from ..logger import Logger
from .._dtypes import check_dtype, parse_scalar


class ParseResult(namedtuple("ParseResult", ["count", "complete", "token"])):
    """status returned by `Vector.parse_from()`

    Attributes:
        count (`int`): number of values parsed into the `Vector`
        complete (`bool`): True if the input was exhausted, False if parsing
            stopped at a token that could not be converted
        token (`str`): the offending token, or None if `complete`

    Note:
        a `ParseResult` is truthy only if `complete` is True
    """

    __slots__ = ()

    def __bool__(self):
        return bool(self.complete)


def iter_tokens(stream):
    """lazily split text input into whitespace-separated tokens

    Args:
        stream (`str` or iterable of `str`): a string, an open text file or
            any other iterable of lines

    Returns:
        generator of `str`

    """
    if isinstance(stream, str):
        stream = stream.splitlines()
    for line in stream:
        for token in line.split():
            yield token


class Vector(object):
    """An ordered, 1-D container supporting truncating element-wise addition

    Args:
        values ([`object`]): initial values, in order.  Default is empty
        dtype (`numpy.dtype`): element type.  Must have a zero value and
            support addition.  If None, inferred from `values` (or
            `Vector.double` if `values` is empty)
        logger (`pydense.Logger`): logger used to record activity.  If None,
            a silent `Logger` is created

    Example::

        a = pydense.Vector([1, 2, 3])
        b = pydense.Vector([10, 20])
        print(a + b)        # [11, 22]
        a += b
        print(a)            # [11, 22, 3]

    """

    double = np.float64
    separator = ", "

    def __init__(self, values=None, dtype=None, logger=None):
        if values is None:
            values = []
        if not isinstance(values, np.ndarray):
            values = list(values)
        if dtype is None and len(values) == 0 and not isinstance(values, np.ndarray):
            dtype = self.double
        x = np.array(values, dtype=dtype)
        if x.ndim != 1:
            raise ValueError("Vector.__init__(): values must be 1-D, ndim = " + str(x.ndim))
        self.__dtype = check_dtype(x.dtype)
        self.__x = x
        self.logger = logger if logger is not None else Logger(False)

    @classmethod
    def from_ascii(cls, filename, dtype=None, logger=None):
        """load whitespace-separated values from a text file

        Args:
            filename (`str`): name of the file to read
            dtype (`numpy.dtype`, optional): element type.  Default is `Vector.double`
            logger (`pydense.Logger`, optional): logger for the new instance

        Returns:
            `Vector`: the values read

        Note:
            if a token can't be converted, the values read before it are kept
            and a `PydenseWarning` is issued

        """
        vec = cls(dtype=dtype, logger=logger)
        with open(filename, "r") as f:
            result = vec.parse_from(f)
        if not result:
            vec.logger.warn(
                "Vector.from_ascii(): stopped reading {0} at token '{1}'".format(
                    filename, result.token
                )
            )
        return vec

    @property
    def dtype(self):
        """element type"""
        return self.__dtype

    @property
    def x(self):
        """return a read-only view of the values

        Returns:
            `numpy.ndarray`: non-writeable 1-D view

        """
        view = self.__x.view()
        view.flags.writeable = False
        return view

    def __len__(self):
        return self.__x.size

    def __iter__(self):
        return iter(self.x)

    def __getitem__(self, item):
        if isinstance(item, slice):
            return type(self)(self.__x[item], logger=self.logger)
        return self.__x[item]

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return len(self) == len(other) and bool(np.array_equal(self.__x, other.__x))

    def copy(self):
        """get an independent copy of `Vector`"""
        return type(self)(self.__x, logger=self.logger)

    def add(self, other):
        """element-wise sum over the common prefix of `Vector` and `other`

        Args:
            other (`Vector`): the vector to add

        Returns:
            `Vector`: new instance of length min(len(self), len(other)).
            Neither operand is modified

        Example::

            pydense.Vector([1, 2, 3]).add(pydense.Vector([10, 20]))  # [11, 22]

        """
        if not isinstance(other, Vector):
            raise TypeError("Vector.add(): other is not a Vector")
        n = min(len(self), len(other))
        return type(self)(self.__x[:n] + other.__x[:n], logger=self.logger)

    def add_in_place(self, other):
        """add `other` element-wise into the leading elements of `Vector`

        Args:
            other (`Vector`): the vector to add

        Returns:
            `Vector`: self

        Note:
            only the first min(len(self), len(other)) elements are updated.
            Unlike `Vector.add()`, trailing elements of `Vector` are kept
            unchanged rather than dropped.  Sums are cast back to
            `Vector.dtype`, so adding floats into an integer `Vector`
            truncates toward zero

        """
        if not isinstance(other, Vector):
            raise TypeError("Vector.add_in_place(): other is not a Vector")
        n = min(len(self), len(other))
        np.add(self.__x[:n], other.__x[:n], out=self.__x[:n], casting="unsafe")
        return self

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add_in_place(other)

    def clear(self):
        """remove all values in place

        Returns:
            `Vector`: self, to allow chaining

        """
        self.__x = np.zeros(0, dtype=self.__dtype)
        return self

    def to_text(self):
        """render `Vector` as `[v0, v1, ...]`

        Returns:
            `str`: bracketed values joined by `Vector.separator`.  An empty
            `Vector` renders as `[]`

        """
        return "[" + self.separator.join(str(v) for v in self) + "]"

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return "Vector({0}, dtype={1})".format(self.to_text(), self.__dtype)

    def format_to(self, stream):
        """write `Vector.to_text()` to a stream

        Args:
            stream (`object`): anything with a `write(str)` method

        Returns:
            `object`: `stream`, to allow chaining

        """
        stream.write(self.to_text())
        return stream

    def parse_from(self, stream):
        """replace the contents of `Vector` with values read from text

        Args:
            stream (`str` or iterable of `str`): whitespace-separated tokens,
                see `iter_tokens()`

        Returns:
            `ParseResult`: how many values were read and whether the input
            was exhausted

        Note:
            reading stops at the first token that can't be converted to
            `Vector.dtype`.  The values read before it are kept; the failure
            is reported only through the returned `ParseResult`

        Example::

            vec = pydense.Vector(dtype=int)
            result = vec.parse_from("1 2 x 3")
            # vec == [1, 2], result.complete is False, result.token == "x"

        """
        self.clear()
        values = []
        bad = None
        for token in iter_tokens(stream):
            try:
                values.append(parse_scalar(token, self.__dtype))
            except (ValueError, OverflowError):
                bad = token
                break
        self.__x = np.array(values, dtype=self.__dtype)
        if bad is not None:
            self.logger.statement(
                "Vector.parse_from(): stopped after {0} values at token '{1}'".format(
                    len(values), bad
                )
            )
            return ParseResult(len(values), False, bad)
        return ParseResult(len(values), True, None)

    def to_ascii(self, filename):
        """write the values to a file, space-separated on a single line.
        The file can be read back with `Vector.from_ascii()`

        Args:
            filename (`str`): filename to write to

        """
        self.logger.log("writing vector to " + str(filename))
        with open(filename, "w") as f_out:
            f_out.write(" ".join(str(v) for v in self) + "\n")
        self.logger.log("writing vector to " + str(filename))

    def to_series(self):
        """return a pandas.Series representation of `Vector`

        Returns:
            `pandas.Series`: a copy of the values with a positional index

        """
        return pd.Series(self.__x.copy())
