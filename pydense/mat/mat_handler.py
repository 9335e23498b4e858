import operator

import numpy as np
import pandas as pd

from ..logger import Logger
from ..errors import OutOfRangeError
from .._dtypes import check_dtype


class Matrix(object):
    """A dense, row-major 2-D container with value semantics

    Args:
        nrow (`int`): number of rows. Default is 0
        ncol (`int`): number of columns. Default is 0
        dtype (`numpy.dtype`): element type.  Must have a zero value and
            support addition.  Default is `Matrix.double`
        logger (`pydense.Logger`): logger used to record activity.  If None,
            a silent `Logger` is created

    Example::

        mat = pydense.Matrix(2, 3)           # 2 x 3 of zeros
        mat[1, 2] = 5.0
        lit = pydense.Matrix.from_list([[1, 2], [3, 4]])
        print(lit.element_at(1, 0))          # 3
        moved = pydense.Matrix.moved(lit)    # lit is now 0 x 0
        print(moved)

    Note:
        elements are stored in a single 1-D `numpy.ndarray`; element (r, c)
        lives at flat position r * ncol + c.  The storage is only reachable
        through the read-only `Matrix.x` view, a copy (`Matrix.newx`) or the
        element accessors.

    """

    double = np.float64
    delimiter = " "

    def __init__(self, nrow=0, ncol=0, dtype=None, logger=None):
        nrow, ncol = operator.index(nrow), operator.index(ncol)
        if nrow < 0 or ncol < 0:
            raise ValueError(
                "Matrix.__init__(): negative dimensions: {0},{1}".format(nrow, ncol)
            )
        if dtype is None:
            dtype = self.double
        self.__dtype = check_dtype(dtype)
        self.logger = logger if logger is not None else Logger(False)
        self.__set_storage(np.zeros(nrow * ncol, dtype=self.__dtype), nrow, ncol)

    def __set_storage(self, x, nrow, ncol):
        assert x.ndim == 1 and x.size == nrow * ncol, (
            "Matrix storage size " + str(x.size) + " != " + str(nrow * ncol)
        )
        self.__x = x
        self.__nrow = nrow
        self.__ncol = ncol

    def __release(self):
        self.__set_storage(np.zeros(0, dtype=self.__dtype), 0, 0)

    @classmethod
    def from_list(cls, rows, dtype=None, logger=None):
        """create a `Matrix` from a nested sequence of rows

        Args:
            rows ([[`object`]]): sequence of equal-length row sequences
            dtype (`numpy.dtype`, optional): element type.  If None, the
                type is inferred from the values (or `Matrix.double` if there
                are none)
            logger (`pydense.Logger`, optional): logger for the new instance

        Returns:
            `Matrix`: new instance with `len(rows)` rows and `len(rows[0])` columns

        Note:
            every row must have the same length as the first; a jagged
            literal raises `ValueError`

        Example::

            mat = pydense.Matrix.from_list([[1, 2], [3, 4]])
            assert mat.shape == (2, 2)

        """
        rows = [list(r) for r in rows]
        nrow = len(rows)
        ncol = len(rows[0]) if nrow > 0 else 0
        mat = cls(dtype=dtype, logger=logger)
        for i, r in enumerate(rows):
            if len(r) != ncol:
                mat.logger.lraise(
                    "Matrix.from_list(): row {0} has {1} values, expected {2}".format(
                        i, len(r), ncol
                    ),
                    ValueError,
                )
        flat = [v for r in rows for v in r]
        if dtype is None and len(flat) > 0:
            x = np.array(flat)
        else:
            x = np.array(flat, dtype=mat.dtype)
        if x.ndim != 1:
            mat.logger.lraise(
                "Matrix.from_list(): values must be scalars, got cells of shape "
                + str(x.shape[1:]),
                ValueError,
            )
        mat.__dtype = check_dtype(x.dtype)
        mat.__set_storage(x.reshape(-1), nrow, ncol)
        return mat

    @classmethod
    def from_dataframe(cls, df, logger=None):
        """create a `Matrix` from the values of a `pandas.DataFrame`

        Args:
            df (`pandas.DataFrame`): dataframe.  Index and column labels are dropped
            logger (`pydense.Logger`, optional): logger for the new instance

        Returns:
            `Matrix`: `Matrix` instance derived from `df`.

        """
        if not isinstance(df, pd.DataFrame):
            raise TypeError("Matrix.from_dataframe(): df is not a DataFrame")
        x = np.array(df.values)
        mat = cls(dtype=x.dtype, logger=logger)
        mat.__set_storage(x.reshape(-1), x.shape[0], x.shape[1])
        return mat

    @classmethod
    def moved(cls, other):
        """create a new `Matrix` that takes ownership of `other`'s storage

        Args:
            other (`Matrix`): source.  Left as an empty 0 x 0 matrix

        Returns:
            `Matrix`: new instance holding `other`'s former shape and values

        """
        mat = cls(dtype=other.dtype, logger=other.logger)
        return mat.take(other)

    def rows(self):
        """number of rows

        Returns:
            `int`: number of rows

        """
        return self.__nrow

    def cols(self):
        """number of columns

        Returns:
            `int`: number of columns

        """
        return self.__ncol

    @property
    def nrow(self):
        """length of first dimension"""
        return self.__nrow

    @property
    def ncol(self):
        """length of second dimension"""
        return self.__ncol

    @property
    def shape(self):
        """get the 2D shape of `Matrix`

        Returns:
            (`int`,`int`): number of rows and columns

        """
        return (self.__nrow, self.__ncol)

    @property
    def size(self):
        """total number of elements"""
        return self.__x.size

    @property
    def dtype(self):
        """element type"""
        return self.__dtype

    @property
    def x(self):
        """return a read-only 2-D view of the storage

        Returns:
            `numpy.ndarray`: non-writeable view shaped `Matrix.shape`

        Note:
            the view goes stale once the `Matrix` is reassigned, moved
            from or destroyed

        """
        view = self.__x.reshape(self.__nrow, self.__ncol)
        view.flags.writeable = False
        return view

    @property
    def newx(self):
        """return a writeable 2-D copy of the storage

        Returns:
            `numpy.ndarray`: a copy of `Matrix.x`

        """
        return self.__x.reshape(self.__nrow, self.__ncol).copy()

    def __flat_index(self, row, col):
        row, col = operator.index(row), operator.index(col)
        if row < 0 or col < 0 or row >= self.__nrow or col >= self.__ncol:
            raise OutOfRangeError(row, col, self.shape)
        return row * self.__ncol + col

    def element_at(self, row, col):
        """get the value at (`row`, `col`)

        Args:
            row (`int`): zero-based row index
            col (`int`): zero-based column index

        Returns:
            scalar of `Matrix.dtype`

        Note:
            raises `OutOfRangeError` if `row` >= `Matrix.rows()` or
            `col` >= `Matrix.cols()`.  Negative indices are out of range.

        """
        return self.__x[self.__flat_index(row, col)]

    def set_element(self, row, col, value):
        """set the value at (`row`, `col`) in place

        Args:
            row (`int`): zero-based row index
            col (`int`): zero-based column index
            value (`object`): new value, cast to `Matrix.dtype`

        Note:
            raises `OutOfRangeError` under the same conditions as
            `Matrix.element_at()`

        """
        self.__x[self.__flat_index(row, col)] = value

    def __getitem__(self, item):
        row, col = self.__unpack(item)
        return self.element_at(row, col)

    def __setitem__(self, item, value):
        row, col = self.__unpack(item)
        self.set_element(row, col, value)

    @staticmethod
    def __unpack(item):
        if not isinstance(item, tuple) or len(item) != 2:
            raise TypeError("Matrix indices must be a (row, col) tuple")
        return item

    def copy(self):
        """get an independent copy of `Matrix`

        Returns:
            `Matrix`: copy of this `Matrix`

        """
        mat = type(self)(dtype=self.__dtype, logger=self.logger)
        mat.__set_storage(self.__x.copy(), self.__nrow, self.__ncol)
        return mat

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def assign(self, other):
        """replace the contents of `Matrix` with a copy of `other`

        Args:
            other (`Matrix`): source matrix, left unchanged

        Returns:
            `Matrix`: self, to allow chaining

        Note:
            assigning a `Matrix` to itself does nothing

        """
        if not isinstance(other, Matrix):
            raise TypeError("Matrix.assign(): other is not a Matrix")
        if other is self:
            return self
        self.__release()
        self.__dtype = other.__dtype
        self.__set_storage(other.__x.copy(), other.__nrow, other.__ncol)
        return self

    def take(self, other):
        """move the contents of `other` into `Matrix`

        Args:
            other (`Matrix`): source matrix.  Left as an empty 0 x 0 matrix
                that no longer shares storage with anything

        Returns:
            `Matrix`: self, to allow chaining

        Note:
            taking from itself does nothing

        """
        if not isinstance(other, Matrix):
            raise TypeError("Matrix.take(): other is not a Matrix")
        if other is self:
            return self
        self.__release()
        self.__dtype = other.__dtype
        self.__set_storage(other.__x, other.__nrow, other.__ncol)
        other.__release()
        self.logger.statement(
            "Matrix.take(): moved {0}x{1} storage".format(*self.shape)
        )
        return self

    def destroy(self):
        """release the storage and reset `Matrix` to 0 x 0"""
        if self.__x.size > 0:
            self.logger.statement(
                "Matrix.destroy(): releasing {0}x{1} storage".format(*self.shape)
            )
        self.__release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.destroy()

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.__x, other.__x))

    def iter_lines(self):
        """lazily render `Matrix` one row at a time

        Returns:
            generator of `str`: one line per row, each value followed by
            `Matrix.delimiter`, terminated by a newline

        """
        x = self.x
        for i in range(self.__nrow):
            yield "".join(str(v) + self.delimiter for v in x[i]) + "\n"

    def to_text(self):
        """render `Matrix` as text, one line per row

        Returns:
            `str`: the concatenation of `Matrix.iter_lines()`

        """
        return "".join(self.iter_lines())

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return "Matrix(shape={0}, dtype={1})".format(self.shape, self.__dtype)

    def format_to(self, stream):
        """write the text rendering of `Matrix` to a stream

        Args:
            stream (`object`): anything with a `write(str)` method

        Returns:
            `object`: `stream`, to allow chaining

        """
        for line in self.iter_lines():
            stream.write(line)
        return stream

    def to_ascii(self, filename):
        """write the text rendering of `Matrix` to a file

        Args:
            filename (`str`): filename to write to

        """
        self.logger.log("writing matrix to " + str(filename))
        with open(filename, "w") as f_out:
            self.format_to(f_out)
        self.logger.log("writing matrix to " + str(filename))

    def to_dataframe(self):
        """return a pandas.DataFrame representation of `Matrix`

        Returns:
            `pandas.DataFrame`: a dataframe with positional row and column labels

        """
        return pd.DataFrame(data=self.newx)
