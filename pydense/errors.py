"""exception types raised by the pydense containers"""


class OutOfRangeError(IndexError):
    """raised when an element is addressed at or beyond a container dimension

    Args:
        row (`int`): requested row index
        col (`int`): requested column index
        shape ((`int`,`int`)): shape of the container at the time of access

    """

    def __init__(self, row, col, shape):
        self.row = row
        self.col = col
        self.shape = tuple(shape)
        super().__init__(
            "Matrix subscript out of bounds: ({0},{1}) for shape {2}".format(
                row, col, self.shape
            )
        )
