"""dtype handling shared by `Matrix` and `Vector`.  An element type is
usable only if it has a zero value and defines addition."""
import numpy as np

# signed int, unsigned int, float, complex, python object
addable_kinds = "iufcO"


def check_dtype(dtype):
    """coerce `dtype` to a `numpy.dtype` and verify it supports zero and addition

    Args:
        dtype (`object`): anything `numpy.dtype()` accepts

    Returns:
        `numpy.dtype`: the validated dtype

    """
    dtype = np.dtype(dtype)
    if dtype.kind not in addable_kinds:
        raise TypeError(
            "dtype '{0}' has no zero value or addition, ".format(dtype)
            + "kind must be one of '{0}'".format(addable_kinds)
        )
    return dtype


def parse_scalar(token, dtype):
    """convert a single text token to a scalar of `dtype`

    Args:
        token (`str`): whitespace-free token
        dtype (`numpy.dtype`): target element type

    Returns:
        scalar of `dtype`

    Note:
        raises `ValueError` (or `OverflowError` for integers that don't
        fit `dtype`) if the token can't be represented.  For object
        dtypes the token is converted with `float()`, so object vectors
        parse as python floats.

        only plain ascii numerals are accepted: digit separators ("1_000"),
        non-ascii digits and the non-finite names ("nan", "inf",
        "infinity") raise `ValueError` even though `int()`/`float()` take them
    """
    if not token.isascii() or "_" in token:
        raise ValueError("not a plain numeral: " + repr(token))
    if dtype.kind in "fcO" and ("nan" in token.lower() or "inf" in token.lower()):
        raise ValueError("non-finite token: " + repr(token))
    if dtype.kind == "O":
        return float(token)
    if dtype.kind in "iu":
        # "1.5" must not silently become 1
        value = int(token)
        info = np.iinfo(dtype)
        if value < info.min or value > info.max:
            raise OverflowError(
                "{0} out of bounds for {1}".format(value, dtype)
            )
        return dtype.type(value)
    if dtype.kind == "c":
        return dtype.type(complex(token))
    return dtype.type(float(token))
