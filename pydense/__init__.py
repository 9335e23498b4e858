"""pydense: small dense numeric containers with value semantics.

Two independent containers are provided: `pydense.Matrix`, a row-major 2-D
grid with bounds-checked element access and explicit copy/move, and
`pydense.Vector`, an ordered sequence with truncating element-wise addition
and whitespace-separated text input.
"""

from .errors import OutOfRangeError
from .logger import Logger
from .mat import Matrix
from .pydense_warnings import PydenseWarning
from .vec import ParseResult, Vector

from ._version import __version__

__all__ = [
    "Matrix",
    "Vector",
    "ParseResult",
    "OutOfRangeError",
    "Logger",
    "PydenseWarning",
]
