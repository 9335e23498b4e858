"""This module contains the dense, row-major `Matrix` container.  `Matrix` offers
bounds-checked element access, explicit copy and move semantics and a plain
text rendering."""

from .mat_handler import Matrix
