"""This module contains the 1-D `Vector` container.  `Vector` supports element-wise
addition truncated to the shorter operand and whitespace-separated text input."""

from .vec_handler import Vector, ParseResult, iter_tokens
