"""Test fixtures and utilities for space3 testing.

- assertions: Custom assertion functions (assert_matrix_close, assert_vector_close)
"""

from .assertions import assert_matrix_close, assert_vector_close

__all__ = [
    'assert_matrix_close',
    'assert_vector_close',
]
