"""
Dense matrix module.

Public API:
    Matrix      - Dense 2-D value type over an integral or floating dtype

Matrix operations:
    rows(), cols(), columns()   - Shape queries
    transpose(), T()            - New transposed Matrix
    seq_add(other), +           - Element-wise sum
    m[i][j]                     - Element read / write
    ==, !=, allclose()          - Comparison
    write(out), str()           - Row-major text dump
"""

from pymatrix.dense.matrix import Matrix

__all__ = [
    "Matrix",
]
