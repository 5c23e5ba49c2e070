"""
Demonstration: python -m pymatrix

Adds two 2x2 integer matrices filled with 4 and 8, prints whether the sum
equals a 2x2 matrix of 12 (1 or 0), then dumps the operands.
"""

from __future__ import annotations

import sys
from typing import TextIO

from pymatrix.dense import Matrix


def main(out: TextIO | None = None) -> int:
    if out is None:
        out = sys.stdout

    a = Matrix(2, 2, 4)
    b = Matrix(2, 2, 8)

    c = Matrix(2, 2, 12)

    res = a.seq_add(b)

    print(int(res == c), file=out)

    print(a, file=out)

    print("Result:", file=out)
    print(res, file=out)

    print("C:", file=out)
    print(c, file=out)

    return 0


if __name__ == "__main__":
    sys.exit(main())
