"""
Text dump of a dense matrix.

Row-major, one line per row, every element followed by FIELD_SEPARATOR and
every row followed by ROW_TERMINATOR:

    12 12 \\n
    12 12 \\n
"""

from __future__ import annotations

import io
from typing import Any, TextIO
import numpy as np
from numpy.typing import NDArray

FIELD_SEPARATOR = ' '
ROW_TERMINATOR = '\n'


def format_element(value: Any) -> str:
    """Plain integer text for integral values, shortest round-trip repr for floats."""
    if isinstance(value, np.floating):
        # shortest repr at the scalar's own precision, not widened to float64
        return str(value)
    return repr(value.item()) if isinstance(value, np.generic) else repr(value)


def write_rows(data: NDArray[Any], out: TextIO) -> TextIO:
    """Write data to out in dump format and return out."""
    for row in data:
        out.write(''.join(format_element(x) + FIELD_SEPARATOR for x in row))
        out.write(ROW_TERMINATOR)
    return out


def dump(data: NDArray[Any]) -> str:
    """Dump format as a string."""
    return write_rows(data, io.StringIO()).getvalue()
