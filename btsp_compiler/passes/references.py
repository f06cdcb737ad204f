"""
ReferenceBuildPass
==================

Builds the structural reference list of a Bootstrap AST.

The list always has six entries, in this order::

    start:<line>;
    end:<line>;
    endcode:<line>;
    bootstrapver:b26;
    bootstraprqcomp:b26c;
    bootstrapast:b26bast;

``<line>`` is the 1-based number of the **last** ``#start`` / ``#end`` line,
or ``-1`` when the marker never occurs.  ``endcode`` repeats the ``end``
value; both are kept so readers of existing debug files find either key.
"""
from __future__ import annotations

from typing import List, Tuple

from ..pipeline.markers import (
    BOOTSTRAP_AST,
    BOOTSTRAP_COMPILER,
    BOOTSTRAP_VERSION,
    END_MARKER,
    NOT_FOUND,
    START_MARKER,
)


class ReferenceBuildPass:
    """Derives boundary line numbers and version tags from the source."""

    def run(self, lines: List[str]) -> List[str]:
        start_line, end_line = self.locate(lines)
        return [
            f"start:{start_line};",
            f"end:{end_line};",
            f"endcode:{end_line};",
            f"bootstrapver:{BOOTSTRAP_VERSION};",
            f"bootstraprqcomp:{BOOTSTRAP_COMPILER};",
            f"bootstrapast:{BOOTSTRAP_AST};",
        ]

    @staticmethod
    def locate(lines: List[str]) -> Tuple[int, int]:
        """
        Return ``(start_line, end_line)``: 1-based positions of the last
        ``#start`` and last ``#end`` lines, ``-1`` for a missing marker.
        """
        start_line = end_line = NOT_FOUND
        for number, line in enumerate(lines, start=1):
            if line == START_MARKER:
                start_line = number
            elif line == END_MARKER:
                end_line = number
        return start_line, end_line
