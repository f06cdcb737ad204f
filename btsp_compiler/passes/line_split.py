"""
LineSplitPass
=============

First stage of the pipeline: turns raw source text into the ordered list of
lines every later pass works on.

Rules
-----
* ``\\r\\n`` pairs are folded to ``\\n``; a lone ``\\r`` stays in its line.
* Lines are then split on ``\\n`` only.
* Empty lines are kept, trailing whitespace is **not** stripped.
* A terminating newline closes the last line; it does not open an empty one
  (``"a\\nb\\n"`` gives ``["a", "b"]`` while ``"a\\n\\n"`` gives ``["a", ""]``).
* Empty text yields an empty list.
"""
from __future__ import annotations

from typing import List


class LineSplitPass:
    """Splits source text into lines."""

    def run(self, text: str) -> List[str]:
        """
        Split *text* into lines.

        Parameters
        ----------
        text:
            Full content of a ``.btsp`` file, read without newline
            translation.

        Returns
        -------
        List[str]
            One entry per source line, in file order.
        """
        if not text:
            return []
        lines = text.replace("\r\n", "\n").split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines
