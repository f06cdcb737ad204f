"""
ProgramBlockPass
================

Collects the entities of every program block in a ``.btsp`` source.

A program block is the run of lines between a ``#start`` line and the next
``#end`` line.  The pass keeps a single *inside program* flag:

+----------------------------------+-----------------------------------------+
| Line                             | Action                                  |
+==================================+=========================================+
| exactly ``#start``               | flag on, line skipped                   |
+----------------------------------+-----------------------------------------+
| exactly ``#end``                 | flag off, line skipped                  |
+----------------------------------+-----------------------------------------+
| empty                            | skipped                                 |
+----------------------------------+-----------------------------------------+
| anything else while flag is on   | parsed into an :class:`Entity`          |
+----------------------------------+-----------------------------------------+

Notes
-----
* Blocks are not nested; a second ``#start`` inside an open block only
  re-sets the flag.
* Several ``#start`` … ``#end`` spans all contribute, in source order.
* A ``#start`` with no later ``#end`` captures the rest of the file.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from ..models import Entity
from ..parser.entity_parser import EntityLineParser
from ..pipeline.markers import END_MARKER, START_MARKER

logger = logging.getLogger(__name__)


class ProgramBlockPass:
    """Turns the lines inside program blocks into entities."""

    def __init__(self, parser: Optional[EntityLineParser] = None) -> None:
        self._parser = parser or EntityLineParser()

    def run(self, lines: List[str]) -> List[Entity]:
        """
        Parameters
        ----------
        lines:
            All source lines, as produced by
            :class:`~btsp_compiler.passes.line_split.LineSplitPass`.

        Returns
        -------
        List[Entity]
            Entities in source line order.
        """
        entities: List[Entity] = []
        inside_program = False

        for line in lines:
            if line == START_MARKER:
                inside_program = True
                continue
            if line == END_MARKER:
                inside_program = False
                continue
            if inside_program and line:
                entities.append(self._parser.parse(line))

        if inside_program:
            logger.debug("Program block left open at end of source")
        return entities
