"""
ImportCollectPass
=================

Gathers ``#import <identifier>`` declarations from anywhere in the source.

The identifier is everything after the ``#import `` prefix, taken verbatim
(no trimming).  Repeated declarations are dropped; the first occurrence
fixes the position.
"""
from __future__ import annotations

from typing import List

from ..pipeline.markers import IMPORT_PREFIX


class ImportCollectPass:
    """Collects unique import identifiers in declaration order."""

    def run(self, lines: List[str]) -> List[str]:
        imports: List[str] = []
        for line in lines:
            if not line.startswith(IMPORT_PREFIX):
                continue
            name = line[len(IMPORT_PREFIX):]
            if name not in imports:
                imports.append(name)
        return imports
