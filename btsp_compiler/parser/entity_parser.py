"""
EntityLineParser
================

Parses a single program-block line into an :class:`~btsp_compiler.models.Entity`.

Line format::

    <command>
    <command>??<arg1>, <arg2>, ...
    <command>??(<arg1>, <arg2>, ...)

Rules:

+------------------------------------+------------------------------------------+
| Input                              | Result                                   |
+====================================+==========================================+
| no ``??`` in the line              | ``command`` = whole line, no args        |
+------------------------------------+------------------------------------------+
| ``??`` present                     | ``command`` = text before the first      |
|                                    | ``??`` (untrimmed)                       |
+------------------------------------+------------------------------------------+
| payload starts with ``(`` and      | outer pair removed before splitting      |
| ends with ``)``                    |                                          |
+------------------------------------+------------------------------------------+
| comma-separated tokens             | each stripped of `` \\t\\n\\r``; empty   |
|                                    | tokens dropped                           |
+------------------------------------+------------------------------------------+

Only the outermost wrapping pair is removed.  Parentheses inside a token are
not balanced or interpreted, so ``f??(g(x), y)`` gives ``["g(x)", "y"]`` and
``f??(a), (b)`` gives ``["a)", "(b"]``.
"""
from __future__ import annotations

from typing import List

from ..models import Entity
from ..pipeline.markers import ARG_MARKER, ARG_SEPARATOR, ARG_STRIP_CHARS


class EntityLineParser:
    """
    Stateless parser converting one source line into an :class:`Entity`.
    Never raises: any string produces some entity.
    """

    def parse(self, line: str) -> Entity:
        """
        Parse *line* into an :class:`Entity`.

        Parameters
        ----------
        line:
            A non-marker line from inside a program block, e.g. ``"foo"`` or
            ``"greet??(name, Bob)"``.

        Returns
        -------
        Entity
        """
        command, sep, payload = line.partition(ARG_MARKER)
        if not sep:
            return Entity(command=line)
        return Entity(command=command, args=self._parse_args(payload))

    # ------------------------------------------------------------------
    # Argument splitting
    # ------------------------------------------------------------------

    @staticmethod
    def _unwrap(payload: str) -> str:
        """Remove one pair of parentheses spanning the whole payload."""
        if payload.startswith("(") and payload.endswith(")"):
            return payload[1:-1]
        return payload

    @classmethod
    def _parse_args(cls, payload: str) -> List[str]:
        """
        Examples
        --------
        >>> EntityLineParser._parse_args("( x , y )")
        ['x', 'y']
        >>> EntityLineParser._parse_args("a,,b")
        ['a', 'b']
        """
        args: List[str] = []
        for token in cls._unwrap(payload).split(ARG_SEPARATOR):
            token = token.strip(ARG_STRIP_CHARS)
            if token:
                args.append(token)
        return args
