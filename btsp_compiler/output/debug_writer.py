"""
DebugWriter
===========

Serialises a :class:`~btsp_compiler.models.Bast` into the ``.btspdebug``
text format.

Layout (UTF-8, ``\\n`` line endings, sections always present and in this
order, each entry on its own line)::

    ;;details
    projectname=examples/hello.btsp
    compile-start:1760000000
    num-entities:2
    ;;raw
    <every source line, verbatim>
    ;;imports
    <one identifier per line>
    ;;entities
    foo;
    greet ?? (name, Bob);
    ;;references
    start:2;
    ...

An entity is written as its command, then `` ?? (`` + args joined with
``", "`` + ``)`` when it has arguments, then ``;``.

The file is written line by line; an error part-way through leaves the
lines written so far on disk.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Union

from ..models import Bast, Entity
from ..pipeline.markers import DEBUG_SUFFIX

logger = logging.getLogger(__name__)

SECTION_PREFIX = ";;"


class DebugWriter:
    """Renders and writes ``<name>.btspdebug`` artifacts."""

    def render(self, bast: Bast) -> List[str]:
        """Return the artifact as a list of lines (without newlines)."""
        return list(self._iter_lines(bast))

    def to_text(self, bast: Bast) -> str:
        return "".join(f"{line}\n" for line in self._iter_lines(bast))

    def write(
        self,
        bast: Bast,
        output_name: str,
        output_dir: Union[str, Path] = ".",
    ) -> Path:
        """
        Write *bast* to ``<output_dir>/<output_name>.btspdebug``.

        Parameters
        ----------
        bast:
            The assembled Bootstrap AST.
        output_name:
            Base name of the artifact, without suffix (e.g. ``"main"``).
        output_dir:
            Directory to write into; defaults to the working directory.

        Returns
        -------
        Path
            Location of the written file.
        """
        out_file = Path(output_dir) / f"{output_name}{DEBUG_SUFFIX}"
        with open(
            out_file, "w", encoding="utf-8", errors="surrogateescape", newline="\n"
        ) as fh:
            for line in self._iter_lines(bast):
                fh.write(line + "\n")
        logger.info("Debug artifact written to %s", out_file)
        return out_file

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _iter_lines(self, bast: Bast) -> Iterator[str]:
        yield from self._section("details", bast.details)
        yield from self._section("raw", bast.raw)
        yield from self._section("imports", bast.imports)
        yield from self._section(
            "entities", [self.format_entity(e) for e in bast.entities]
        )
        yield from self._section("references", bast.references)

    @staticmethod
    def _section(name: str, entries: List[str]) -> Iterator[str]:
        yield f"{SECTION_PREFIX}{name}"
        yield from entries

    @staticmethod
    def format_entity(entity: Entity) -> str:
        """
        >>> DebugWriter.format_entity(Entity("greet", ["name", "Bob"]))
        'greet ?? (name, Bob);'
        >>> DebugWriter.format_entity(Entity("foo"))
        'foo;'
        """
        if entity.args:
            return f"{entity.command} ?? ({', '.join(entity.args)});"
        return f"{entity.command};"
