"""
BastAssembler
=============

Runs the whole compile of one ``.btsp`` file and reports the outcome.

Pipeline stages:

1. :class:`~btsp_compiler.passes.line_split.LineSplitPass`
   – Split the file content into lines.
2. :class:`~btsp_compiler.passes.imports.ImportCollectPass`
   – Collect unique ``#import`` identifiers.
3. :class:`~btsp_compiler.passes.references.ReferenceBuildPass`
   – Locate the last ``#start`` / ``#end`` and add the version tags.
4. :class:`~btsp_compiler.passes.program_block.ProgramBlockPass`
   – Parse every line inside a program block into an entity.
5. :class:`~btsp_compiler.output.debug_writer.DebugWriter`
   – Write ``<output_name>.btspdebug``.

Stages 2–4 read the same line list and do not depend on one another.

Failures are returned, not raised: :meth:`BastAssembler.compile` always
produces a :class:`~btsp_compiler.models.CompileResult` with exit code ``0``
or ``1``.
"""
from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..models import Bast, CompileError, CompileResult
from ..output.debug_writer import DebugWriter
from ..passes.imports import ImportCollectPass
from ..passes.line_split import LineSplitPass
from ..passes.program_block import ProgramBlockPass
from ..passes.references import ReferenceBuildPass

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_NAME = "main"


class BastAssembler:
    """
    High-level entry point for compiling ``.btsp`` sources.

    Parameters
    ----------
    output_dir:
        Directory that receives the ``.btspdebug`` artifact.  Defaults to the
        current working directory.
    clock:
        Callable returning seconds since the epoch; used for the
        ``compile-start`` detail.  Defaults to :func:`time.time`.
    """

    def __init__(
        self,
        output_dir: Union[str, Path] = ".",
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self._clock = clock or time.time
        self._splitter = LineSplitPass()
        self._imports = ImportCollectPass()
        self._references = ReferenceBuildPass()
        self._program = ProgramBlockPass()
        self._writer = DebugWriter()

    # ------------------------------------------------------------------
    # Primary API
    # ------------------------------------------------------------------

    def compile(
        self,
        file_path: Union[str, Path],
        output_name: str = DEFAULT_OUTPUT_NAME,
    ) -> CompileResult:
        """
        Compile *file_path* and write ``<output_name>.btspdebug``.

        Parameters
        ----------
        file_path:
            The ``.btsp`` source file.  Reported verbatim as ``projectname``.
        output_name:
            Base name of the debug artifact.

        Returns
        -------
        CompileResult
            ``exit_code`` 0 with ``output_path`` set, or 1 with ``error`` set.
            An open failure writes nothing; a processing failure may leave a
            partially written artifact.
        """
        logger.info("Compiling file: %s", file_path)
        try:
            source = open(
                file_path, "r", encoding="utf-8", errors="surrogateescape", newline=""
            )
        except OSError as exc:
            logger.error("Failed to open %s: %s", file_path, exc)
            return CompileResult.failure(CompileError.open_failure(str(exc)))

        bast: Optional[Bast] = None
        with source:
            try:
                start_time = int(self._clock())
                lines = self._splitter.run(source.read())
                bast = self.assemble(lines, str(file_path), start_time)
                out_file = self._writer.write(bast, output_name, self.output_dir)
            except Exception as exc:
                logger.error("Compile of %s failed: %s", file_path, exc)
                return CompileResult.failure(
                    CompileError.processing_failure(str(exc)), bast=bast
                )

        return CompileResult.success(out_file, bast)

    def assemble(
        self,
        lines: List[str],
        project_name: str,
        start_time: int,
    ) -> Bast:
        """
        Build the :class:`Bast` for already-split *lines*.  Pure; touches
        neither the filesystem nor the clock.
        """
        bast = Bast(raw=list(lines))
        bast.imports = self._imports.run(lines)
        bast.references = self._references.run(lines)
        bast.entities = self._program.run(lines)
        bast.details = [
            f"projectname={project_name}",
            f"compile-start:{start_time}",
            f"num-entities:{bast.num_entities}",
        ]
        logger.debug(
            "%s: %d lines, %d imports, %d entities",
            project_name, len(lines), len(bast.imports), bast.num_entities,
        )
        return bast

    def assemble_text(self, source: str, project_name: str = "<inline>") -> Bast:
        """Build the :class:`Bast` for ``.btsp`` source held in a string."""
        return self.assemble(
            self._splitter.run(source), project_name, int(self._clock())
        )


def compile_file(
    file_path: Union[str, Path],
    output_name: str = DEFAULT_OUTPUT_NAME,
    output_dir: Union[str, Path] = ".",
) -> CompileResult:
    """Compile one file with a default :class:`BastAssembler`."""
    return BastAssembler(output_dir=output_dir).compile(file_path, output_name)
