"""
Bootstrap Compiler
==================

Parses ``.btsp`` bootstrap source into a Bootstrap AST (BAST) – imports,
program-block entities, structural references and summary details – and
writes it out as a ``.btspdebug`` text file.

Quick start
-----------
>>> from btsp_compiler import BastAssembler
>>> result = BastAssembler().compile("hello.btsp", "main")
>>> if not result.ok:
...     print(result.diagnostic())
"""

from .models import Bast, CompileError, CompileResult, Entity
from .output.debug_writer import DebugWriter
from .parser.entity_parser import EntityLineParser
from .pipeline.assembler import BastAssembler, compile_file

__version__ = "0.1.0"
__all__ = [
    "Bast",
    "CompileError",
    "CompileResult",
    "Entity",
    "DebugWriter",
    "EntityLineParser",
    "BastAssembler",
    "compile_file",
]
