"""
Core data models for the bootstrap compiler.

A compile run produces exactly one :class:`Bast` (Bootstrap AST) and reports
its outcome as a :class:`CompileResult`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Entity
# ---------------------------------------------------------------------------


@dataclass
class Entity:
    """One parsed instruction line from inside a program block."""

    command: str
    args: List[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Entity(command={self.command!r}, args={self.args})"

    def to_dict(self) -> Dict[str, Any]:
        return {"command": self.command, "args": list(self.args)}


# ---------------------------------------------------------------------------
# Bootstrap AST
# ---------------------------------------------------------------------------


@dataclass
class Bast:
    """
    The Bootstrap AST for one source file.

    ``imports`` keeps first-occurrence order with duplicates removed,
    ``entities`` follows source line order, ``references`` always holds the
    six fixed-format metadata strings and ``raw`` is the untouched line list.
    """

    imports: List[str] = field(default_factory=list)
    entities: List[Entity] = field(default_factory=list)
    references: List[str] = field(default_factory=list)
    details: List[str] = field(default_factory=list)
    raw: List[str] = field(default_factory=list)

    @property
    def num_entities(self) -> int:
        return len(self.entities)

    def __repr__(self) -> str:
        return (
            f"Bast(imports={len(self.imports)}, entities={self.num_entities}, "
            f"lines={len(self.raw)})"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "details": list(self.details),
            "raw": list(self.raw),
            "imports": list(self.imports),
            "entities": [e.to_dict() for e in self.entities],
            "references": list(self.references),
        }


# ---------------------------------------------------------------------------
# Compile outcome
# ---------------------------------------------------------------------------

ERROR_KINDS = {
    "OPEN_FAILURE",        # Input file could not be opened
    "PROCESSING_FAILURE",  # Anything raised while reading, parsing or writing
}

# First line of every failure diagnostic
FAILURE_TAG = "b26c=1"


@dataclass
class CompileError:
    """A terminal failure of one compile invocation."""

    kind: str
    message: str = ""

    def __post_init__(self) -> None:
        if self.kind not in ERROR_KINDS:
            raise ValueError(f"unknown compile error kind: {self.kind!r}")

    @classmethod
    def open_failure(cls, message: str = "") -> CompileError:
        return cls(kind="OPEN_FAILURE", message=message)

    @classmethod
    def processing_failure(cls, message: str = "") -> CompileError:
        return cls(kind="PROCESSING_FAILURE", message=message)

    def detail_line(self) -> str:
        """The second diagnostic line, e.g. ``file-opened: 0``."""
        if self.kind == "OPEN_FAILURE":
            return "file-opened: 0"
        return f"error: {self.message or '?'}"

    def __str__(self) -> str:
        return f"{FAILURE_TAG}\n{self.detail_line()}"


@dataclass
class CompileResult:
    """
    Outcome of :meth:`~btsp_compiler.pipeline.assembler.BastAssembler.compile`.

    Exactly one of ``output_path`` / ``error`` is meaningful: on success the
    debug artifact location is set and ``error`` is *None*; on failure
    ``error`` describes what went wrong.
    """

    exit_code: int
    output_path: Optional[Path] = None
    bast: Optional[Bast] = None
    error: Optional[CompileError] = None

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @classmethod
    def success(cls, output_path: Path, bast: Bast) -> CompileResult:
        return cls(exit_code=0, output_path=output_path, bast=bast)

    @classmethod
    def failure(cls, error: CompileError, bast: Optional[Bast] = None) -> CompileResult:
        return cls(exit_code=1, bast=bast, error=error)

    def diagnostic(self) -> str:
        """Text the caller prints on stdout; empty for a successful run."""
        return str(self.error) if self.error is not None else ""
