"""
Directive markers and fixed tags of the ``.btsp`` notation.

Shared by the passes that recognise program boundaries and imports, the
entity parser and the reference builder.
"""
from __future__ import annotations

# ── Line directives (matched against the whole line) ─────────────────────
START_MARKER = "#start"
END_MARKER = "#end"

# ── Line prefixes ─────────────────────────────────────────────────────────
IMPORT_PREFIX = "#import "

# ── Entity syntax ─────────────────────────────────────────────────────────
ARG_MARKER = "??"
ARG_SEPARATOR = ","
ARG_STRIP_CHARS = " \t\n\r"

# ── Bootstrap toolchain tags written into every reference list ────────────
BOOTSTRAP_VERSION = "b26"
BOOTSTRAP_COMPILER = "b26c"
BOOTSTRAP_AST = "b26bast"

# Line number reported for a marker that never occurs in the source
NOT_FOUND = -1

SOURCE_SUFFIX = ".btsp"
DEBUG_SUFFIX = ".btspdebug"
