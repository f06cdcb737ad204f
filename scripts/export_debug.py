"""
export_debug.py
===============
Compile one or more ``.btsp`` sources and write one debug artifact per
source, named after the source stem, under ``outputs/debug/``.  With
``--json`` the assembled BAST of each source is also written as
``<stem>.json``.

Usage
-----
    python scripts/export_debug.py \\
        --sources tests/fixtures/hello.btsp tests/fixtures/multi_block.btsp \\
        --output-dir outputs/debug --json
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Allow running from the repo root without installing the package
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from btsp_compiler.pipeline.assembler import BastAssembler


def export(source: str, output_dir: Path, with_json: bool) -> int:
    stem = Path(source).stem
    result = BastAssembler(output_dir=output_dir).compile(source, stem)
    if not result.ok:
        print(result.diagnostic())
        return result.exit_code
    print(f"  wrote {result.output_path}")

    if with_json:
        json_file = output_dir / f"{stem}.json"
        json_file.write_text(json.dumps(result.bast.to_dict(), indent=2), encoding="utf-8")
        print(f"  wrote {json_file}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Export .btspdebug artifacts for several bootstrap sources"
    )
    parser.add_argument("--sources", nargs="+", required=True, metavar="FILE")
    parser.add_argument("--output-dir", "-o", default="outputs/debug", metavar="DIR")
    parser.add_argument("--json", action="store_true", help="Also dump each BAST as JSON")
    args = parser.parse_args()

    out = Path(args.output_dir)
    out.mkdir(parents=True, exist_ok=True)

    status = 0
    for src in args.sources:
        print(f"\n=== {src} ===")
        status = max(status, export(src, out, args.json))
    return status


if __name__ == "__main__":
    sys.exit(main())
