#!/usr/bin/env python3
"""Load catalog modules from a CSV file into the configured database.

Usage:
  python scripts/import_modules.py data/modules.sample.csv
  python scripts/import_modules.py modules.csv --dry-run

Rows are upserted by their ``id`` column, so re-running the import is safe.
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from keuzekompas.core.config import get_settings
from keuzekompas.core.logging import configure_logging
from keuzekompas.db import mongo
from keuzekompas.features.modules.importer import import_csv, parse_modules

logger = logging.getLogger("scripts.import_modules")


async def _run(text: str) -> int:
    await mongo.ensure_indexes()
    try:
        report = await import_csv(text)
    finally:
        mongo.close_client()
    print(f"created={report.created} updated={report.updated} skipped={len(report.errors)}")
    for line, message in report.errors:
        print(f"  line {line}: {message}")
    return 1 if report.errors and not report.imported else 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    p.add_argument("csv_path", type=Path, help="CSV file with a header row")
    p.add_argument("--dry-run", action="store_true", help="Validate only; do not write")
    args = p.parse_args(argv)

    configure_logging(get_settings().log_level)
    if not args.csv_path.is_file():
        print(f"Error: {args.csv_path} not found")
        return 2
    text = args.csv_path.read_text(encoding="utf-8")

    if args.dry_run:
        modules, errors = parse_modules(text)
        print(f"valid={len(modules)} invalid={len(errors)}")
        for line, message in errors:
            print(f"  line {line}: {message}")
        return 1 if errors else 0
    return asyncio.run(_run(text))


if __name__ == "__main__":
    sys.exit(main())
