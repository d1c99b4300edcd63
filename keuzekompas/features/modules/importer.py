"""Bulk-load catalog modules from a CSV export.

The header row names the module fields (``id``, ``name``, ``shortdescription``,
``description``, ``content``, ``studycredit``, ``location``, ``contact_id``,
``level``, ``learningoutcomes``). Blank cells become ``None`` and blank lines
are skipped. Rows that fail validation are reported, not imported.
"""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from pydantic import ValidationError

from .repository import module_repository
from .schemas import ModuleCreate

logger = logging.getLogger("modules.importer")


@dataclass
class ImportReport:
    created: int = 0
    updated: int = 0
    errors: List[Tuple[int, str]] = field(default_factory=list)

    @property
    def imported(self) -> int:
        return self.created + self.updated


def _clean(row: dict) -> dict:
    out = {}
    for key, value in row.items():
        if key is None:
            continue
        key = key.strip().lower()
        if isinstance(value, str):
            value = value.strip()
        out[key] = value if value not in ("", None) else None
    return out


def parse_modules(text: str) -> Tuple[List[ModuleCreate], List[Tuple[int, str]]]:
    """Parse CSV text; returns (valid modules, [(line number, error)])."""
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")))
    modules: List[ModuleCreate] = []
    errors: List[Tuple[int, str]] = []
    for row in reader:
        cleaned = _clean(row)
        if not any(v is not None for v in cleaned.values()):
            continue
        try:
            modules.append(ModuleCreate(**cleaned))
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
            errors.append((reader.line_num, f"invalid fields: {fields or 'row'}"))
    return modules, errors


async def import_modules(modules: Iterable[ModuleCreate]) -> ImportReport:
    report = ImportReport()
    for module in modules:
        if await module_repository.upsert_module(module):
            report.created += 1
        else:
            report.updated += 1
    logger.info("import finished created=%d updated=%d", report.created, report.updated)
    return report


async def import_csv(text: str) -> ImportReport:
    modules, errors = parse_modules(text)
    for line, message in errors:
        logger.warning("skipping CSV line %d: %s", line, message)
    report = await import_modules(modules)
    report.errors.extend(errors)
    return report
