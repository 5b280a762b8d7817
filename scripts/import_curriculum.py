#!/usr/bin/env python3
"""
Curriculum Importer: nested JSON → database

Runs the same bulk importer as ``POST /api/curriculum/upload`` against the
configured database, for loading exported or hand-written curriculum files.

Usage:
    python scripts/import_curriculum.py curriculum.json
    python scripts/import_curriculum.py curriculum.json --create-tables
    python scripts/import_curriculum.py curriculum.json --db-url=postgresql+asyncpg://...
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from sqlalchemy.ext.asyncio import create_async_engine

from curriplan.config import settings
from curriplan.core.models import Base
from curriplan.core.schemas import ImportResultsSchema
from curriplan.hierarchy import LEVELS, CurriculumImporter, extract_documents


def load_documents(path: Path) -> list[Any]:
    """Read curriculum documents from a JSON file.

    Accepts either ``{"curriculums": [...]}`` or a bare list.
    """
    with path.open(encoding="utf-8") as f:
        payload = json.load(f)
    if isinstance(payload, list):
        payload = {"curriculums": payload}
    return extract_documents(payload)


async def import_file(path: Path, db_url: str, create_tables: bool = False) -> ImportResultsSchema:
    """Import every curriculum in ``path`` and return the per-level counts."""
    documents = load_documents(path)
    engine = create_async_engine(db_url, echo=False)
    try:
        if create_tables:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            print("✅ Database tables created/verified")

        return await CurriculumImporter(engine).run(documents)
    finally:
        await engine.dispose()


def print_results(results: ImportResultsSchema) -> None:
    print("\n📊 Import Results:")
    for level in LEVELS:
        count = getattr(results, f"{level.plural}_created")
        print(f"  {level.plural.capitalize()}: {count}")

    if results.errors:
        print(f"\n❌ {len(results.errors)} curriculum(s) failed:")
        for error in results.errors:
            print(f"  - {error}")


async def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Import nested curriculum JSON into the database")
    parser.add_argument("path", type=Path, help="JSON file with curriculum documents")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before importing",
    )
    parser.add_argument(
        "--db-url",
        type=str,
        help="Custom database URL (default from settings)",
    )
    args = parser.parse_args()

    db_url = args.db_url or settings.database_url

    print("🚀 Curriplan Curriculum Importer")
    print(f"📁 File: {args.path}")
    print(f"🗄️  Database: {db_url.split('@')[1] if '@' in db_url else db_url}\n")

    results = await import_file(args.path, db_url, create_tables=args.create_tables)
    print_results(results)

    if results.errors:
        return 1
    print("\n✅ Import complete!")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
