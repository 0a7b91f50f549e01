"""
create_tables.py — idempotent table creation script.
Run this before starting the API for the first time, or after schema changes.
Safe to run multiple times (all DDL uses IF NOT EXISTS).

Usage:
    python scripts/create_tables.py
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

# Ensure the project root is on the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dining_review.config import settings
from dining_review.database import create_all, engine
from dining_review.models import Base  # noqa: F401 — triggers model registration


async def main() -> None:
    """Create all tables."""
    print(f"Creating tables in {settings.database_url} ...")
    await create_all()
    print("  ✓ users, restaurants, reviews ready (IF NOT EXISTS)")

    print("\nDone. Start the API with `uvicorn dining_review.main:app`.")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
