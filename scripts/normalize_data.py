#!/usr/bin/env python3
"""
Validate (and optionally rewrite) a guitar backing file.

The file is loaded exactly like the API does at startup; without --check it
is written back in canonical form (2-space indent, no ids).

Usage:
  python scripts/normalize_data.py [--file guitar_api/data.json] [--check]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from guitar_api.core.config import get_settings
from guitar_api.domain.guitars import strip_id
from guitar_api.repositories import json_storage
from guitar_api.repositories.guitar_repository import GuitarRepository


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Validate and normalize the guitar backing file")
    ap.add_argument("--file", help="Backing file (default: DATA_FILE or the shipped dataset)")
    ap.add_argument("--check", action="store_true", help="Only validate, do not rewrite")
    args = ap.parse_args(argv)

    path = Path(args.file) if args.file else get_settings().data_file
    if not path.exists():
        raise SystemExit(f"File {path} does not exist")

    repo = GuitarRepository(path, persist=False, strict_load=True)
    count = repo.load()
    if not args.check:
        # StorageError propagates: a failed rewrite must fail the command
        json_storage.save(path, [strip_id(g) for g in repo.list_guitars()])
    print(f"OK: {count} guitars in {path}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
