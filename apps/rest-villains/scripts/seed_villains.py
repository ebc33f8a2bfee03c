"""Load villains from a JSON file into the database."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from contextlib import suppress
from pathlib import Path

from pydantic import ValidationError

from rest_villains.db import database, models, schemas
from rest_villains.services import MUTABLE_FIELDS, VillainService


logger = logging.getLogger("rest_villains.scripts.seed_villains")

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[1] / "data" / "villains.json"

# Access SessionLocal dynamically so test fixtures that rebind the
# sessionmaker are respected.
SessionLocal = lambda: database.SessionLocal()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the villain table from a JSON file")
    parser.add_argument(
        "--file",
        type=Path,
        default=DEFAULT_DATA_FILE,
        help=f"JSON array of villain objects (default: {DEFAULT_DATA_FILE})",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate the file and report how many villains would be inserted",
    )
    parser.add_argument(
        "--skip-if-populated",
        action="store_true",
        help="Do nothing when the villain table already has rows",
    )
    return parser.parse_args(argv)


def load_villains(path: Path) -> list[schemas.VillainCreate]:
    """Parse and validate ``path``; raises ValueError on unusable input."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"Cannot read {path}: {e}") from e
    if not isinstance(raw, list):
        raise ValueError(f"{path} must contain a JSON array")
    villains = []
    for index, item in enumerate(raw):
        try:
            villains.append(schemas.VillainCreate.model_validate(item))
        except ValidationError as e:
            raise ValueError(f"Entry {index} in {path} is invalid: {e}") from e
    return villains


def seed(path: Path, dry_run: bool, skip_if_populated: bool) -> int:
    try:
        villains = load_villains(path)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        logger.error("Seed aborted", extra={"data_file": str(path)})
        return 1

    if dry_run:
        print(f"{len(villains)} villains would be inserted from {path}; no changes made.")
        return 0

    session = SessionLocal()
    try:
        service = VillainService(session)
        existing = service.count_villains()
        if skip_if_populated and existing:
            print(f"Villain table already holds {existing} rows; skipping seed.")
            logger.info("Seed skipped", extra={"existing_rows": existing})
            return 0

        with database.transactional(session):
            for villain in villains:
                session.add(_to_model(villain))
        print(f"Inserted {len(villains)} villains from {path}.")
        logger.info(
            "Seed finished",
            extra={"data_file": str(path), "inserted_rows": len(villains), "existing_rows": existing},
        )
        return 0
    finally:
        with suppress(Exception):
            session.close()


def _to_model(villain: schemas.VillainCreate) -> models.Villain:
    return models.Villain(**villain.model_dump(include=set(MUTABLE_FIELDS)))


def main(argv: list[str] | None = None) -> int:
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)
    return seed(args.file, dry_run=args.dry_run, skip_if_populated=args.skip_if_populated)


if __name__ == "__main__":  # pragma: no cover - manual execution path
    sys.exit(main())
