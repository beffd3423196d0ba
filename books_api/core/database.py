# books_api/core/database.py
"""
Flat-file JSON document store backed by TinyDB.

Every table operation reads the file and writes it back in full, so a failed
write leaves the stored document exactly as it was.
"""

import json
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from tinydb import TinyDB

from books_api.core.exceptions import StorageError
from books_api.core.logging import get_logger

logger = get_logger(__name__)


@contextmanager
def storage_errors(action: str) -> Iterator[None]:
    """Re-raise file and serialization faults as StorageError."""
    try:
        yield
    except StorageError:
        raise
    except (OSError, ValueError, TypeError) as e:
        logger.error("Storage operation failed", action=action, error=str(e))
        raise StorageError(f"Failed to {action}: {e}", {"error": str(e)}) from e


def open_database(path: str | Path) -> TinyDB:
    """Open (creating when absent) the JSON file and check its layout."""
    path = Path(path)
    with storage_errors("open database"):
        db = TinyDB(
            path, create_dirs=True, encoding="utf-8", indent=2, ensure_ascii=False
        )
        try:
            raw = db.storage.read()
        except ValueError:
            db.close()
            raise

    if raw is None:
        logger.info("Database file is empty", path=str(path))
        return db

    if not isinstance(raw, dict) or not all(isinstance(t, dict) for t in raw.values()):
        db.close()
        raise StorageError(
            f"Database file {path} must map table names to objects",
            {"content": json.dumps(raw)[:200]},
        )

    logger.info(
        "Database loaded",
        path=str(path),
        tables={name: len(docs) for name, docs in raw.items()},
    )
    return db
