from __future__ import annotations

import os
from pathlib import Path

STORAGE_SQL = "sql"
STORAGE_MEMORY = "memory"
STORAGE_BACKENDS = (STORAGE_SQL, STORAGE_MEMORY)


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def catalog_path() -> Path | None:
    """Catalog file override; None means the bundled catalog."""
    value = os.getenv("CARBAY_CATALOG_PATH")
    return Path(value) if value else None


def storage_backend() -> str:
    backend = os.getenv("CARBAY_STORAGE", STORAGE_SQL).strip().lower()

    if backend not in STORAGE_BACKENDS:
        raise RuntimeError(
            f"CARBAY_STORAGE must be one of {', '.join(STORAGE_BACKENDS)}, got '{backend}'"
        )

    return backend
