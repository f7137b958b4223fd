"""JSON-file-backed implementation of UnitOfWork.

The whole store (products, orders, users) is one JSON document.  A unit
of work holds a lock on the data directory for its entire lifetime,
reads the document fresh after taking the lock and, on commit, writes
the new document to a temporary file that replaces the old one in a
single ``os.replace``.  Readers therefore see either all of a commit or
none of it, and two checkouts on the same product can never interleave
their read-stock / write-stock steps.

Rolling back rebuilds the repositories from the document as it was last
loaded or committed, so it never reads the disk.

The lock is per process; several processes sharing one data directory
are not coordinated.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path

import structlog

from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)

logger = structlog.get_logger(__name__)

STORE_FILE = "store.json"
SECTIONS = ("products", "orders", "users")
NEXT_IDS = "next_ids"

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        return _locks.setdefault(path, threading.RLock())


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, data_dir: Path) -> None:
        self._file_path = Path(data_dir).resolve() / STORE_FILE
        self._lock = _lock_for(self._file_path)
        self._document: dict = {}

    # --- Context management ---------------------------------------------------

    def __enter__(self) -> JsonUnitOfWork:
        self._lock.acquire()
        try:
            self._document = self._read_document()
            self._build_repositories()
        except BaseException:
            self._lock.release()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            super().__exit__(exc_type, exc, tb)
        finally:
            self._lock.release()

    # --- UnitOfWork interface -------------------------------------------------

    def commit(self) -> None:
        document = {
            "products": self.products.dump(),
            "orders": self.orders.dump(),
            "users": self.users.dump(),
            NEXT_IDS: {"products": self.products.next_id},
        }
        self._write_atomically(document)
        self._document = document
        logger.debug("Unit of work committed", path=str(self._file_path))

    def rollback(self) -> None:
        self._build_repositories()

    # --- File helpers ---------------------------------------------------------

    def _build_repositories(self) -> None:
        document = self._document
        self.products = JsonProductRepository(
            document["products"], next_id=document[NEXT_IDS].get("products", 1)
        )
        self.orders = JsonOrderRepository(document["orders"])
        self.users = JsonUserRepository(document["users"])

    def _read_document(self) -> dict:
        raw = {}
        if self._file_path.exists():
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        document = {section: raw.get(section, []) for section in SECTIONS}
        document[NEXT_IDS] = raw.get(NEXT_IDS, {})
        return document

    def _write_atomically(self, document: dict) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=".store-", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(document, fh, indent=2)
                fh.write("\n")
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
