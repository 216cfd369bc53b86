"""Single JSON document backing both collections.

The file on disk is the source of truth. The outermost scope reloads
it, every scope nested inside (on the same thread, through the
re-entrant lock) shares that working copy, and the outermost scope
flushes it once before the lock is released. A use case that wraps its
reads and writes in one ``writing()`` block is therefore atomic with
respect to every other caller in the process.

Layout::

    {"products": [...], "changes": [...]}
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

Document = dict[str, list[dict[str, Any]]]


def _empty_document() -> Document:
    return {"products": [], "changes": []}


class JsonStore:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.RLock()
        # Working copy of the outermost scope; only touched under the lock
        self._document: Document | None = None
        self._depth = 0
        self._dirty = False
        self._failed = False
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    @contextmanager
    def reading(self) -> Iterator[Document]:
        """Give read-only access to the current working copy."""
        with self._scope(mutating=False) as document:
            yield document

    @contextmanager
    def writing(self) -> Iterator[Document]:
        """Let the caller mutate the working copy.

        The outermost scope flushes once on exit. Nothing is written if
        any scope inside it raised.
        """
        with self._scope(mutating=True) as document:
            yield document

    @contextmanager
    def _scope(self, mutating: bool) -> Iterator[Document]:
        with self._lock:
            outermost = self._depth == 0
            if outermost:
                self._document = self._load()
                self._dirty = self._failed = False
            self._depth += 1
            try:
                yield self._document
            except BaseException:
                self._failed = True
                raise
            else:
                self._dirty = self._dirty or mutating
            finally:
                self._depth -= 1
                if outermost:
                    document, self._document = self._document, None
                    if self._dirty and not self._failed:
                        self._persist(document)

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> Document:
        document = json.loads(self._file_path.read_text(encoding="utf-8"))
        # Documents written by hand may lack one of the collections
        for key, value in _empty_document().items():
            document.setdefault(key, value)
        return document

    def _persist(self, document: Document) -> None:
        # Write beside the target, then swap, so the old document survives a crash
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as fh:
            fh.write(json.dumps(document, indent=2) + "\n")
            fh.flush()
            os.fsync(fh.fileno())
        try:
            os.replace(tmp_path, self._file_path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
        logger.debug(
            "Flushed %d products and %d changes to %s",
            len(document["products"]), len(document["changes"]), self._file_path,
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist(_empty_document())
            logger.info("Created empty store at %s", self._file_path)
