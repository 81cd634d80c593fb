"""
Flat-file persistence for the website.

Every entity type lives in one JSON file under the data directory: arrays for
record collections (properties, inquiries, content pages, ...) and objects for
singleton page documents (settings, home page, ...). A file that does not
exist yet is created from a default on first read.
"""
import json
import logging
import os
import tempfile
import threading
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """A data file exists but cannot be parsed."""


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_id() -> str:
    return str(uuid.uuid4())


def _empty_list() -> list:
    return []


class JSONStore:
    def __init__(self, data_dir: str):
        self.data_dir = data_dir
        self._locks: Dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def path(self, name: str) -> str:
        return os.path.join(self.data_dir, name)

    def _lock(self, name: str) -> threading.RLock:
        with self._locks_guard:
            if name not in self._locks:
                self._locks[name] = threading.RLock()
            return self._locks[name]

    def load(self, name: str, default: Callable[[], Any] = _empty_list) -> Any:
        path = self.path(name)
        with self._lock(name):
            if not os.path.exists(path):
                logger.info("%s not found, creating with defaults", name)
                data = default()
                self.save(name, data)
                return data
            try:
                with open(path, "r", encoding="utf-8") as f:
                    return json.load(f)
            except json.JSONDecodeError as e:
                raise StoreError(f"{name} does not contain valid JSON") from e

    def save(self, name: str, data: Any) -> None:
        os.makedirs(self.data_dir, exist_ok=True)
        with self._lock(name):
            fd, tmp_path = tempfile.mkstemp(dir=self.data_dir, prefix=f".{name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.path(name))
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise

    @contextmanager
    def transaction(self, name: str, default: Callable[[], Any] = _empty_list):
        """Read ``name``, hand it to the block, and write it back on clean exit."""
        with self._lock(name):
            data = self.load(name, default)
            yield data
            self.save(name, data)

    # Collection helpers, for files holding a JSON array of records with an "id".

    def get_documents(self, name: str) -> List[Dict[str, Any]]:
        return self.load(name)

    def find_document(self, name: str, value: Any, key: str = "id") -> Optional[Dict[str, Any]]:
        for doc in self.load(name):
            if doc.get(key) == value:
                return doc
        return None

    def create_document(self, name: str, doc: Dict[str, Any]) -> Dict[str, Any]:
        doc.setdefault("id", new_id())
        with self.transaction(name) as docs:
            docs.append(doc)
        return doc

    def replace_document(self, name: str, doc_id: str, doc: Dict[str, Any]) -> bool:
        with self._lock(name):
            docs = self.load(name)
            for i, existing in enumerate(docs):
                if existing.get("id") == doc_id:
                    docs[i] = doc
                    self.save(name, docs)
                    return True
        return False

    def delete_documents(self, name: str, ids: Iterable[str]) -> int:
        wanted = set(ids)
        with self._lock(name):
            docs = self.load(name)
            kept = [d for d in docs if d.get("id") not in wanted]
            removed = len(docs) - len(kept)
            if removed:
                self.save(name, kept)
        return removed
