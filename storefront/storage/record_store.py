from pathlib import Path
import json
import logging
from typing import Any, Dict, List, Optional

from .errors import RecordNotFound, StoreLoadError, StoreWriteError
from .records import merge_record, next_id, same_id

log = logging.getLogger(__name__)


class RecordStore:
    """
    All collections in one JSON document, held in memory.

    The document is read once (``load``) and rewritten in full after every
    create/update/delete (``persist``). There is no locking: when two writers
    race, whichever persists last wins.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else None
        self._doc: Dict[str, Any] = {}
        if self.path is not None:
            self.load()

    def init_app(self, app):
        self.path = Path(app.config["DB_PATH"])
        self.load()
        app.extensions["record_store"] = self
        app.logger.info(
            "Loaded %s (%s)",
            self.path,
            ", ".join(f"{name}={count}" for name, count in self.counts().items()) or "empty",
        )

    def load(self):
        if self.path is None:
            raise StoreLoadError("No backing document configured")
        try:
            with self.path.open("r", encoding="utf-8") as f:
                doc = json.load(f)
        except FileNotFoundError as e:
            raise StoreLoadError(f"Backing document not found: {self.path}") from e
        except (OSError, ValueError) as e:
            raise StoreLoadError(f"Cannot read backing document {self.path}: {e}") from e
        if not isinstance(doc, dict):
            raise StoreLoadError(f"Backing document {self.path} must hold a JSON object")
        self._doc = doc

    def persist(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self._doc, f, indent=2, ensure_ascii=False)
        except OSError as e:
            log.exception("Failed to write %s", self.path)
            raise StoreWriteError(str(e)) from e

    def _collection(self, name: str, create: bool = False) -> List[Dict[str, Any]]:
        items = self._doc.get(name)
        if isinstance(items, list):
            return items
        if not create:
            return []
        self._doc[name] = []
        return self._doc[name]

    def _index(self, name: str, record_id) -> int:
        for i, record in enumerate(self._collection(name)):
            if same_id(record, record_id):
                return i
        raise RecordNotFound(name, record_id)

    def counts(self) -> Dict[str, int]:
        return {name: len(items) for name, items in self._doc.items() if isinstance(items, list)}

    def list(self, name: str) -> List[Dict[str, Any]]:
        return list(self._collection(name))

    def get(self, name: str, record_id) -> Dict[str, Any]:
        return self._collection(name)[self._index(name, record_id)]

    def create(self, name: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        items = self._collection(name, create=True)
        record = {"id": next_id(items)}
        record.update({k: v for k, v in payload.items() if k != "id"})
        items.append(record)
        self.persist()
        return record

    def update(self, name: str, record_id, payload: Dict[str, Any]) -> Dict[str, Any]:
        i = self._index(name, record_id)
        items = self._collection(name)
        items[i] = merge_record(items[i], payload, record_id)
        self.persist()
        return items[i]

    def delete(self, name: str, record_id) -> Dict[str, Any]:
        i = self._index(name, record_id)
        removed = self._collection(name).pop(i)
        self.persist()
        return removed
