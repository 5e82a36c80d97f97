from __future__ import annotations

from ..resources import RESOURCES
from ..storage import RecordStore
from ..storage.records import record_images


def _matches(record: dict, fields: tuple[str, ...], query: str) -> bool:
    for field in fields:
        value = record.get(field)
        if isinstance(value, str) and query in value.lower():
            return True
    return False


def search_records(store: RecordStore, query: str) -> list[dict]:
    """
    Case-insensitive substring search over the searchable collections.

    Hits keep collection order (products, event products, events) and are
    tagged with ``type`` and ``category`` so the navbar can link them.
    """
    # Only the blank check trims; matching uses the query as typed
    if not str(query or "").strip():
        return []
    q = str(query).lower()

    out: list[dict] = []
    for resource in RESOURCES:
        if not resource.search_fields:
            continue
        for record in store.list(resource.name):
            if not _matches(record, resource.search_fields, q):
                continue
            hit = {**record, "type": resource.search_type, "category": resource.category}
            if resource.has_gallery:
                hit["images"] = record_images(record)
            out.append(hit)
    return out
