import re
from typing import Any, Dict, Iterable, List

_LEADING_DIGITS = re.compile(r"\s*([0-9]+)")


def same_id(record: Dict[str, Any], record_id) -> bool:
    """Ids compare as strings, so 3 and "3" name the same record."""
    return str(record.get("id")) == str(record_id)


def _numeric_id(record: Dict[str, Any]) -> int:
    # Leading digits only: "12abc" -> 12, "3.5" -> 3, "abc" -> 0
    m = _LEADING_DIGITS.match(str(record.get("id", "")))
    return int(m.group(1)) if m else 0


def next_id(records: Iterable[Dict[str, Any]]) -> str:
    """Next id for a collection: one past the largest numeric id, or "1"."""
    records = list(records)
    if not records:
        return "1"
    return str(max(_numeric_id(r) for r in records) + 1)


def merge_record(existing: Dict[str, Any], patch: Dict[str, Any], record_id) -> Dict[str, Any]:
    """
    Shallow field union of ``existing`` and ``patch``.

    Fields in ``patch`` overwrite fields in ``existing`` wholesale; nested
    lists and objects are replaced, not merged. The id is always pinned to
    ``record_id`` regardless of what the patch carries.
    """
    merged = dict(existing)
    merged.update(patch)
    merged["id"] = str(record_id)
    return merged


def record_images(record: Dict[str, Any]) -> List[str]:
    # Older product records carry a single "image" instead of "images".
    images = record.get("images")
    if isinstance(images, list):
        return [str(i) for i in images if i]
    if isinstance(images, str) and images:
        return [images]
    image = record.get("image")
    return [image] if isinstance(image, str) and image else []
