from .errors import (
    MediaNotFound,
    RecordNotFound,
    StorageError,
    StoreLoadError,
    StoreWriteError,
    UploadRejected,
)
from .media_store import MediaStore
from .record_store import RecordStore

__all__ = [
    "MediaNotFound",
    "MediaStore",
    "RecordNotFound",
    "RecordStore",
    "StorageError",
    "StoreLoadError",
    "StoreWriteError",
    "UploadRejected",
]
