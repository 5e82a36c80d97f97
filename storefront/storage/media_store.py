from pathlib import Path
import logging
import os
import random
import time
from typing import Iterable, List, Optional

from werkzeug.datastructures import FileStorage
from werkzeug.utils import safe_join

from .errors import MediaNotFound, StoreWriteError, UploadRejected

log = logging.getLogger(__name__)


def _stream_size(storage: FileStorage) -> int:
    stream = storage.stream
    pos = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(pos)
    return size


class MediaStore:
    """
    Uploaded images on local disk, addressed by URL paths like
    ``/uploads/products/product-1700000000000-123456789.png``.

    Knows nothing about records: uploading does not touch the record store and
    deleting a record leaves its images in place.
    """

    def __init__(
        self,
        upload_root: Optional[Path] = None,
        subdir: str = "products",
        url_prefix: str = "/uploads",
        allowed_exts: Iterable[str] = (".jpeg", ".jpg", ".png", ".webp"),
        allowed_mimetypes: Iterable[str] = ("image/jpeg", "image/jpg", "image/png", "image/webp"),
        max_files: int = 5,
        max_bytes: int = 5 * 1024 * 1024,
    ):
        self.upload_root = Path(upload_root) if upload_root is not None else None
        self.subdir = subdir
        self.url_prefix = url_prefix.rstrip("/")
        self.allowed_exts = {e.lower() for e in allowed_exts}
        self.allowed_mimetypes = {m.lower() for m in allowed_mimetypes}
        self.max_files = max_files
        self.max_bytes = max_bytes
        if self.upload_root is not None:
            self.directory.mkdir(parents=True, exist_ok=True)

    def init_app(self, app):
        cfg = app.config
        self.upload_root = Path(cfg["UPLOAD_ROOT"])
        self.subdir = cfg.get("UPLOAD_SUBDIR", self.subdir)
        self.url_prefix = cfg.get("UPLOAD_URL_PREFIX", self.url_prefix).rstrip("/")
        self.allowed_exts = {e.lower() for e in cfg.get("ALLOWED_EXTS", self.allowed_exts)}
        self.allowed_mimetypes = {m.lower() for m in cfg.get("ALLOWED_MIMETYPES", self.allowed_mimetypes)}
        self.max_files = cfg.get("MAX_UPLOAD_FILES", self.max_files)
        self.max_bytes = cfg.get("MAX_UPLOAD_BYTES", self.max_bytes)
        self.directory.mkdir(parents=True, exist_ok=True)
        app.extensions["media_store"] = self
        app.logger.info("Uploads directory: %s", self.directory)

    @property
    def directory(self) -> Path:
        return self.upload_root / self.subdir

    @property
    def path_prefix(self) -> str:
        return f"{self.url_prefix}/{self.subdir}/"

    def _check(self, storage: FileStorage) -> str:
        """Return the lower-cased extension of an acceptable file, else raise."""
        # Extension comes from the raw client name; stored names are generated
        ext = Path(storage.filename or "").suffix.lower()
        mimetype = (storage.mimetype or "").lower()
        if ext not in self.allowed_exts or mimetype not in self.allowed_mimetypes:
            raise UploadRejected("Only image files (jpeg, jpg, png, webp) are allowed!")
        if _stream_size(storage) > self.max_bytes:
            raise UploadRejected(
                f"File too large: {storage.filename} exceeds {self.max_bytes // (1024 * 1024)}MB limit"
            )
        return ext

    def _unique_name(self, ext: str) -> str:
        stamp = int(time.time() * 1000)
        return f"product-{stamp}-{random.randint(0, 10 ** 9)}{ext}"

    def upload(self, files: List[FileStorage]) -> List[str]:
        """
        Store every file in ``files`` and return one URL path per file, in order.

        The whole batch is checked before anything is written, so a rejected
        file means no file from the batch lands on disk.
        """
        if len(files) > self.max_files:
            raise UploadRejected(f"Too many files: at most {self.max_files} images per upload")
        exts = [self._check(f) for f in files]

        written: List[Path] = []
        try:
            for storage, ext in zip(files, exts):
                target = self.directory / self._unique_name(ext)
                while target.exists():
                    target = self.directory / self._unique_name(ext)
                storage.save(target)
                written.append(target)
        except OSError as e:
            log.exception("Upload failed after %d of %d files", len(written), len(files))
            for p in written:
                p.unlink(missing_ok=True)
            raise StoreWriteError(str(e)) from e

        return [f"{self.path_prefix}{p.name}" for p in written]

    def resolve(self, image_path: str) -> Optional[Path]:
        """Map a URL path back to a file inside the upload directory, or None."""
        name = str(image_path or "")
        if name.startswith(self.path_prefix):
            name = name[len(self.path_prefix):]
        joined = safe_join(str(self.directory), name) if name else None
        return Path(joined) if joined else None

    def delete(self, image_path: str):
        target = self.resolve(image_path)
        if target is None or not target.is_file():
            raise MediaNotFound(image_path)
        try:
            target.unlink()
        except FileNotFoundError as e:
            raise MediaNotFound(image_path) from e
        except OSError as e:
            log.exception("Failed to delete %s", target)
            raise StoreWriteError(str(e)) from e
