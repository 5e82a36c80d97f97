"""
Shared test fixtures and configuration for storefront tests.
"""
import io
import json
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from storefront import create_app
from storefront.config import Config
from storefront.storage import MediaStore, RecordStore


EMPTY_DOCUMENT = {
    "products": [],
    "event-products": [],
    "events": [],
    "testimonials": [],
}


@pytest.fixture
def db_file(tmp_path: Path) -> Path:
    """Backing document with all four collections present and empty."""
    path = tmp_path / "db.json"
    path.write_text(json.dumps(EMPTY_DOCUMENT), encoding="utf-8")
    return path


@pytest.fixture
def upload_root(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def app(db_file: Path, upload_root: Path) -> Flask:
    """Create a Flask application wired to a temporary document and upload root."""

    class TestConfig(Config):
        TESTING = True
        DB_PATH = db_file
        UPLOAD_ROOT = upload_root

    yield create_app(TestConfig)


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def record_store(db_file: Path) -> RecordStore:
    return RecordStore(db_file)


@pytest.fixture
def media_store(upload_root: Path) -> MediaStore:
    return MediaStore(upload_root)


def _encode_image(fmt: str, size: tuple = (20, 20), color: tuple = (255, 0, 0)) -> bytes:
    """Encode a small solid-colour image with Pillow."""
    from PIL import Image

    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, fmt)
    return buf.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return _encode_image("PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    return _encode_image("JPEG", color=(0, 0, 255))
