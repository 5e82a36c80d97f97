import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


class Config:
    BASE_DIR = Path(__file__).resolve().parent.parent
    DB_PATH = Path(os.getenv("STOREFRONT_DB_PATH", BASE_DIR / "db.json"))
    UPLOAD_ROOT = Path(os.getenv("STOREFRONT_UPLOAD_ROOT", BASE_DIR / "public" / "uploads"))
    UPLOAD_SUBDIR = "products"
    UPLOAD_URL_PREFIX = "/uploads"

    ALLOWED_EXTS = {".jpeg", ".jpg", ".png", ".webp"}
    ALLOWED_MIMETYPES = {"image/jpeg", "image/jpg", "image/png", "image/webp"}
    MAX_UPLOAD_FILES = 5
    MAX_UPLOAD_BYTES = 5 * 1024 * 1024

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class DevConfig(Config):
    DEBUG = True


class ProdConfig(Config):
    DEBUG = False
