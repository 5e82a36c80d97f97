from flask import Blueprint, send_from_directory

from ..extensions import media

bp = Blueprint("uploads", __name__)


@bp.get("/<path:filename>")
def serve_upload(filename):
    # <url prefix>/products/<name> -> <upload root>/products/<name>
    return send_from_directory(media.upload_root, filename)
