from flask import Blueprint, current_app, jsonify, request

from ..extensions import media
from ..storage import MediaNotFound, StoreWriteError, UploadRejected

bp = Blueprint("media_api", __name__)


@bp.post("/upload-images")
def upload_images():
    """
    Multipart form-data:
      - images (file, repeated, 1-5 files)
    Returns one /uploads/products/<name> path per file, in upload order.
    """
    files = [f for f in request.files.getlist("images") if f and f.filename]
    if not files:
        return jsonify({"error": "No files uploaded"}), 400

    try:
        paths = media.upload(files)
    except (UploadRejected, StoreWriteError) as e:
        current_app.logger.warning("Upload rejected: %s", e)
        return jsonify({"error": str(e)}), 500

    current_app.logger.info("Stored %d image(s): %s", len(paths), ", ".join(paths))
    return jsonify({
        "success": True,
        "message": f"{len(paths)} file(s) uploaded successfully",
        "paths": paths,
    })


@bp.delete("/delete-image")
def delete_image():
    body = request.get_json(silent=True) or {}
    image_path = body.get("imagePath") if isinstance(body, dict) else None
    if not image_path:
        return jsonify({"error": "Image path is required"}), 400

    try:
        media.delete(image_path)
    except MediaNotFound:
        return jsonify({"error": "Image not found"}), 404
    except StoreWriteError as e:
        return jsonify({"error": str(e)}), 500

    current_app.logger.info("Deleted image %s", image_path)
    return jsonify({"success": True, "message": "Image deleted successfully"})
