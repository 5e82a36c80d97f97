"""
Integration tests for image upload, delete and static serving.
"""
import io

import pytest

from storefront.storage import MediaStore, StoreWriteError


def _upload(client, *files):
    return client.post(
        "/api/upload-images",
        data={"images": [(io.BytesIO(data), name, ctype) for data, name, ctype in files]},
        content_type="multipart/form-data",
    )


@pytest.mark.integration
class TestUploadImages:

    def test_upload_two_then_delete(self, client, png_bytes, jpeg_bytes):
        response = _upload(client, (png_bytes, "a.png", "image/png"), (jpeg_bytes, "b.jpeg", "image/jpeg"))

        assert response.status_code == 200
        data = response.get_json()
        assert data["success"] is True
        assert data["message"] == "2 file(s) uploaded successfully"
        assert len(data["paths"]) == 2
        assert all(p.startswith("/uploads/products/") for p in data["paths"])

        first = data["paths"][0]
        deleted = client.delete("/api/delete-image", json={"imagePath": first})
        assert deleted.status_code == 200
        assert deleted.get_json() == {"success": True, "message": "Image deleted successfully"}

        again = client.delete("/api/delete-image", json={"imagePath": first})
        assert again.status_code == 404
        assert again.get_json() == {"error": "Image not found"}

    def test_uploaded_file_is_served(self, client, png_bytes):
        path = _upload(client, (png_bytes, "a.png", "image/png")).get_json()["paths"][0]

        served = client.get(path)

        assert served.status_code == 200
        assert served.data == png_bytes
        served.close()

    def test_missing_upload_is_404(self, client):
        assert client.get("/uploads/products/product-0-0.png").status_code == 404

    def test_no_files_is_400(self, client):
        response = client.post("/api/upload-images", data={}, content_type="multipart/form-data")

        assert response.status_code == 400
        assert response.get_json() == {"error": "No files uploaded"}

    def test_gif_rejected(self, client, upload_root):
        response = _upload(client, (b"GIF89a", "anim.gif", "image/png"))

        assert response.status_code == 500
        assert "Only image files" in response.get_json()["error"]
        assert list((upload_root / "products").iterdir()) == []

    def test_wrong_content_type_rejected(self, client, png_bytes):
        response = _upload(client, (png_bytes, "fake.png", "application/octet-stream"))

        assert response.status_code == 500

    def test_six_files_rejected(self, client, png_bytes, upload_root):
        files = [(png_bytes, f"{i}.png", "image/png") for i in range(6)]

        response = _upload(client, *files)

        assert response.status_code == 500
        assert "Too many files" in response.get_json()["error"]
        assert list((upload_root / "products").iterdir()) == []

    def test_six_mib_file_rejected(self, client):
        response = _upload(client, (b"\0" * (6 * 1024 * 1024), "huge.png", "image/png"))

        assert response.status_code == 500
        assert "too large" in response.get_json()["error"]

    def test_upload_does_not_touch_records(self, client, png_bytes):
        _upload(client, (png_bytes, "a.png", "image/png"))

        assert client.get("/products").get_json() == []

    def test_disk_failure_is_500(self, client, png_bytes, mocker):
        mock_media = mocker.Mock(spec=MediaStore)
        mock_media.upload.side_effect = StoreWriteError("disk full")
        mocker.patch("storefront.routes.media_api.media", mock_media)

        response = _upload(client, (png_bytes, "a.png", "image/png"))

        assert response.status_code == 500
        assert response.get_json() == {"error": "disk full"}


@pytest.mark.integration
class TestDeleteImage:

    def test_missing_image_path_is_400(self, client):
        response = client.delete("/api/delete-image", json={})

        assert response.status_code == 400
        assert response.get_json() == {"error": "Image path is required"}

    def test_no_body_is_400(self, client):
        assert client.delete("/api/delete-image").status_code == 400

    def test_traversal_path_is_404(self, client, db_file):
        response = client.delete("/api/delete-image", json={"imagePath": "/uploads/products/../../db.json"})

        assert response.status_code == 404
        assert db_file.exists()

    def test_deleting_record_keeps_its_images(self, client, png_bytes):
        path = _upload(client, (png_bytes, "a.png", "image/png")).get_json()["paths"][0]
        client.post("/products", json={"name": "Shirt", "images": [path]})

        client.delete("/products/1")

        response = client.get(path)
        assert response.status_code == 200
        response.close()
